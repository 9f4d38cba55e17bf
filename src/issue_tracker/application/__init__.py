"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Command Handlers: Load, execute and save aggregates
- Use Cases: Entry points used by the HTTP layer
- Ports: Interfaces for persistence
"""
