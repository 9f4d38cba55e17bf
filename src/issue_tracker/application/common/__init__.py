"""
Application common module.

Contains base classes for application layer:
- CommandHandler: Handles command execution
- AggregateCommandHandler: The one handler every self-executing command uses
- CommandOutcome: Saved aggregate plus the events a command produced
- AggregateRepositoryProtocol: Port for loading and saving aggregates
"""

from .command import AggregateCommandHandler, CommandHandler, CommandOutcome
from .repository import AggregateRepositoryProtocol

__all__ = [
    "AggregateCommandHandler",
    "AggregateRepositoryProtocol",
    "CommandHandler",
    "CommandOutcome",
]
