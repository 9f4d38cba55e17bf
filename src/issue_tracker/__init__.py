"""Issue tracker built on self-executing commands and event-recording aggregates."""

__version__ = "0.1.0"
