"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- AggregateRoot: Consistency boundaries that record domain events
- Command: Intentions that decide which events happen
- DomainEvent: Facts that know how to apply themselves
"""

from .aggregate_root import AggregateRoot, PendingEvents
from .command import Command
from .domain_event import DomainEvent
from .entity import Entity, EntityId
from .exceptions import (
    AggregateMismatchError,
    ConcurrencyError,
    DomainError,
    EntityNotFoundError,
    UnknownEventTypeError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AggregateMismatchError",
    "AggregateRoot",
    "Command",
    "ConcurrencyError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "PendingEvents",
    "UnknownEventTypeError",
    "ValidationError",
    "ValueObject",
]
