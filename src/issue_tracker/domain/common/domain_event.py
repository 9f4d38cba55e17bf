"""
Base class for Domain Events.

Domain Events represent something significant that happened in the domain.
They are immutable records of past occurrences and they know how to apply
themselves to the aggregate they belong to. The aggregate base class stays
generic: it never needs a method per event type.

Example:
    @dataclass(frozen=True)
    class IssueClosed(DomainEvent[Issue]):
        def apply_to(self, aggregate: Issue) -> None:
            aggregate.is_closed = True
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from .aggregate_root import AggregateRoot

TAggregate = TypeVar("TAggregate", bound="AggregateRoot[Any]")


@dataclass(frozen=True)
class DomainEvent(ABC, Generic[TAggregate]):
    """
    Base class for Domain Events.

    Domain Events are:
    - Immutable (frozen dataclass)
    - Named in past tense (IssueCommented, not CommentIssue)
    - Self-contained (carry all data needed to replay what happened)
    - Timestamped (when the event occurred)
    - Self-applying (apply_to mutates the aggregate)

    Subclasses should be decorated with @dataclass(frozen=True)
    and define their specific attributes as primitives so they
    serialize cleanly.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    @abstractmethod
    def apply_to(self, aggregate: TAggregate) -> None:
        """
        Mutate the aggregate's visible state.

        Re-applying the same event is not guaranteed to be idempotent.
        """
        raise NotImplementedError

    def payload(self) -> dict[str, object]:
        """Event-specific attributes, without the id and timestamp metadata."""
        data = self.to_dict()
        for key in ("event_id", "occurred_at", "event_type"):
            data.pop(key, None)
        return data

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result
