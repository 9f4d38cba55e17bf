"""Mapper for StoredEvent ORM ↔ DomainEvent conversion."""

from datetime import UTC, datetime
from typing import Any

from pydantic import TypeAdapter

from issue_tracker.domain.common.aggregate_root import AggregateRoot
from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.common.exceptions import UnknownEventTypeError
from issue_tracker.domain.issues.events import IssueClosed, IssueCommented, IssueOpened
from issue_tracker.models import StoredEvent as StoredEventORM

ISSUE_EVENT_TYPES: tuple[type[DomainEvent[Any]], ...] = (
    IssueOpened,
    IssueCommented,
    IssueClosed,
)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored timestamps are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class DomainEventMapper:
    """Mapper for StoredEvent ORM ↔ DomainEvent conversion."""

    def __init__(self, event_types: tuple[type[DomainEvent[Any]], ...] = ISSUE_EVENT_TYPES) -> None:
        self._adapters: dict[str, TypeAdapter[DomainEvent[Any]]] = {
            event_type.__name__: TypeAdapter(event_type) for event_type in event_types
        }

    @property
    def registered_types(self) -> list[str]:
        """Names of the event types this mapper can decode."""
        return sorted(self._adapters)

    def to_domain(self, orm_model: StoredEventORM) -> DomainEvent[Any]:
        """Convert a stored record back into its domain event."""
        adapter = self._adapters.get(orm_model.event_type)
        if adapter is None:
            raise UnknownEventTypeError(orm_model.event_type)

        return adapter.validate_python(
            {
                **orm_model.payload,
                "event_id": orm_model.event_id,
                "occurred_at": _as_utc(orm_model.occurred_at),
            }
        )

    def to_orm(
        self, event: DomainEvent[Any], aggregate: AggregateRoot[Any], version: int
    ) -> StoredEventORM:
        """Convert a domain event into a new record at the given aggregate version."""
        if event.event_type not in self._adapters:
            raise UnknownEventTypeError(event.event_type)

        return StoredEventORM(
            event_id=str(event.event_id),
            aggregate_id=str(aggregate.id),
            aggregate_type=aggregate.__class__.__name__,
            version=version,
            event_type=event.event_type,
            payload=event.payload(),
            occurred_at=event.occurred_at.astimezone(UTC),
        )
