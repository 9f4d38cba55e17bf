"""Event-sourced repository for Issue aggregates."""

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.common.exceptions import ConcurrencyError, EntityNotFoundError
from issue_tracker.domain.common.value_objects import IssueId
from issue_tracker.domain.issues.entities.issue import Issue
from issue_tracker.infrastructure.issues.mappers.domain_event_mapper import DomainEventMapper
from issue_tracker.models import StoredEvent as StoredEventORM

logger = structlog.get_logger(__name__)


class IssueRepository:
    """
    Repository for Issue aggregates.

    Issues are not stored as rows: their committed events are. Loading
    replays the events in version order onto an empty Issue.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DomainEventMapper()

    def find(self, aggregate_id: IssueId) -> Issue:
        """
        Load an issue by replaying its history.

        Args:
            aggregate_id: The issue ID

        Returns:
            Issue aggregate at its latest version

        Raises:
            EntityNotFoundError: If the issue has no recorded events
        """
        events = self.history(aggregate_id)
        if not events:
            raise EntityNotFoundError("Issue", aggregate_id)

        issue = Issue.create_with_id(aggregate_id)
        issue.replay(events)
        return issue

    def history(self, aggregate_id: IssueId) -> list[DomainEvent[Issue]]:
        """
        Get the stored events of an issue.

        Args:
            aggregate_id: The issue ID

        Returns:
            Events ordered by version, empty if the issue does not exist
        """
        stmt = (
            select(StoredEventORM)
            .where(StoredEventORM.aggregate_id == str(aggregate_id))
            .order_by(StoredEventORM.version)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def exists(self, aggregate_id: IssueId) -> bool:
        """
        Check whether any events are stored for an issue.

        Args:
            aggregate_id: The issue ID

        Returns:
            True if the issue exists
        """
        return self._current_version(aggregate_id) > 0

    def save(self, aggregate: Issue) -> None:
        """
        Append the issue's uncommitted events to its history.

        Nothing is written when there are no pending events. The pending
        events are committed (drained) only once the database commit
        succeeded; on any failure the issue keeps them and its version.

        Args:
            aggregate: The issue to save

        Raises:
            ConcurrencyError: If the stored version moved since load
        """
        expected_version = aggregate.version
        events = aggregate.pending_events
        if not events:
            return

        actual_version = self._current_version(aggregate.id)
        if actual_version != expected_version:
            raise ConcurrencyError(aggregate.id, expected_version, actual_version)

        for offset, event in enumerate(events, start=1):
            self.db.add(self.mapper.to_orm(event, aggregate, expected_version + offset))

        try:
            self.db.commit()
        except IntegrityError as err:
            # Another writer appended the same versions first
            self.db.rollback()
            raise ConcurrencyError(aggregate.id, expected_version) from err
        except Exception:
            self.db.rollback()
            raise

        aggregate.commit()
        aggregate.mark_persisted(len(events))

        logger.info(
            "saved_aggregate_events",
            aggregate_type="Issue",
            aggregate_id=str(aggregate.id),
            event_types=[event.event_type for event in events],
            version=aggregate.version,
        )

    def _current_version(self, aggregate_id: IssueId) -> int:
        stmt = select(func.max(StoredEventORM.version)).where(
            StoredEventORM.aggregate_id == str(aggregate_id)
        )
        return self.db.execute(stmt).scalar() or 0
