"""Fixtures for application layer tests."""

import pytest

from issue_tracker.application.common.command import AggregateCommandHandler
from issue_tracker.application.issues.use_cases.issue_use_case import IssueUseCase
from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.common.exceptions import EntityNotFoundError
from issue_tracker.domain.common.value_objects import IssueId
from issue_tracker.domain.issues import Issue


class InMemoryIssueRepository:
    """Keeps committed events in a dict, like the event store does in a table."""

    def __init__(self) -> None:
        self.streams: dict[IssueId, list[DomainEvent[Issue]]] = {}
        self.save_calls = 0

    def find(self, aggregate_id: IssueId) -> Issue:
        events = self.history(aggregate_id)
        if not events:
            raise EntityNotFoundError("Issue", aggregate_id)
        issue = Issue.create_with_id(aggregate_id)
        issue.replay(events)
        return issue

    def history(self, aggregate_id: IssueId) -> list[DomainEvent[Issue]]:
        return list(self.streams.get(aggregate_id, []))

    def exists(self, aggregate_id: IssueId) -> bool:
        return aggregate_id in self.streams

    def save(self, aggregate: Issue) -> None:
        self.save_calls += 1
        events = aggregate.pending_events
        if not events:
            return
        self.streams.setdefault(aggregate.id, []).extend(events)
        aggregate.commit()
        aggregate.mark_persisted(len(events))


@pytest.fixture
def repository() -> InMemoryIssueRepository:
    """Create an empty in-memory issue repository."""
    return InMemoryIssueRepository()


@pytest.fixture
def handler(repository: InMemoryIssueRepository) -> AggregateCommandHandler[Issue]:
    """Create the generic command handler over the in-memory repository."""
    return AggregateCommandHandler(repository)


@pytest.fixture
def use_case(
    repository: InMemoryIssueRepository, handler: AggregateCommandHandler[Issue]
) -> IssueUseCase:
    """Create the issue use case over the in-memory repository."""
    return IssueUseCase(issue_repository=repository, command_handler=handler)
