"""
Issue commands.

Each command decides, from the issue's current state, which events
happen. None of them mutate the issue or raise on unmet preconditions:
they return no events instead.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from issue_tracker.domain.common.command import Command
from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.common.value_objects import IssueId
from issue_tracker.domain.issues.entities.issue import Issue
from issue_tracker.domain.issues.entities.issue_comment import IssueComment
from issue_tracker.domain.issues.events.issue_events import (
    IssueClosed,
    IssueCommented,
    IssueOpened,
)


def _is_blank(text: str | None) -> bool:
    return not text or not text.strip()


@dataclass(frozen=True)
class OpenIssue(Command[Issue]):
    """Give a new issue its title."""

    issue_id: IssueId
    title: str

    @property
    def aggregate_id(self) -> IssueId:
        return self.issue_id

    def execute_on(self, aggregate: Issue) -> Iterator[DomainEvent[Issue]]:
        if _is_blank(self.title) or aggregate.is_opened:
            return
        yield IssueOpened(title=self.title.strip())


@dataclass(frozen=True)
class CommentIssue(Command[Issue]):
    """
    Leave a comment on an issue.

    A blank message is nothing to record, so it yields no event.
    """

    issue_id: IssueId
    message: str

    @property
    def aggregate_id(self) -> IssueId:
        return self.issue_id

    def execute_on(self, aggregate: Issue) -> Iterator[DomainEvent[Issue]]:
        if _is_blank(self.message):
            return
        yield IssueCommented.from_comment(IssueComment.create(self.message))


@dataclass(frozen=True)
class CloseIssue(Command[Issue]):
    """Close an issue that is still open."""

    issue_id: IssueId

    @property
    def aggregate_id(self) -> IssueId:
        return self.issue_id

    def execute_on(self, aggregate: Issue) -> Iterator[DomainEvent[Issue]]:
        if aggregate.is_closed:
            return
        yield IssueClosed()
