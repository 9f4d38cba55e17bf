"""
Issue domain events.

Each event knows how to apply itself to an Issue.
"""

from dataclasses import dataclass
from uuid import UUID

from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.common.value_objects import CommentId
from issue_tracker.domain.issues.entities.issue import Issue
from issue_tracker.domain.issues.entities.issue_comment import IssueComment


@dataclass(frozen=True)
class IssueOpened(DomainEvent[Issue]):
    """An issue was opened with a title."""

    title: str

    def apply_to(self, aggregate: Issue) -> None:
        aggregate.title = self.title


@dataclass(frozen=True)
class IssueCommented(DomainEvent[Issue]):
    """
    A comment was added to an issue.

    Applying the same event twice re-inserts a comment with the same
    identity, which the issue's comment set keeps only once.
    """

    comment_id: UUID
    message: str

    @classmethod
    def from_comment(cls, comment: IssueComment) -> "IssueCommented":
        return cls(comment_id=comment.id.value, message=comment.message)

    def apply_to(self, aggregate: Issue) -> None:
        aggregate.comments.add(IssueComment(id=CommentId(self.comment_id), message=self.message))


@dataclass(frozen=True)
class IssueClosed(DomainEvent[Issue]):
    """An issue was closed."""

    def apply_to(self, aggregate: Issue) -> None:
        aggregate.is_closed = True
