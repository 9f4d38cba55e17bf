"""
IssueComment entity.
"""

from dataclasses import dataclass

from issue_tracker.domain.common.entity import Entity
from issue_tracker.domain.common.value_objects import CommentId


@dataclass(frozen=True, eq=False)
class IssueComment(Entity[CommentId]):
    """
    A comment left on an issue.

    Immutable once created. Two comments are the same comment when
    their identifiers match, whatever their messages say.
    """

    id: CommentId
    message: str

    @classmethod
    def create(cls, message: str) -> "IssueComment":
        """Create a comment with a freshly generated identifier."""
        return cls(id=CommentId.generate(), message=message)
