"""Common value objects shared across all domain modules."""

from .ids import CommentId, IssueId

__all__ = [
    "CommentId",
    "IssueId",
]
