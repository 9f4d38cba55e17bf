from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class IssueId(EntityId):
    """Strongly-typed issue identifier."""


@dataclass(frozen=True)
class CommentId(EntityId):
    """Strongly-typed issue comment identifier."""
