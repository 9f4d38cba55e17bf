"""
Issue aggregate root.
"""

from dataclasses import dataclass, field

from issue_tracker.domain.common.aggregate_root import AggregateRoot
from issue_tracker.domain.common.value_objects import IssueId
from issue_tracker.domain.issues.entities.issue_comment import IssueComment


@dataclass(eq=False)
class Issue(AggregateRoot[IssueId]):
    """
    Issue aggregate root.

    State changes only through events applied by `execute`; there are
    no command-specific methods here. Only rules shared by every
    command would belong on this class.

    Attributes:
        id: Issue identifier, generated when not supplied
        title: Empty until the issue is opened
        is_closed: Whether the issue was closed
        comments: Comments on this issue, unique by comment identity
    """

    id: IssueId = field(default_factory=IssueId.generate)
    title: str = ""
    is_closed: bool = False
    comments: set[IssueComment] = field(default_factory=set)

    @property
    def is_opened(self) -> bool:
        """Whether an IssueOpened event has been applied."""
        return bool(self.title)

    @classmethod
    def create(cls) -> "Issue":
        """Create a new, empty issue with a fresh identifier."""
        return cls(id=IssueId.generate())

    @classmethod
    def create_with_id(cls, id: IssueId) -> "Issue":
        """Create an empty issue for the given identifier, ready for replay."""
        return cls(id=id)
