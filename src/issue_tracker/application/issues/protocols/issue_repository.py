"""Protocol for Issue repository."""

from typing import Protocol

from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.common.value_objects import IssueId
from issue_tracker.domain.issues.entities.issue import Issue


class IssueRepositoryProtocol(Protocol):
    """Protocol for Issue repository operations."""

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
        ...

    def save(self, aggregate: Issue) -> None:
        """
        Append the issue's uncommitted events to its history.

        Args:
            aggregate: The issue to save

        Raises:
            ConcurrencyError: If the stored version moved since load
        """
        ...

    def exists(self, aggregate_id: IssueId) -> bool:
        """
        Check whether any events are stored for an issue.

        Args:
            aggregate_id: The issue ID

        Returns:
            True if the issue exists
        """
        ...

    def history(self, aggregate_id: IssueId) -> list[DomainEvent[Issue]]:
        """
        Get the stored events of an issue.

        Args:
            aggregate_id: The issue ID

        Returns:
            Events ordered by version, empty if the issue does not exist
        """
        ...
