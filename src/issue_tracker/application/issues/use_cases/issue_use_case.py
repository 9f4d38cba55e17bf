"""Use case for issue operations."""

import structlog

from issue_tracker.application.common.command import AggregateCommandHandler, CommandOutcome
from issue_tracker.application.issues.protocols.issue_repository import IssueRepositoryProtocol
from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.common.exceptions import EntityNotFoundError, ValidationError
from issue_tracker.domain.common.value_objects import IssueId
from issue_tracker.domain.issues.commands import CloseIssue, CommentIssue, OpenIssue
from issue_tracker.domain.issues.entities.issue import Issue

logger = structlog.get_logger(__name__)


class IssueUseCase:
    """Use case for opening, commenting on, closing and reading issues."""

    def __init__(
        self,
        issue_repository: IssueRepositoryProtocol,
        command_handler: AggregateCommandHandler[Issue],
    ) -> None:
        """Initialize use case with the repository and the generic command handler."""
        self.issue_repository = issue_repository
        self.command_handler = command_handler

    def open_issue(self, title: str) -> Issue:
        """
        Open a new issue.

        Args:
            title: Title of the issue

        Returns:
            The opened issue, already persisted

        Raises:
            ValidationError: If the title is blank
        """
        issue = Issue.create()
        issue.execute(OpenIssue(issue_id=issue.id, title=title))
        if not issue.has_uncommitted_events:
            raise ValidationError("Issue title cannot be blank", field="title")

        self.issue_repository.save(issue)

        logger.info("opened_issue", issue_id=str(issue.id), version=issue.version)
        return issue

    def comment_issue(self, issue_id: str, message: str) -> CommandOutcome[Issue]:
        """
        Comment on an issue.

        Args:
            issue_id: ID of the issue
            message: Comment text; a blank message records nothing

        Returns:
            The issue with the events recorded (none for a blank message)

        Raises:
            EntityNotFoundError: If the issue does not exist
        """
        return self.command_handler.handle(
            CommentIssue(issue_id=self._parse_id(issue_id), message=message)
        )

    def close_issue(self, issue_id: str) -> CommandOutcome[Issue]:
        """
        Close an issue.

        Args:
            issue_id: ID of the issue

        Returns:
            The issue with the events recorded (none if it was already closed)

        Raises:
            EntityNotFoundError: If the issue does not exist
        """
        return self.command_handler.handle(CloseIssue(issue_id=self._parse_id(issue_id)))

    def get_issue(self, issue_id: str) -> Issue:
        """
        Get an issue in its latest state.

        Args:
            issue_id: ID of the issue

        Returns:
            Issue aggregate

        Raises:
            EntityNotFoundError: If the issue does not exist
        """
        return self.issue_repository.find(self._parse_id(issue_id))

    def get_issue_history(self, issue_id: str) -> list[DomainEvent[Issue]]:
        """
        Get the recorded events of an issue.

        Raises:
            EntityNotFoundError: If the issue does not exist
        """
        issue_id_vo = self._parse_id(issue_id)
        events = self.issue_repository.history(issue_id_vo)
        if not events:
            raise EntityNotFoundError("Issue", issue_id_vo)
        return events

    @staticmethod
    def _parse_id(issue_id: str) -> IssueId:
        try:
            return IssueId.from_string(issue_id)
        except ValueError as err:
            # A malformed id can never match a stored issue
            raise EntityNotFoundError("Issue", issue_id) from err
