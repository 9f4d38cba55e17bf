"""API routes for issue management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from issue_tracker.application.issues.use_cases.issue_use_case import IssueUseCase
from issue_tracker.core import container
from issue_tracker.domain.common.exceptions import DomainError
from issue_tracker.infrastructure.common.di import inject_use_case
from issue_tracker.infrastructure.issues.schemas import (
    Issue,
    IssueCommandResponse,
    IssueCommentRequest,
    IssueCreateRequest,
    IssueEvent,
    IssueEventsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/issues", tags=["issues"])


def _unexpected(action: str, error: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {error!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("", response_model=Issue, status_code=status.HTTP_201_CREATED)
def open_issue(
    request: IssueCreateRequest,
    use_case: IssueUseCase = Depends(inject_use_case(container.issue_use_case)),
) -> Issue:
    """
    Open a new issue.

    Args:
        request: Request containing the issue title
        use_case: IssueUseCase injected via dependency container

    Returns:
        The opened issue

    Raises:
        ValidationError: If the title is blank
    """
    try:
        return Issue.from_entity(use_case.open_issue(request.title))
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("open issue", e) from e


@router.get("/{issue_id}", response_model=Issue, status_code=status.HTTP_200_OK)
def get_issue(
    issue_id: str,
    use_case: IssueUseCase = Depends(inject_use_case(container.issue_use_case)),
) -> Issue:
    """
    Get an issue with its comments.

    Raises:
        EntityNotFoundError: If the issue does not exist
    """
    try:
        return Issue.from_entity(use_case.get_issue(issue_id))
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"get issue {issue_id}", e) from e


@router.post(
    "/{issue_id}/comments",
    response_model=IssueCommandResponse,
    status_code=status.HTTP_200_OK,
)
def comment_issue(
    issue_id: str,
    request: IssueCommentRequest,
    use_case: IssueUseCase = Depends(inject_use_case(container.issue_use_case)),
) -> IssueCommandResponse:
    """
    Comment on an issue.

    A blank message is accepted but records nothing.

    Args:
        issue_id: ID of the issue
        request: Request containing the comment message
        use_case: IssueUseCase injected via dependency container

    Returns:
        Number of events recorded and the updated issue

    Raises:
        EntityNotFoundError: If the issue does not exist
    """
    try:
        outcome = use_case.comment_issue(issue_id, request.message)
        return IssueCommandResponse(
            events_recorded=len(outcome.events),
            issue=Issue.from_entity(outcome.aggregate),
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"comment on issue {issue_id}", e) from e


@router.post(
    "/{issue_id}/close",
    response_model=IssueCommandResponse,
    status_code=status.HTTP_200_OK,
)
def close_issue(
    issue_id: str,
    use_case: IssueUseCase = Depends(inject_use_case(container.issue_use_case)),
) -> IssueCommandResponse:
    """
    Close an issue. Closing a closed issue records nothing.

    Raises:
        EntityNotFoundError: If the issue does not exist
    """
    try:
        outcome = use_case.close_issue(issue_id)
        return IssueCommandResponse(
            events_recorded=len(outcome.events),
            issue=Issue.from_entity(outcome.aggregate),
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"close issue {issue_id}", e) from e


@router.get(
    "/{issue_id}/events",
    response_model=IssueEventsResponse,
    status_code=status.HTTP_200_OK,
)
def get_issue_events(
    issue_id: str,
    use_case: IssueUseCase = Depends(inject_use_case(container.issue_use_case)),
) -> IssueEventsResponse:
    """
    Get the recorded events of an issue, oldest first.

    Raises:
        EntityNotFoundError: If the issue does not exist
    """
    try:
        events = use_case.get_issue_history(issue_id)
        return IssueEventsResponse(
            issue_id=issue_id,
            events=[IssueEvent.from_event(event) for event in events],
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"get events of issue {issue_id}", e) from e
