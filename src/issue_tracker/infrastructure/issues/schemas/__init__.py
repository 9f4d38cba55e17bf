"""Issues context schemas."""

from issue_tracker.infrastructure.issues.schemas.issue_schemas import (
    Issue,
    IssueCommandResponse,
    IssueComment,
    IssueCommentRequest,
    IssueCreateRequest,
    IssueEvent,
    IssueEventsResponse,
)

__all__ = [
    "Issue",
    "IssueCommandResponse",
    "IssueComment",
    "IssueCommentRequest",
    "IssueCreateRequest",
    "IssueEvent",
    "IssueEventsResponse",
]
