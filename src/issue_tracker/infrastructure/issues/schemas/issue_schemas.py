"""Pydantic schemas for Issue API request/response validation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.issues.entities.issue import Issue as IssueEntity


class IssueComment(BaseModel):
    """Schema for a comment on an issue."""

    id: str
    message: str


class Issue(BaseModel):
    """Schema for Issue response."""

    id: str
    title: str
    is_closed: bool
    version: int = Field(..., description="Number of events recorded for this issue")
    comments: list[IssueComment]

    @classmethod
    def from_entity(cls, issue: IssueEntity) -> "Issue":
        """Build the response from the aggregate, comments in a stable order."""
        comments = sorted(issue.comments, key=lambda c: (c.message, str(c.id)))
        return cls(
            id=str(issue.id),
            title=issue.title,
            is_closed=issue.is_closed,
            version=issue.version,
            comments=[IssueComment(id=str(c.id), message=c.message) for c in comments],
        )


class IssueCreateRequest(BaseModel):
    """Schema for opening a new issue."""

    title: str = Field(..., min_length=1, max_length=500, description="Title of the issue")


class IssueCommentRequest(BaseModel):
    """Schema for commenting on an issue. A blank message records nothing."""

    message: str = Field(..., description="Comment text")


class IssueCommandResponse(BaseModel):
    """Schema for the outcome of a command executed on an issue."""

    events_recorded: int = Field(..., description="Number of events the command produced")
    issue: Issue = Field(..., description="Issue after the command")


class IssueEvent(BaseModel):
    """Schema for a recorded issue event."""

    event_id: str
    event_type: str
    occurred_at: datetime
    data: dict[str, Any]

    @classmethod
    def from_event(cls, event: DomainEvent[Any]) -> "IssueEvent":
        return cls(
            event_id=str(event.event_id),
            event_type=event.event_type,
            occurred_at=event.occurred_at,
            data=event.payload(),
        )


class IssueEventsResponse(BaseModel):
    """Schema for the recorded history of an issue."""

    issue_id: str
    events: list[IssueEvent]
