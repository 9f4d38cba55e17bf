"""
Issues domain module.

The Issue aggregate, its comments, and the commands and events that
drive it.
"""

from .commands import CloseIssue, CommentIssue, OpenIssue
from .entities import Issue, IssueComment
from .events import IssueClosed, IssueCommented, IssueOpened

__all__ = [
    "CloseIssue",
    "CommentIssue",
    "Issue",
    "IssueClosed",
    "IssueComment",
    "IssueCommented",
    "IssueOpened",
    "OpenIssue",
]
