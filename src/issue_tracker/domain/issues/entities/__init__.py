from .issue import Issue
from .issue_comment import IssueComment

__all__ = [
    "Issue",
    "IssueComment",
]
