from .issue_commands import CloseIssue, CommentIssue, OpenIssue

__all__ = [
    "CloseIssue",
    "CommentIssue",
    "OpenIssue",
]
