from .issue_repository import IssueRepository

__all__ = [
    "IssueRepository",
]
