from .issue_events import IssueClosed, IssueCommented, IssueOpened

__all__ = [
    "IssueClosed",
    "IssueCommented",
    "IssueOpened",
]
