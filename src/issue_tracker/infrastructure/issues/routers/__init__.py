from .issues import router as issues_router

__all__ = [
    "issues_router",
]
