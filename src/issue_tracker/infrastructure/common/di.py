from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from issue_tracker.core import container
from issue_tracker.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency that builds `provider` for one request.

    The container's `db` dependency is bound to the request session only
    while the object graph is constructed; repositories keep the session
    they were built with.
    """

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency
