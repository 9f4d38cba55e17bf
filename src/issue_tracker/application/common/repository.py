"""Protocol for aggregate repositories."""

from typing import Protocol, TypeVar

from issue_tracker.domain.common.aggregate_root import AggregateRoot
from issue_tracker.domain.common.entity import EntityId

TAggregate = TypeVar("TAggregate", bound=AggregateRoot)  # type: ignore[type-arg]
TId = TypeVar("TId", bound=EntityId, contravariant=True)


class AggregateRepositoryProtocol(Protocol[TAggregate, TId]):
    """Protocol for loading and persisting aggregates by identifier."""

    def find(self, aggregate_id: TId) -> TAggregate:
        """
        Load an aggregate by ID.

        Args:
            aggregate_id: The aggregate ID

        Returns:
            The aggregate in its latest persisted state

        Raises:
            EntityNotFoundError: If no aggregate exists with this ID
        """
        ...

    def save(self, aggregate: TAggregate) -> None:
        """
        Persist the aggregate's uncommitted events.

        Args:
            aggregate: The aggregate to save. Its pending events are
                committed (drained) by this call.

        Raises:
            ConcurrencyError: If the aggregate changed since it was loaded
        """
        ...
