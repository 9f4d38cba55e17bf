"""
Base class for self-executing Commands.

Commands represent intentions to change an aggregate. They are named in
imperative form: CommentIssue, CloseIssue, etc. A command carries the
decision logic for turning that intention, combined with the aggregate's
current state, into zero or more domain events.

Example:
    @dataclass(frozen=True)
    class CloseIssue(Command[Issue]):
        issue_id: IssueId

        @property
        def aggregate_id(self) -> IssueId:
            return self.issue_id

        def execute_on(self, aggregate: Issue) -> list[DomainEvent[Issue]]:
            if aggregate.is_closed:
                return []
            return [IssueClosed()]
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .domain_event import DomainEvent
from .entity import EntityId

if TYPE_CHECKING:
    from .aggregate_root import AggregateRoot

TAggregate = TypeVar("TAggregate", bound="AggregateRoot[Any]")


@dataclass(frozen=True)
class Command(ABC, Generic[TAggregate]):
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (CommentIssue, not IssueCommented)
    - Addressed to exactly one aggregate (aggregate_id)
    - Decisions, not mutations: execute_on must not change the
      aggregate and must not perform I/O

    A command whose preconditions are not met returns no events.
    That is a valid outcome, not an error.
    """

    @property
    @abstractmethod
    def aggregate_id(self) -> EntityId:
        """Identifier of the aggregate this command targets."""
        raise NotImplementedError

    @property
    def command_type(self) -> str:
        """Return the command type name for logging."""
        return self.__class__.__name__

    @abstractmethod
    def execute_on(self, aggregate: TAggregate) -> Iterable[DomainEvent[TAggregate]]:
        """
        Decide which events result from this command.

        Args:
            aggregate: The aggregate in its current state

        Returns:
            Events in the order they should be recorded and applied
        """
        raise NotImplementedError
