"""
CommandHandler base classes.

Commands represent intentions to change the system state. Because every
command in this application executes itself on its aggregate, a single
handler implementation serves all of them: load the aggregate, execute
the command, save the aggregate.

Example:
    handler = AggregateCommandHandler(IssueRepository(db))
    outcome = handler.handle(CommentIssue(issue_id, "Any updates on this?"))
    outcome.events  # [IssueCommented(...)]
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog

from issue_tracker.application.common.repository import AggregateRepositoryProtocol
from issue_tracker.domain.common.aggregate_root import AggregateRoot
from issue_tracker.domain.common.command import Command
from issue_tracker.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)

# Input type (the command)
TCommand = TypeVar("TCommand", bound=Command)  # type: ignore[type-arg]
# Output type (the result of handling the command)
TResult = TypeVar("TResult")
TAggregate = TypeVar("TAggregate", bound=AggregateRoot)  # type: ignore[type-arg]


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Command Handlers:
    - Orchestrate loading, executing and persisting
    - Contain no business decisions (the command makes those)
    - Return the result of the operation
    """

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return the result.

        Raises:
            DomainError: When the aggregate cannot be loaded or saved
        """
        raise NotImplementedError


@dataclass(frozen=True)
class CommandOutcome(Generic[TAggregate]):
    """The saved aggregate and the events a command produced on it."""

    aggregate: TAggregate
    events: list[DomainEvent[TAggregate]]

    @property
    def changed(self) -> bool:
        """Whether the command recorded anything."""
        return bool(self.events)


class AggregateCommandHandler(
    CommandHandler[Command[TAggregate], CommandOutcome[TAggregate]],
    Generic[TAggregate],
):
    """
    Generic handler for every self-executing command.

    One instance per aggregate type is enough; new commands need no
    new handler.
    """

    def __init__(self, repository: AggregateRepositoryProtocol[TAggregate, Any]) -> None:
        self.repository = repository

    def handle(self, command: Command[TAggregate]) -> CommandOutcome[TAggregate]:
        """
        Load the target aggregate, execute the command on it and save it.

        Args:
            command: Any command addressed to this handler's aggregate type

        Returns:
            The saved aggregate with the events the command produced,
            possibly none

        Raises:
            EntityNotFoundError: If the target aggregate does not exist
            ConcurrencyError: If the aggregate changed while handling
        """
        aggregate = self.repository.find(command.aggregate_id)
        events = aggregate.execute(command)
        self.repository.save(aggregate)

        logger.info(
            "executed_command",
            command_type=command.command_type,
            aggregate_id=str(command.aggregate_id),
            event_count=len(events),
            version=aggregate.version,
        )
        return CommandOutcome(aggregate=aggregate, events=events)
