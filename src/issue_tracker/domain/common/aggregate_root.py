"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit. All state changes go through
`execute`: the command decides which events happened, the events are
recorded, then each event applies itself to the aggregate.

Example:
    @dataclass(eq=False)
    class Issue(AggregateRoot[IssueId]):
        id: IssueId = field(default_factory=IssueId.generate)
        comments: set[IssueComment] = field(default_factory=set)

    issue = Issue()
    issue.execute(CommentIssue(issue.id, "Any updates on this?"))
    events = issue.commit()
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic

from .command import Command
from .domain_event import DomainEvent
from .entity import Entity, IdType
from .exceptions import AggregateMismatchError


class PendingEvents:
    """
    Ordered buffer of events that were produced but not yet persisted.

    Aggregates hold one of these instead of managing a list themselves,
    so the drain semantics live in exactly one place.
    """

    def __init__(self) -> None:
        self._events: list[DomainEvent[Any]] = []

    def extend(self, events: Iterable[DomainEvent[Any]]) -> None:
        """Append events in production order."""
        self._events.extend(events)

    def drain(self) -> list[DomainEvent[Any]]:
        """Return every buffered event in production order and empty the buffer."""
        events = self._events.copy()
        self._events.clear()
        return events

    def snapshot(self) -> list[DomainEvent[Any]]:
        """Return buffered events without clearing them."""
        return self._events.copy()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def __iter__(self) -> Iterator[DomainEvent[Any]]:
        return iter(self._events.copy())


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related entities)
    - Mutated only by applying domain events
    - Driven by self-executing commands, so no per-command methods
      are needed here
    - Holders of uncommitted events until the repository commits them

    `version` counts the events already persisted for this aggregate.
    """

    _pending: PendingEvents = field(
        default_factory=PendingEvents, repr=False, compare=False, kw_only=True
    )
    version: int = field(default=0, compare=False, kw_only=True)

    def execute(self, command: Command[Any]) -> list[DomainEvent[Any]]:
        """
        Execute a command against the current state.

        Every event the command produces is recorded before any of them
        is applied, then they are applied in production order. A command
        producing no events leaves the aggregate untouched.

        Returns:
            The events produced by this command

        Raises:
            AggregateMismatchError: If the command targets another aggregate
        """
        if command.aggregate_id != self.id:
            raise AggregateMismatchError(command.command_type, command.aggregate_id, self.id)

        events = list(command.execute_on(self))
        self._pending.extend(events)
        for event in events:
            self.apply(event)
        return events

    def apply(self, event: DomainEvent[Any]) -> None:
        """Apply a single event without recording it."""
        event.apply_to(self)

    def replay(self, history: Iterable[DomainEvent[Any]]) -> None:
        """
        Rehydrate state from persisted events.

        Replayed events are not recorded as pending; each one
        advances the version.
        """
        for event in history:
            self.apply(event)
            self.version += 1

    def commit(self) -> list[DomainEvent[Any]]:
        """
        Collect and clear all uncommitted events.

        Invoked by the repository to collect and store events. A second
        call without an intervening execute returns an empty list.
        """
        return self._pending.drain()

    def mark_persisted(self, count: int) -> None:
        """Advance the version once the repository stored `count` events."""
        if count < 0:
            raise ValueError("Persisted event count cannot be negative")
        self.version += count

    @property
    def pending_events(self) -> list[DomainEvent[Any]]:
        """Return pending events without clearing them."""
        return self._pending.snapshot()

    @property
    def has_uncommitted_events(self) -> bool:
        """Whether execute produced events that were not committed yet."""
        return bool(self._pending)
