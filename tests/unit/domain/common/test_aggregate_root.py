"""Tests for AggregateRoot and PendingEvents."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from issue_tracker.domain.common.aggregate_root import AggregateRoot, PendingEvents
from issue_tracker.domain.common.command import Command
from issue_tracker.domain.common.domain_event import DomainEvent
from issue_tracker.domain.common.entity import EntityId
from issue_tracker.domain.common.exceptions import AggregateMismatchError


@dataclass(frozen=True)
class TallyId(EntityId):
    pass


@dataclass(eq=False)
class Tally(AggregateRoot[TallyId]):
    id: TallyId = field(default_factory=TallyId.generate)
    total: int = 0
    # How many events were pending each time an event was applied
    pending_when_applied: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class Added(DomainEvent[Tally]):
    amount: int

    def apply_to(self, aggregate: Tally) -> None:
        aggregate.total += self.amount
        aggregate.pending_when_applied.append(len(aggregate.pending_events))


@dataclass(frozen=True)
class AddPositive(Command[Tally]):
    tally_id: TallyId
    amounts: tuple[int, ...]

    @property
    def aggregate_id(self) -> TallyId:
        return self.tally_id

    def execute_on(self, aggregate: Tally) -> Iterator[DomainEvent[Tally]]:
        for amount in self.amounts:
            if amount > 0:
                yield Added(amount=amount)


class TestExecute:
    """Test suite for AggregateRoot.execute."""

    def test_applies_events_in_production_order(self) -> None:
        tally = Tally()

        events = tally.execute(AddPositive(tally.id, (1, 2, 3)))

        assert [e.amount for e in events] == [1, 2, 3]  # type: ignore[attr-defined]
        assert tally.total == 6

    def test_records_every_event_before_applying_any(self) -> None:
        tally = Tally()

        tally.execute(AddPositive(tally.id, (1, 2, 3)))

        assert tally.pending_when_applied == [3, 3, 3]

    def test_no_events_is_silent(self) -> None:
        tally = Tally()

        events = tally.execute(AddPositive(tally.id, (-1, 0)))

        assert events == []
        assert tally.total == 0
        assert not tally.has_uncommitted_events

    def test_state_is_visible_before_commit(self) -> None:
        tally = Tally()

        tally.execute(AddPositive(tally.id, (5,)))

        assert tally.total == 5
        assert tally.has_uncommitted_events

    def test_execute_on_alone_does_not_mutate(self) -> None:
        tally = Tally()
        command = AddPositive(tally.id, (5,))

        events = list(command.execute_on(tally))

        assert len(events) == 1
        assert tally.total == 0
        assert not tally.has_uncommitted_events

    def test_command_for_another_aggregate_is_rejected(self) -> None:
        tally = Tally()
        other = TallyId.generate()

        with pytest.raises(AggregateMismatchError) as exc_info:
            tally.execute(AddPositive(other, (1,)))

        assert exc_info.value.target_id == other
        assert tally.total == 0
        assert not tally.has_uncommitted_events

    def test_command_is_frozen(self) -> None:
        command = AddPositive(TallyId.generate(), (1,))
        with pytest.raises(AttributeError):
            command.amounts = (2,)  # type: ignore[misc]


class TestCommit:
    """Test suite for AggregateRoot.commit."""

    def test_returns_pending_events_in_order_and_empties(self) -> None:
        tally = Tally()
        tally.execute(AddPositive(tally.id, (1, 2)))
        tally.execute(AddPositive(tally.id, (3,)))
        pending = tally.pending_events

        events = tally.commit()

        assert events == pending
        assert [e.amount for e in events] == [1, 2, 3]  # type: ignore[attr-defined]
        assert tally.pending_events == []
        assert not tally.has_uncommitted_events

    def test_second_commit_returns_nothing(self) -> None:
        tally = Tally()
        tally.execute(AddPositive(tally.id, (1,)))

        tally.commit()

        assert tally.commit() == []

    def test_commit_does_not_touch_state(self) -> None:
        tally = Tally()
        tally.execute(AddPositive(tally.id, (4,)))

        tally.commit()

        assert tally.total == 4

    def test_pending_events_is_a_copy(self) -> None:
        tally = Tally()
        tally.execute(AddPositive(tally.id, (1,)))

        tally.pending_events.clear()

        assert len(tally.commit()) == 1


class TestReplayAndVersion:
    """Test suite for rehydration and version tracking."""

    def test_replay_applies_without_recording(self) -> None:
        tally = Tally()

        tally.replay([Added(amount=2), Added(amount=3)])

        assert tally.total == 5
        assert tally.version == 2
        assert tally.commit() == []

    def test_new_aggregate_starts_at_version_zero(self) -> None:
        assert Tally().version == 0

    def test_mark_persisted_advances_version(self) -> None:
        tally = Tally()
        tally.execute(AddPositive(tally.id, (1, 2)))

        tally.mark_persisted(len(tally.commit()))

        assert tally.version == 2

    def test_mark_persisted_rejects_negative_count(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            Tally().mark_persisted(-1)

    def test_apply_does_not_record(self) -> None:
        tally = Tally()

        tally.apply(Added(amount=7))

        assert tally.total == 7
        assert not tally.has_uncommitted_events


class TestIdentity:
    """Aggregates are entities: equal by identity only."""

    def test_equal_by_id_regardless_of_state(self) -> None:
        tally_id = TallyId.generate()
        first = Tally(id=tally_id)
        second = Tally(id=tally_id, total=10)

        assert first == second
        assert hash(first) == hash(second)

    def test_different_ids_are_not_equal(self) -> None:
        assert Tally() != Tally()


class TestPendingEvents:
    """Test suite for the PendingEvents buffer."""

    def test_drain_returns_events_and_clears(self) -> None:
        buffer = PendingEvents()
        events = [Added(amount=1), Added(amount=2)]
        buffer.extend(events)

        assert buffer.drain() == events
        assert len(buffer) == 0
        assert not buffer

    def test_snapshot_keeps_events(self) -> None:
        buffer = PendingEvents()
        buffer.extend([Added(amount=1)])

        assert len(buffer.snapshot()) == 1
        assert len(buffer) == 1
        assert buffer

    def test_iterates_in_order(self) -> None:
        buffer = PendingEvents()
        buffer.extend([Added(amount=1), Added(amount=2)])

        assert [e.amount for e in buffer] == [1, 2]  # type: ignore[attr-defined]
