"""Tests for the generic AggregateCommandHandler."""

from typing import Any

import pytest

from issue_tracker.application.common.command import AggregateCommandHandler
from issue_tracker.domain.common.exceptions import EntityNotFoundError
from issue_tracker.domain.common.value_objects import IssueId
from issue_tracker.domain.issues import (
    CloseIssue,
    CommentIssue,
    Issue,
    IssueClosed,
    IssueCommented,
    OpenIssue,
)


@pytest.fixture
def stored_issue(repository: Any) -> Issue:
    issue = Issue()
    issue.execute(OpenIssue(issue.id, "Crash on save"))
    repository.save(issue)
    return issue


class TestAggregateCommandHandler:
    """Test suite for find, execute, save."""

    def test_comment_is_executed_and_saved(
        self, handler: AggregateCommandHandler[Issue], repository: Any, stored_issue: Issue
    ) -> None:
        outcome = handler.handle(CommentIssue(stored_issue.id, "Any updates on this?"))

        assert outcome.changed
        assert [type(event) for event in outcome.events] == [IssueCommented]
        assert not outcome.aggregate.has_uncommitted_events
        assert outcome.aggregate.version == 2
        assert repository.history(stored_issue.id)[-1] is outcome.events[0]

    def test_blank_comment_saves_nothing(
        self, handler: AggregateCommandHandler[Issue], repository: Any, stored_issue: Issue
    ) -> None:
        outcome = handler.handle(CommentIssue(stored_issue.id, "   "))

        assert not outcome.changed
        assert outcome.events == []
        assert outcome.aggregate.version == 1
        assert len(repository.history(stored_issue.id)) == 1

    def test_unknown_issue_raises_not_found(
        self, handler: AggregateCommandHandler[Issue], repository: Any
    ) -> None:
        with pytest.raises(EntityNotFoundError):
            handler.handle(CommentIssue(IssueId.generate(), "Hello"))

        assert repository.save_calls == 0

    def test_same_handler_serves_every_command(
        self, handler: AggregateCommandHandler[Issue], repository: Any, stored_issue: Issue
    ) -> None:
        handler.handle(CommentIssue(stored_issue.id, "Reproduced"))
        outcome = handler.handle(CloseIssue(stored_issue.id))

        assert [type(event) for event in outcome.events] == [IssueClosed]
        issue = repository.find(stored_issue.id)
        assert issue.is_closed
        assert {comment.message for comment in issue.comments} == {"Reproduced"}
        assert issue.version == 3

    def test_state_is_reloaded_for_each_command(
        self, handler: AggregateCommandHandler[Issue], stored_issue: Issue
    ) -> None:
        handler.handle(CloseIssue(stored_issue.id))

        outcome = handler.handle(CloseIssue(stored_issue.id))

        assert not outcome.changed
