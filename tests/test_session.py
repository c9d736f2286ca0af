"""Tests for run_session."""

import pytest

from reprompt import run_session
from reprompt.core.errors import SnapshotError, ValidationError
from reprompt.core.transaction import CommitOutcome
from reprompt.io.resource import MemoryResource


class TestRunSession:
    """One read-clean-write pass."""

    def test_cleans_in_place(self, memory_resource):
        result = run_session(memory_resource)
        assert result.changed
        assert result.outcome is CommitOutcome.WRITTEN
        assert memory_resource.content == "line 1\nline 2\nnormal line"
        assert result.clean_result is not None

    def test_already_clean(self):
        resource = MemoryResource("nothing to do here")
        result = run_session(resource)
        assert not result.changed
        assert result.outcome is CommitOutcome.UNCHANGED

    @pytest.mark.parametrize("content", ["", "   \n  "])
    def test_empty_resource_skipped(self, flaky_resource, content):
        resource = flaky_resource(content)
        result = run_session(resource)
        assert result.outcome is CommitOutcome.SKIPPED
        assert result.clean_result is None
        assert resource.writes == []

    def test_unreadable_resource(self, flaky_resource):
        with pytest.raises(SnapshotError):
            run_session(flaky_resource(fail_read=True))

    def test_refuses_to_wipe_content(self, flaky_resource):
        box_only = "╭──────────────╮\n╰──────────────╯"
        resource = flaky_resource(box_only)
        with pytest.raises(ValidationError):
            run_session(resource)
        assert resource.content == box_only
        assert resource.writes == []
