"""
Tests for SelectionState.

Tests cover the Empty/Selected state machine, resolution on select, and the
silent handling of positions that do not resolve.
"""

import logging

from taskify.models import Priority
from taskify.services.selection import Selection, SelectionState


class TestSelectionState:
    """Tests for SelectionState transitions."""

    def test_starts_empty(self):
        selection = SelectionState()

        assert selection.is_empty
        assert selection.current() is None

    def test_select_resolves_master_index(self, populated_store):
        selection = SelectionState()

        result = selection.select(Priority.HIGH, 1, populated_store)

        assert result == Selection(master_index=2, bucket=Priority.HIGH)
        assert selection.current() == result
        assert not selection.is_empty

    def test_select_accepts_label(self, populated_store):
        selection = SelectionState()

        assert selection.select("low", 0, populated_store) == Selection(1, Priority.LOW)

    def test_select_overwrites(self, populated_store):
        selection = SelectionState()
        selection.select(Priority.HIGH, 0, populated_store)

        selection.select(Priority.LOW, 0, populated_store)

        assert selection.current() == Selection(1, Priority.LOW)

    def test_unresolved_select_is_silent_and_empties(self, populated_store, caplog):
        """Test that a miss never raises and leaves no stale selection behind."""
        selection = SelectionState()
        selection.select(Priority.HIGH, 0, populated_store)

        with caplog.at_level(logging.WARNING):
            result = selection.select(Priority.MEDIUM, 0, populated_store)

        assert result is None
        assert selection.is_empty
        assert "did not resolve" in caplog.text

    def test_unknown_bucket_is_a_miss(self, populated_store, caplog):
        selection = SelectionState()
        selection.select(Priority.LOW, 0, populated_store)

        with caplog.at_level(logging.WARNING):
            result = selection.select("Urgent", 0, populated_store)

        assert result is None
        assert selection.is_empty
        assert "did not resolve" in caplog.text

    def test_clear(self, populated_store):
        selection = SelectionState()
        selection.select(Priority.HIGH, 0, populated_store)

        selection.clear()

        assert selection.is_empty

    def test_clear_is_idempotent(self):
        selection = SelectionState()

        selection.clear()
        selection.clear()

        assert selection.current() is None

    def test_select_does_not_track_later_mutations(self, populated_store):
        """Test that a stored selection is a plain value, not re-resolved behind the caller's back."""
        selection = SelectionState()
        selection.select(Priority.HIGH, 1, populated_store)

        populated_store.remove(0)

        assert selection.current() == Selection(2, Priority.HIGH)
        assert selection.select(Priority.HIGH, 0, populated_store) == Selection(1, Priority.HIGH)
