"""
Tests for TaskStore - master sequence operations.

Tests cover add/get/update/remove by master index, index validation,
input validation, and index shifting after removal.
"""

import pytest

from taskify.models import Priority, Task
from taskify.services.task_store import (
    TaskIndexError,
    TaskStore,
    TaskValidationError,
    validate_task_input,
)


class TestTaskStoreAdd:
    """Tests for appending tasks."""

    def test_add_returns_previous_size(self, store, make_task):
        assert store.add(make_task("A")) == 0
        assert store.add(make_task("B")) == 1
        assert store.add(make_task("C")) == 2
        assert store.size() == 3

    def test_add_preserves_insertion_order(self, store, make_task):
        names = ["first", "second", "third"]
        for name in names:
            store.add(make_task(name))

        assert [task.name for task in store] == names

    def test_add_permits_duplicates(self, store, make_task):
        """Test that identical tasks occupy separate slots."""
        store.add(make_task("Same", Priority.LOW))
        store.add(make_task("Same", Priority.LOW))

        assert len(store) == 2
        assert store.get(0) is not store.get(1)

    def test_initial_tasks(self, make_task):
        tasks = [make_task("A"), make_task("B")]
        store = TaskStore(tasks)

        assert store.tasks() == tuple(tasks)


class TestTaskStoreGet:
    """Tests for reading by master index."""

    def test_get_returns_task(self, populated_store):
        assert populated_store.get(1).name == "Buy milk"

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_out_of_range(self, populated_store, index):
        """Test that negative and too-large indices are both rejected."""
        with pytest.raises(TaskIndexError):
            populated_store.get(index)

    def test_index_error_is_an_index_error(self, store):
        with pytest.raises(IndexError):
            store.get(0)

    def test_non_int_index_rejected(self, populated_store):
        with pytest.raises(TaskIndexError):
            populated_store.get("1")


class TestTaskStoreUpdate:
    """Tests for in-place updates."""

    def test_update_mutates_in_place(self, populated_store):
        task = populated_store.get(2)

        updated = populated_store.update(2, "Call Alice", Priority.MEDIUM)

        assert updated is task
        assert task.name == "Call Alice"
        assert task.priority is Priority.MEDIUM
        assert populated_store.size() == 3

    def test_update_accepts_label(self, populated_store):
        populated_store.update(0, "Write report", "low")

        assert populated_store.get(0).priority is Priority.LOW

    def test_update_out_of_range(self, populated_store):
        with pytest.raises(TaskIndexError):
            populated_store.update(3, "Name", Priority.HIGH)

    @pytest.mark.parametrize("name,priority", [
        ("", Priority.HIGH),
        (None, Priority.HIGH),
        ("Valid", None),
        ("Valid", "Urgent"),
    ])
    def test_update_invalid_input_leaves_task_unchanged(self, populated_store, name, priority):
        """Test that validation happens before any mutation."""
        with pytest.raises(TaskValidationError):
            populated_store.update(0, name, priority)

        task = populated_store.get(0)
        assert task.name == "Write report"
        assert task.priority is Priority.HIGH


class TestTaskStoreRemove:
    """Tests for removal and index shifting."""

    def test_remove_returns_task_and_shifts(self, populated_store):
        removed = populated_store.remove(0)

        assert removed.name == "Write report"
        assert populated_store.size() == 2
        assert populated_store.get(0).name == "Buy milk"
        assert populated_store.get(1).name == "Call Bob"

    def test_remove_last(self, populated_store):
        populated_store.remove(2)

        assert [task.name for task in populated_store] == ["Write report", "Buy milk"]

    def test_remove_out_of_range(self, populated_store):
        with pytest.raises(TaskIndexError):
            populated_store.remove(3)
        assert populated_store.size() == 3

    def test_remove_from_empty(self, store):
        with pytest.raises(TaskIndexError):
            store.remove(0)


class TestTaskStoreMisc:
    """Tests for snapshots and clearing."""

    def test_tasks_is_snapshot(self, populated_store, make_task):
        snapshot = populated_store.tasks()
        populated_store.add(make_task("Later"))

        assert len(snapshot) == 3
        assert populated_store.size() == 4

    def test_clear(self, populated_store):
        populated_store.clear()

        assert populated_store.size() == 0
        assert list(populated_store) == []


class TestValidateTaskInput:
    """Tests for the shared add/update validation."""

    def test_valid_input(self):
        assert validate_task_input("Buy milk", "Low") == ("Buy milk", Priority.LOW)

    def test_error_carries_title_and_message(self):
        with pytest.raises(TaskValidationError) as exc_info:
            validate_task_input("", Priority.HIGH)

        assert exc_info.value.title == "Error"
        assert exc_info.value.message == "Task name and priority must be filled!"

    def test_whitespace_name_is_kept(self):
        """Test that only the empty string counts as a missing name."""
        assert validate_task_input("   ", "High") == ("   ", Priority.HIGH)

    def test_long_name_is_accepted(self):
        name, level = validate_task_input("a" * 501, Priority.HIGH)

        assert len(name) == 501
        assert level is Priority.HIGH
