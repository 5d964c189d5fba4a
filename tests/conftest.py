"""
Pytest configuration and fixtures for Taskify tests.

Provides store/manager fixtures, task factories, and the populated store used
by the scenario tests.
"""

import pytest

from taskify.models import Priority, Task
from taskify.services.task_manager import TaskManager
from taskify.services.task_store import TaskStore


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Keep tests away from the user's ~/.taskify and TASKIFY_* variables."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for var in ("TASKIFY_TITLE", "TASKIFY_SHOW_COUNTS", "TASKIFY_DEFAULT_PRIORITY", "TASKIFY_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_task():
    """
    Factory fixture for creating Task models.

    Example:
        def test_something(make_task):
            task = make_task(name="Custom Task", priority=Priority.LOW)
    """
    def _make_task(name: str = "Test Task", priority: Priority = Priority.MEDIUM) -> Task:
        return Task(name=name, priority=priority)
    return _make_task


@pytest.fixture
def store():
    """Empty task store."""
    return TaskStore()


@pytest.fixture
def populated_store(make_task):
    """
    Store holding the three-task scenario.

    Master order:
        0: Write report (High)
        1: Buy milk (Low)
        2: Call Bob (High)
    """
    store = TaskStore()
    store.add(make_task("Write report", Priority.HIGH))
    store.add(make_task("Buy milk", Priority.LOW))
    store.add(make_task("Call Bob", Priority.HIGH))
    return store


@pytest.fixture
def recorder():
    """Collects refresh and error signals emitted by a TaskManager."""
    class Recorder:
        def __init__(self):
            self.refreshes = 0
            self.errors = []

        def on_refresh(self):
            self.refreshes += 1

        def on_error(self, title, message):
            self.errors.append((title, message))

    return Recorder()


@pytest.fixture
def manager(recorder):
    """Empty task manager wired to the recorder."""
    return TaskManager(on_refresh=recorder.on_refresh, on_error=recorder.on_error)


@pytest.fixture
def scenario_manager(recorder):
    """Task manager after adding the three-task scenario through add_task()."""
    manager = TaskManager(on_refresh=recorder.on_refresh, on_error=recorder.on_error)
    manager.add_task("Write report", "High")
    manager.add_task("Buy milk", "Low")
    manager.add_task("Call Bob", "High")
    recorder.refreshes = 0
    return manager
