"""Keybindings and column identifiers for Taskify.

Columns are keyed by priority; the app and its tests look them up through
get_column_id() instead of hard-coding ids.
"""

from textual.binding import Binding

from taskify.models import Priority

# Task action keybindings
TASK_ACTION_BINDINGS = [
    Binding("escape", "clear_selection", "Clear Selection", show=True),
    Binding("delete", "delete_task", "Delete Task", show=True),
]

# Application control keybindings
APP_CONTROL_BINDINGS = [
    Binding("ctrl+q", "quit", "Quit", priority=True, show=True),
]

# Column identifiers
COLUMN_IDS = {
    Priority.HIGH: "column-high",
    Priority.MEDIUM: "column-medium",
    Priority.LOW: "column-low",
}


def get_column_id(priority: Priority) -> str:
    """Get the widget id of the column showing a priority bucket.

    Args:
        priority: Priority member or label

    Returns:
        Column widget id
    """
    return COLUMN_IDS[Priority.parse(priority)]


def get_all_bindings() -> list[Binding]:
    """Get all application keybindings.

    Returns:
        List of all Binding objects
    """
    return TASK_ACTION_BINDINGS + APP_CONTROL_BINDINGS
