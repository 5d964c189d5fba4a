"""Taskify services - task store, projection, selection and orchestration."""

from taskify.services.priority_projector import PriorityProjector
from taskify.services.selection import Selection, SelectionState
from taskify.services.task_manager import TaskManager
from taskify.services.task_store import (
    NoSelectionError,
    TaskifyError,
    TaskIndexError,
    TaskNotFoundError,
    TaskStore,
    TaskValidationError,
)

__all__ = [
    "PriorityProjector",
    "Selection",
    "SelectionState",
    "TaskManager",
    "TaskStore",
    "TaskifyError",
    "TaskValidationError",
    "NoSelectionError",
    "TaskIndexError",
    "TaskNotFoundError",
]
