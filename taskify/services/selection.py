"""
Selection state for Taskify application.

Tracks the single task targeted by update and delete, as a master index plus
the priority bucket the user picked it from.
"""

from typing import NamedTuple, Optional

from taskify.logging_config import get_logger
from taskify.models import Priority
from taskify.services.priority_projector import PriorityProjector
from taskify.services.task_store import TaskNotFoundError, TaskStore

logger = get_logger(__name__)


class Selection(NamedTuple):
    """A resolved selection: master index and originating bucket."""

    master_index: int
    bucket: Priority


class SelectionState:
    """
    Holds at most one Selection.

    States are Empty and Selected. A new select() overwrites the previous
    selection; clear() always leaves the state empty.
    """

    def __init__(self) -> None:
        self._current: Optional[Selection] = None

    def select(self, level: Priority, local_index: int, store: TaskStore) -> Optional[Selection]:
        """
        Select the task at a bucket-local index.

        The index is resolved against the current store state. A miss leaves
        the state empty and is not raised.

        Args:
            level: Bucket the user picked from
            local_index: Position inside that bucket
            store: Store to resolve against

        Returns:
            The new Selection, or None if the index did not resolve
        """
        try:
            level = Priority.parse(level)
            master_index = PriorityProjector.resolve_to_master_index(store, level, local_index)
        except (ValueError, TaskNotFoundError) as e:
            logger.warning(f"Ignoring selection that did not resolve: {e}")
            self._current = None
            return None

        self._current = Selection(master_index=master_index, bucket=level)
        logger.debug(f"Selected {level.value}[{local_index}] -> master index {master_index}")
        return self._current

    def clear(self) -> None:
        """Reset to empty. Safe to call when already empty."""
        if self._current is not None:
            logger.debug(f"Cleared selection {self._current}")
        self._current = None

    def current(self) -> Optional[Selection]:
        """Get the current selection, or None when empty."""
        return self._current

    @property
    def is_empty(self) -> bool:
        return self._current is None
