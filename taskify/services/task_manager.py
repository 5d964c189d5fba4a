"""
Task manager for Taskify application.

Orchestrates the task store, priority projection and selection state into the
operations the presentation layer calls: add, update, delete, select and
display. User-facing failures are reported through the error callback and then
raised; successful mutations clear the selection and fire the refresh callback.
"""

from typing import Callable, Dict, List, Optional, Union

from taskify.logging_config import get_logger
from taskify.models import Priority, Task
from taskify.services.priority_projector import PriorityProjector
from taskify.services.selection import Selection, SelectionState
from taskify.services.task_store import (
    NoSelectionError,
    TaskStore,
    UserFacingError,
    validate_task_input,
)

logger = get_logger(__name__)

NO_SELECTION_UPDATE_MESSAGE = "No task selected to update!"
NO_SELECTION_DELETE_MESSAGE = "No task selected to delete!"

RefreshCallback = Callable[[], None]
ErrorCallback = Callable[[str, str], None]


class TaskManager:
    """
    Service layer for task operations.

    Owns one TaskStore and one SelectionState. All operations run to
    completion before returning; validation always happens before the store
    is touched.
    """

    def __init__(
        self,
        store: Optional[TaskStore] = None,
        selection: Optional[SelectionState] = None,
        on_refresh: Optional[RefreshCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """
        Initialize the task manager.

        Args:
            store: Task store to operate on, a new empty store by default
            selection: Selection state, a new empty state by default
            on_refresh: Called after every successful mutation
            on_error: Called with (title, message) for user-facing errors
        """
        self.store = store if store is not None else TaskStore()
        self.selection = selection if selection is not None else SelectionState()
        self._on_refresh = on_refresh
        self._on_error = on_error

    def subscribe(
        self,
        on_refresh: Optional[RefreshCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """
        Register presentation callbacks, replacing any given earlier.

        Args:
            on_refresh: Called after every successful mutation
            on_error: Called with (title, message) for user-facing errors
        """
        if on_refresh is not None:
            self._on_refresh = on_refresh
        if on_error is not None:
            self._on_error = on_error

    # ==============================================================================
    # SIGNALS
    # ==============================================================================

    def _emit_refresh(self) -> None:
        if self._on_refresh:
            self._on_refresh()

    def _fail(self, error: UserFacingError) -> UserFacingError:
        """Report a user-facing error and hand it back for raising."""
        logger.info(f"{type(error).__name__}: {error.message}")
        if self._on_error:
            self._on_error(error.title, error.message)
        return error

    def _require_selection(self, message: str) -> Selection:
        selection = self.selection.current()
        if selection is None:
            raise self._fail(NoSelectionError(message))
        return selection

    # ==============================================================================
    # OPERATIONS
    # ==============================================================================

    def add_task(self, name: Optional[str], priority: Union[Priority, str, None]) -> Task:
        """
        Create a task at the end of the master sequence.

        Args:
            name: Task name
            priority: Priority member or label

        Returns:
            The created task

        Raises:
            TaskValidationError: If name or priority is invalid
        """
        try:
            name, level = validate_task_input(name, priority)
        except UserFacingError as e:
            raise self._fail(e)

        task = Task(name=name, priority=level)
        master_index = self.store.add(task)
        self.selection.clear()
        logger.info(f"Created task '{name}' ({level.value}) at index {master_index}")
        self._emit_refresh()
        return task

    def update_task(self, name: Optional[str], priority: Union[Priority, str, None]) -> Task:
        """
        Replace the name and priority of the selected task.

        Returns:
            The updated task

        Raises:
            NoSelectionError: If no task is selected
            TaskValidationError: If name or priority is invalid
        """
        selection = self._require_selection(NO_SELECTION_UPDATE_MESSAGE)
        try:
            name, level = validate_task_input(name, priority)
        except UserFacingError as e:
            raise self._fail(e)

        task = self.store.update(selection.master_index, name, level)
        self.selection.clear()
        logger.info(
            f"Updated task at index {selection.master_index} "
            f"(selected from {selection.bucket.value}): '{name}' ({level.value})"
        )
        self._emit_refresh()
        return task

    def delete_task(self) -> Task:
        """
        Remove the selected task.

        Returns:
            The removed task

        Raises:
            NoSelectionError: If no task is selected
        """
        selection = self._require_selection(NO_SELECTION_DELETE_MESSAGE)
        task = self.store.remove(selection.master_index)
        self.selection.clear()
        logger.info(f"Deleted task '{task.name}' from index {selection.master_index}")
        self._emit_refresh()
        return task

    def select(self, level: Priority, local_index: int) -> Optional[Task]:
        """
        Select the task at a position inside one priority bucket.

        Args:
            level: Bucket the user picked from
            local_index: Position inside that bucket

        Returns:
            The selected task, or None if the position did not resolve
        """
        selection = self.selection.select(level, local_index, self.store)
        if selection is None:
            return None
        return self.store.get(selection.master_index)

    def clear_selection(self) -> None:
        """Drop the current selection."""
        self.selection.clear()

    def selected_task(self) -> Optional[Task]:
        """Get the currently selected task, if any."""
        selection = self.selection.current()
        if selection is None:
            return None
        return self.store.get(selection.master_index)

    def get_buckets(self) -> Dict[Priority, List[Task]]:
        """Get the tasks of every bucket, keyed by priority."""
        return PriorityProjector.buckets(self.store)

    def get_display_buckets(self) -> Dict[str, List[str]]:
        """Get the display strings of every bucket, keyed by priority label."""
        return PriorityProjector.display_buckets(self.store)
