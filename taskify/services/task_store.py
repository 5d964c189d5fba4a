"""
Task store for Taskify application.

Owns the master sequence of tasks. Tasks are addressed by master index
(their slot in insertion order); every operation rejects indices outside
``0 <= index < size``.
"""

from typing import Iterator, List, Optional, Tuple, Union

from taskify.logging_config import get_logger
from taskify.models import Priority, Task

logger = get_logger(__name__)

ERROR_TITLE = "Error"
MISSING_FIELDS_MESSAGE = "Task name and priority must be filled!"


class TaskifyError(Exception):
    """Base exception for Taskify errors."""
    pass


class UserFacingError(TaskifyError):
    """Error reported to the user verbatim with a title and message."""

    def __init__(self, message: str, title: str = ERROR_TITLE) -> None:
        super().__init__(message)
        self.title = title
        self.message = message


class TaskValidationError(UserFacingError):
    """Raised when a task name or priority is missing or invalid."""
    pass


class NoSelectionError(UserFacingError):
    """Raised when update or delete is attempted with no selected task."""
    pass


class TaskIndexError(TaskifyError, IndexError):
    """Raised when the store is accessed with an out-of-range master index."""
    pass


class TaskNotFoundError(TaskifyError, LookupError):
    """Raised when a bucket-local index does not resolve to a task."""
    pass


def validate_task_input(
    name: Optional[str],
    priority: Union[Priority, str, None]
) -> Tuple[str, Priority]:
    """
    Validate user input for a task before any mutation happens.

    Args:
        name: Task name, must be non-empty
        priority: Priority member or label

    Returns:
        Tuple of (name, parsed priority)

    Raises:
        TaskValidationError: If name is empty or priority is not recognized
    """
    if not name:
        raise TaskValidationError(MISSING_FIELDS_MESSAGE)
    try:
        level = Priority.parse(priority)
    except ValueError:
        raise TaskValidationError(MISSING_FIELDS_MESSAGE) from None
    return name, level


class TaskStore:
    """
    Ordered collection of all tasks.

    Insertion order is preserved and duplicates are permitted. Removing a
    task shifts every later task down by one master index.
    """

    def __init__(self, tasks: Optional[List[Task]] = None) -> None:
        """
        Initialize the store.

        Args:
            tasks: Optional initial tasks, kept in the given order
        """
        self._tasks: List[Task] = list(tasks) if tasks else []

    def _check_index(self, master_index: int) -> None:
        if not isinstance(master_index, int) or isinstance(master_index, bool):
            raise TaskIndexError(f"Master index must be an int, got {master_index!r}")
        if master_index < 0 or master_index >= len(self._tasks):
            raise TaskIndexError(
                f"Master index {master_index} out of range for store of size {len(self._tasks)}"
            )

    def add(self, task: Task) -> int:
        """
        Append a task to the end of the master sequence.

        Args:
            task: Task to append

        Returns:
            Master index of the new task (the previous size)
        """
        master_index = len(self._tasks)
        self._tasks.append(task)
        logger.debug(f"Added task '{task.name}' ({task.priority.value}) at index {master_index}")
        return master_index

    def get(self, master_index: int) -> Task:
        """
        Get the task at a master index.

        Raises:
            TaskIndexError: If master_index is out of range
        """
        self._check_index(master_index)
        return self._tasks[master_index]

    def update(
        self,
        master_index: int,
        name: Optional[str],
        priority: Union[Priority, str, None]
    ) -> Task:
        """
        Replace the name and priority of a task in place.

        Args:
            master_index: Index of the task to update
            name: New task name
            priority: New priority member or label

        Returns:
            The updated task

        Raises:
            TaskIndexError: If master_index is out of range
            TaskValidationError: If name or priority is invalid
        """
        self._check_index(master_index)
        name, level = validate_task_input(name, priority)

        task = self._tasks[master_index]
        old_priority = task.priority
        task.rename(name)
        task.set_priority(level)
        logger.debug(
            f"Updated task at index {master_index}: name='{name}', "
            f"priority {old_priority.value} -> {level.value}"
        )
        return task

    def remove(self, master_index: int) -> Task:
        """
        Delete a task, shifting later tasks down by one.

        Returns:
            The removed task

        Raises:
            TaskIndexError: If master_index is out of range
        """
        self._check_index(master_index)
        task = self._tasks.pop(master_index)
        logger.debug(f"Removed task '{task.name}' from index {master_index}")
        return task

    def size(self) -> int:
        """Get the number of tasks in the store."""
        return len(self._tasks)

    def tasks(self) -> Tuple[Task, ...]:
        """
        Get a snapshot of the master sequence.

        Returns:
            Tuple of tasks in master order
        """
        return tuple(self._tasks)

    def clear(self) -> None:
        """Remove every task."""
        self._tasks.clear()
        logger.debug("Cleared task store")

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))
