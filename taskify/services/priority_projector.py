"""
Priority projection for Taskify application.

Derives the per-priority buckets shown in the UI from the master sequence and
translates between a bucket-local index and a master index. Nothing here
mutates the store or caches results: every call scans the current store state,
so an index resolved before an add or remove is never reused afterwards.
"""

from typing import Dict, List, Tuple

from taskify.logging_config import get_logger
from taskify.models import Priority, Task
from taskify.services.task_store import TaskIndexError, TaskNotFoundError, TaskStore

logger = get_logger(__name__)


class PriorityProjector:
    """Stateless projection of a TaskStore onto its three priority buckets."""

    @staticmethod
    def bucket_for(store: TaskStore, level: Priority) -> List[Task]:
        """
        Get the tasks of one priority level in master order.

        Args:
            store: Store to project
            level: Priority level of the bucket

        Returns:
            Tasks whose priority equals level, in master order
        """
        level = Priority.parse(level)
        return [task for task in store if task.priority == level]

    @staticmethod
    def buckets(store: TaskStore) -> Dict[Priority, List[Task]]:
        """
        Partition the store into all three buckets with a single scan.

        Every task lands in exactly one bucket, and each bucket keeps the
        relative master order of its tasks.

        Args:
            store: Store to project

        Returns:
            Dictionary mapping each priority (High, Medium, Low order) to its tasks
        """
        result: Dict[Priority, List[Task]] = {level: [] for level in Priority.ordered()}
        for task in store:
            result[task.priority].append(task)
        return result

    @staticmethod
    def resolve_to_master_index(store: TaskStore, level: Priority, local_index: int) -> int:
        """
        Translate a bucket-local index into a master index.

        Scans the master sequence in order, counting only tasks of the given
        level, and returns the master index of the local_index-th match.

        Args:
            store: Store to scan
            level: Priority level of the bucket
            local_index: 0-based position inside the bucket

        Returns:
            Master index of the matching task

        Raises:
            TaskNotFoundError: If the bucket has no task at local_index
        """
        level = Priority.parse(level)
        if local_index < 0:
            raise TaskNotFoundError(f"Negative local index {local_index} in {level.value} bucket")

        seen = 0
        for master_index, task in enumerate(store):
            if task.priority != level:
                continue
            if seen == local_index:
                return master_index
            seen += 1

        raise TaskNotFoundError(
            f"Local index {local_index} out of range for {level.value} bucket of size {seen}"
        )

    @staticmethod
    def locate(store: TaskStore, master_index: int) -> Tuple[Priority, int]:
        """
        Translate a master index into its (bucket, local index) position.

        Args:
            store: Store to scan
            master_index: Index into the master sequence

        Returns:
            Tuple of (priority level, local index within that bucket)

        Raises:
            TaskIndexError: If master_index is out of range
        """
        target = store.get(master_index)
        local_index = 0
        for index, task in enumerate(store):
            if index == master_index:
                return target.priority, local_index
            if task.priority == target.priority:
                local_index += 1
        # store.get already rejected out-of-range indices
        raise TaskIndexError(f"Master index {master_index} vanished during scan")

    @classmethod
    def display_buckets(cls, store: TaskStore) -> Dict[str, List[str]]:
        """
        Build the display strings for every bucket.

        Returns:
            Dictionary like {"High": [...], "Medium": [...], "Low": [...]}
        """
        return {
            level.value: [task.display_text for task in tasks]
            for level, tasks in cls.buckets(store).items()
        }
