import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from loguru import logger

from .errors import InvalidTaskArgumentError, SnapshotError, TaskNotFoundError
from .models import Task, TaskStatus
from .snapshot import PathLike, TaskSnapshot, read_snapshot, write_snapshot


class TaskStore(ABC):
    """Task storage abstract base class.

    Implementations must be safe to call from concurrent request handlers.
    """

    @abstractmethod
    def list_tasks(self) -> List[Task]:
        """Return all tasks ordered by descending ID (newest first)"""

    @abstractmethod
    def get_task(self, task_id: int) -> Task:
        """Return the task with ``task_id``; raise TaskNotFoundError if absent"""

    @abstractmethod
    def create_task(self, name: str) -> Task:
        """Create an incomplete task under a freshly assigned ID"""

    @abstractmethod
    def delete_task(self, task_id: int) -> None:
        """Delete a task; deleting an unknown ID is not an error"""

    @abstractmethod
    def update_task(self, task: Optional[Task]) -> None:
        """Replace name and status of an existing task"""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored tasks"""

    @abstractmethod
    def save(self, path: PathLike) -> None:
        """Persist every task and the ID counter to ``path``"""

    @abstractmethod
    def load(self, path: PathLike) -> None:
        """Restore tasks and the ID counter from ``path``"""


class InMemoryTaskStore(TaskStore):
    """In-memory task store with file snapshot persistence.

    Tasks live in a dict keyed by ID. The ID counter is a separate field and
    is only advanced by ``create_task``, so IDs are never reused even after a
    task is deleted. A single lock guards both; no I/O happens while it is
    held.
    """

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._next_id: int = 0
        self._lock = threading.Lock()

    def list_tasks(self) -> List[Task]:
        with self._lock:
            tasks = list(self._tasks.values())
        tasks.sort(key=lambda t: t.id, reverse=True)
        return tasks

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, name: str) -> Task:
        with self._lock:
            self._next_id += 1
            task = Task(id=self._next_id, name=name, status=TaskStatus.INCOMPLETE)
            self._tasks[task.id] = task
        logger.debug("Created task {}", task.id)
        return task

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is not None:
            logger.debug("Deleted task {}", task_id)

    def update_task(self, task: Optional[Task]) -> None:
        if task is None:
            raise InvalidTaskArgumentError("task payload is required")

        with self._lock:
            if task.id not in self._tasks:
                raise TaskNotFoundError(task.id)
            self._tasks[task.id] = task
        logger.debug("Updated task {}", task.id)

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def snapshot(self) -> TaskSnapshot:
        """Take a consistent point-in-time copy of all tasks and the counter"""
        with self._lock:
            tasks = list(self._tasks.values())
            next_id = self._next_id
        tasks.sort(key=lambda t: t.id, reverse=True)
        return TaskSnapshot(next_id=next_id, tasks=tasks)

    def restore(self, snapshot: TaskSnapshot) -> None:
        """Replace the store contents with ``snapshot``.

        An empty snapshot resets the ID counter to zero.
        """
        tasks = {task.id: task for task in snapshot.tasks}
        next_id = snapshot.next_id if tasks else 0
        with self._lock:
            self._tasks = tasks
            self._next_id = next_id

    def save(self, path: PathLike) -> None:
        """Write a snapshot of the store to ``path``.

        Raises:
            OSError: the file could not be written.
            SnapshotError: the snapshot could not be encoded.
        """
        snapshot = self.snapshot()
        target = write_snapshot(path, snapshot)
        logger.info(
            "Saved {} tasks to {} (next_id={})",
            len(snapshot.tasks),
            target,
            snapshot.next_id,
        )

    def load(self, path: PathLike) -> None:
        """Restore the store from the snapshot at ``path``.

        A missing, unreadable or corrupt file is logged and leaves the store
        empty and ready to serve.
        """
        try:
            snapshot = read_snapshot(path)
        except FileNotFoundError:
            logger.warning("Task snapshot {} not found; starting empty", path)
            snapshot = TaskSnapshot()
        except (OSError, SnapshotError) as e:
            logger.warning("Failed to load task snapshot {}: {}", path, e)
            snapshot = TaskSnapshot()

        self.restore(snapshot)
        logger.info("Loaded {} tasks from {}", len(snapshot.tasks), path)
