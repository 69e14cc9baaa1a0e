"""Task module initialization"""

from .errors import (
    InvalidTaskArgumentError,
    SnapshotError,
    TaskNotFoundError,
    TaskStoreError,
)
from .models import Task, TaskStatus
from .snapshot import TaskSnapshot, read_snapshot, write_snapshot
from .store import InMemoryTaskStore, TaskStore

__all__ = [
    "Task",
    "TaskStatus",
    "TaskStore",
    "InMemoryTaskStore",
    "TaskSnapshot",
    "read_snapshot",
    "write_snapshot",
    "TaskStoreError",
    "TaskNotFoundError",
    "InvalidTaskArgumentError",
    "SnapshotError",
]
