"""Errors raised by task stores.

Callers tell failures apart by type, never by message text.
"""


class TaskStoreError(Exception):
    """Base class for task store failures"""


class TaskNotFoundError(TaskStoreError, LookupError):
    """No task exists with the requested ID"""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class InvalidTaskArgumentError(TaskStoreError, ValueError):
    """The caller supplied a missing or malformed task payload"""


class SnapshotError(TaskStoreError):
    """A snapshot could not be encoded or decoded"""
