from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(IntEnum):
    """Completion state of a task; the integer value is the wire encoding"""

    INCOMPLETE = 0
    COMPLETE = 1


class Task(BaseModel):
    """A single tracked task.

    Instances are immutable; the store hands out the same objects it holds,
    so an update always goes through ``TaskStore.update_task``.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Store-assigned task ID")
    name: str = Field(..., description="Task name")
    status: TaskStatus = Field(
        default=TaskStatus.INCOMPLETE, description="Completion status"
    )

    def is_complete(self) -> bool:
        """Check if the task has been completed"""
        return self.status == TaskStatus.COMPLETE
