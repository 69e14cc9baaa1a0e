"""Task schemas for TaskCell Server."""

from typing import List

from pydantic import BaseModel, Field, StrictInt, field_validator

from taskcell.core.task import Task, TaskStatus


class TaskData(BaseModel):
    """A task as exposed over HTTP."""

    id: int = Field(..., description="Task ID")
    name: str = Field(..., description="Task name")
    status: TaskStatus = Field(..., description="0 = incomplete, 1 = complete")

    @classmethod
    def from_task(cls, task: Task) -> "TaskData":
        return cls(id=task.id, name=task.name, status=task.status)


class CreateTaskRequest(BaseModel):
    """Request model for creating a task."""

    name: str = Field(..., description="Task name")

    class Config:
        json_schema_extra = {"example": {"name": "buy milk"}}


class UpdateTaskRequest(BaseModel):
    """Request model for replacing a task's name and status."""

    name: str = Field(..., description="Task name")
    status: StrictInt = Field(..., description="0 = incomplete, 1 = complete")

    class Config:
        json_schema_extra = {"example": {"name": "buy milk", "status": 1}}

    @field_validator("status")
    @classmethod
    def _check_status(cls, value: int) -> TaskStatus:
        # StrictInt rejects booleans and numeric strings before this runs
        return TaskStatus(value)


class TaskResponse(BaseModel):
    """Response wrapping a single task."""

    result: TaskData


class TaskListResponse(BaseModel):
    """Response wrapping all tasks, newest first."""

    result: List[TaskData] = Field(default_factory=list)

    @classmethod
    def from_tasks(cls, tasks: List[Task]) -> "TaskListResponse":
        return cls(result=[TaskData.from_task(task) for task in tasks])
