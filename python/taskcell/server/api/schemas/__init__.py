"""API schemas for TaskCell Server."""

from .common import ErrorResponse
from .health import HealthResponse
from .tasks import (
    CreateTaskRequest,
    TaskData,
    TaskListResponse,
    TaskResponse,
    UpdateTaskRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "CreateTaskRequest",
    "TaskData",
    "TaskListResponse",
    "TaskResponse",
    "UpdateTaskRequest",
]
