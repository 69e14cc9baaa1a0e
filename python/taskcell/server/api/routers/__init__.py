"""API routers for TaskCell Server."""

from .health import create_health_router
from .tasks import create_tasks_router, get_task_store

__all__ = ["create_health_router", "create_tasks_router", "get_task_store"]
