"""Health check router for TaskCell Server."""

from fastapi import APIRouter, Depends

from taskcell.core.task import TaskStore

from ...config.settings import get_settings
from ..schemas.health import HealthResponse
from .tasks import get_task_store


def create_health_router() -> APIRouter:
    """Create health check routes."""
    router = APIRouter(prefix="/health", tags=["health"])

    @router.get("/", response_model=HealthResponse)
    async def health_check(store: TaskStore = Depends(get_task_store)):
        """Health check endpoint."""
        settings = get_settings()
        return HealthResponse(
            status="healthy",
            version=settings.APP_VERSION,
            environment=settings.APP_ENVIRONMENT,
            task_count=store.count(),
        )

    @router.get("/ready")
    async def readiness_check():
        """Readiness check endpoint."""
        return {"status": "ready"}

    @router.get("/live")
    async def liveness_check():
        """Liveness check endpoint."""
        return {"status": "alive"}

    return router
