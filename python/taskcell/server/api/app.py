"""FastAPI application factory for TaskCell Server."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskcell.core.task import InMemoryTaskStore, TaskStore

from ..config.settings import Settings, get_settings
from .routers import create_health_router, create_tasks_router

PARSE_INPUT_FAILED = "parse input failed"


def create_app(
    store: Optional[TaskStore] = None,
    store_path: Optional[Union[str, Path]] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store: Task store to serve. Defaults to a fresh ``InMemoryTaskStore``.
        store_path: Snapshot file restored at startup and written at shutdown.
            Defaults to ``STORE_PATH`` when no store is given; with an
            explicit store and no path, nothing is persisted.
    """
    settings = get_settings()
    if store is None:
        store = InMemoryTaskStore()
        if store_path is None:
            store_path = settings.STORE_PATH

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if store_path is not None:
            store.load(store_path)
        logger.info(
            "{} starting up on {}:{}",
            settings.APP_NAME,
            settings.API_HOST,
            settings.API_PORT,
        )
        yield
        # Shutdown
        logger.info("{} shutting down...", settings.APP_NAME)
        if store_path is not None:
            try:
                store.save(store_path)
            except Exception:
                logger.exception("Failed to save task snapshot to {}", store_path)

    app = FastAPI(
        title="TaskCell Server API",
        description="Create, list, update and delete tasks",
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.API_DEBUG else None,
        redoc_url="/redoc" if settings.API_DEBUG else None,
    )
    app.state.task_store = store

    # Add middleware
    _add_middleware(app, settings)

    # Add exception handlers
    _add_exception_handlers(app)

    # Add routes
    _add_routes(app)

    return app


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    """Add middleware to the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _add_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"message": ...}``."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.debug("Rejected request {} {}: {}", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"message": PARSE_INPUT_FAILED})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _add_routes(app: FastAPI) -> None:
    """Add routes to the application."""
    app.include_router(create_health_router())
    app.include_router(create_tasks_router(), prefix="/api")
