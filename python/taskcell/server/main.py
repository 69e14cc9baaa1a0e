"""Main entry point for TaskCell Server."""

from __future__ import annotations

import uvicorn
from loguru import logger

from taskcell.server.api.app import create_app
from taskcell.server.config.logging import setup_logging
from taskcell.server.config.settings import get_settings


def main() -> None:
    """Start the server; SIGINT/SIGTERM trigger a graceful stop and final save."""

    settings = get_settings()
    setup_logging()

    app = create_app(store_path=settings.STORE_PATH)

    config = uvicorn.Config(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.API_DEBUG else "info",
        log_config=None,
    )
    server = uvicorn.Server(config)

    logger.info(
        "http server start listening on {}:{}", settings.API_HOST, settings.API_PORT
    )
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught; shutting down")
    logger.info("http server closed")


if __name__ == "__main__":
    main()
