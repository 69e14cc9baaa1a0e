"""Settings for TaskCell Server.

All values come from environment variables (a project-level ``.env`` file is
loaded when the ``taskcell`` package is imported).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import List

from taskcell import __version__

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent.parent


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Server settings resolved from the environment."""

    def __init__(self):
        # Application
        self.APP_NAME: str = os.getenv("APP_NAME", "TaskCell")
        self.APP_VERSION: str = os.getenv("APP_VERSION", __version__)
        self.APP_ENVIRONMENT: str = os.getenv("APP_ENVIRONMENT", "development")

        # API
        self.API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
        self.API_PORT: int = int(os.getenv("API_PORT", "8080"))
        self.API_DEBUG: bool = _env_bool("API_DEBUG")
        self.CORS_ORIGINS: List[str] = _env_list("CORS_ORIGINS", "*")

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_FORMAT: str = os.getenv("LOG_FORMAT", "default")
        self.LOGS_DIR: Path = Path(os.getenv("LOGS_DIR", str(PROJECT_ROOT / "logs")))

        # Task snapshot file, read at startup and written at shutdown
        self.STORE_PATH: Path = Path(os.getenv("STORE_PATH", "./storage.json"))


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
