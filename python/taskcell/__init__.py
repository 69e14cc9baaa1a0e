"""TaskCell - A small task-tracking service with snapshot persistence."""

__version__ = "0.1.0"
__author__ = "TaskCell Team"
__description__ = "A small task-tracking service with snapshot persistence"

__all__ = [
    "__version__",
    "__author__",
    "__description__",
]

# Load environment variables as early as possible
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_env_file_early(env_file: Optional[Path] = None) -> None:
    """Load environment variables from .env file at package import time.

    Looks for .env file in project root (two levels up from this file) unless
    ``env_file`` is given.

    Note:
        - Existing environment variables take precedence (override=False)
        - Debug output can be enabled via TASKCELL_DEBUG=true
        - A broken .env file never prevents the package from importing
    """
    if env_file is None:
        current_dir = Path(__file__).parent
        project_root = current_dir.parent.parent
        env_file = project_root / ".env"
    debug = os.getenv("TASKCELL_DEBUG", "false").lower() == "true"

    if not env_file.exists():
        if debug:
            print(f"No .env file found at {env_file}")
        return

    try:
        load_dotenv(env_file, override=False)
    except Exception as e:
        if debug:
            print(f"Error loading .env file: {e}")
        return

    if debug:
        print(f"Environment variables loaded from {env_file}")
        print(f"  STORE_PATH: {os.environ.get('STORE_PATH', 'not set')}")


# Load environment variables immediately when package is imported
load_env_file_early()
