"""
Configuration management for the Receitas client.

This module centralizes environment variable loading from the .env file at the
project root. It is imported early by the Streamlit frontend (streamlit_app/app.py)
and by the development collection service (api/main.py) so that .env is loaded
before any other code reads environment variables.

When no .env exists, load_dotenv() is a no-op and the process environment is used.

Environment Variables:
- RECIPES_API_URL: Optional, base URL of the collection service
  (defaults to http://localhost:8000, the development service)
- RECIPES_API_TIMEOUT: Optional, request timeout in seconds (unset means no timeout)
- LOG_LEVEL: Optional, root logging level (defaults to INFO)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence
    over values in the file (override=False).
    """
    # receitas/config.py -> receitas/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


class ServiceConfig:
    """Configuration for talking to the remote recipe collection service."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the collection service base URL.

        Returns:
            Base URL with trailing slash removed. The hosted mockapi.io project
            the app was first built against works too, e.g.
            https://673bc4aa96b8dcd5f3f766c6.mockapi.io
        """
        url = os.getenv("RECIPES_API_URL", DEFAULT_API_URL)
        return url.rstrip("/")

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get the client-side request timeout in seconds.

        Returns:
            Timeout as float, or None when unset, empty, non-numeric or
            non-positive (the transport default applies).
        """
        raw = os.getenv("RECIPES_API_TIMEOUT", "").strip()
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError:
            logging.getLogger(__name__).warning(
                "Ignoring invalid RECIPES_API_TIMEOUT=%r", raw
            )
            return None
        return timeout if timeout > 0 else None

    @staticmethod
    def get_log_level() -> str:
        """Get the root logging level name (default: INFO)."""
        return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install a basic root handler at the configured level.

    Streamlit re-runs the app script on every interaction; basicConfig only
    installs a handler the first time, so repeated calls are harmless.
    """
    level_name = (level or ServiceConfig.get_log_level()).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric_level)
