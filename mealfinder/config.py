"""
Configuration management for Meal Finder.

This module centralizes environment variable loading from the .env file at the
project root. It is imported early by the Streamlit entry point
(streamlit_app/app.py) so that .env is loaded before any other code reads the
environment.

When no .env exists, load_dotenv() is a no-op and process environment
variables (or the defaults below) are used instead.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1/1"
- MEALDB_TIMEOUT_SECONDS: Optional, request timeout in seconds (unset = no timeout)
- MEALDB_DEFAULT_QUERY: Optional, search term used when nothing else is selected
- MEALFINDER_LOG_LEVEL: Optional, defaults to "INFO"
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_QUERY = "chicken"
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take
    precedence over values in .env (override=False).
    """
    # mealfinder/config.py -> mealfinder/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


class MealDBConfig:
    """Configuration for the TheMealDB connector."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the API base URL.

        Returns:
            Base URL with trailing slash removed.
        """
        return os.getenv("MEALDB_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get the optional request timeout.

        Returns:
            Timeout in seconds, or None when MEALDB_TIMEOUT_SECONDS is unset or empty.

        Raises:
            RuntimeError: If the value is not a positive number.
        """
        raw = os.getenv("MEALDB_TIMEOUT_SECONDS", "").strip()
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError as e:
            raise RuntimeError(
                f"MEALDB_TIMEOUT_SECONDS must be a number of seconds, got {raw!r}"
            ) from e
        if timeout <= 0:
            raise RuntimeError(f"MEALDB_TIMEOUT_SECONDS must be positive, got {raw!r}")
        return timeout

    @staticmethod
    def get_default_query() -> str:
        """
        Get the search term used for the unfiltered default fetch.

        Returns:
            Default query string (default: "chicken")
        """
        return os.getenv("MEALDB_DEFAULT_QUERY", "").strip() or DEFAULT_QUERY


class AppConfig:
    """Configuration for the Streamlit frontend."""

    @staticmethod
    def get_log_level() -> str:
        return os.getenv("MEALFINDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
