"""
API configuration loaded from environment or defaults.

Values are read on every call so a changed environment takes effect
without restarting the service.
"""

import os

from tossremote.core.recommender import DEFAULT_MODEL
from tossremote.core.tmdb_client import DEFAULT_BASE_URL


def get_openai_api_key() -> str | None:
    """Get chat-completion API key from env."""
    return os.getenv("OPENAI_API_KEY") or None


def get_openai_model() -> str:
    """Get chat-completion model name from env or default."""
    return os.getenv("OPENAI_MODEL", DEFAULT_MODEL)


def get_tmdb_api_key() -> str | None:
    """Get TMDB read access token from env."""
    return os.getenv("TMDB_API_KEY") or None


def get_tmdb_base_url() -> str:
    """Get TMDB API root from env or default."""
    return os.getenv("TMDB_BASE_URL", DEFAULT_BASE_URL)


def get_tmdb_timeout() -> float:
    """Get per-request TMDB timeout in seconds."""
    return float(os.getenv("TMDB_TIMEOUT", "10"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional log file name (written under logs/)."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
