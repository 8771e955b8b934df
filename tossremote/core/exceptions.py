"""
Exceptions raised by the recommendation service.

Every exception carries the HTTP status the API answers with; the FastAPI
app renders them as {"error": message} bodies.
"""

from typing import Optional


class TossRemoteError(Exception):
    """Base exception for the recommendation service."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(TossRemoteError):
    """Raised when a required API key is not configured."""


class MissingInputError(TossRemoteError):
    """Raised when a request lacks a required field."""

    status_code = 400


class MovieNotFoundError(TossRemoteError):
    """Raised when every search fallback came back empty."""

    def __init__(self, message: str = "Error: Movie not found"):
        super().__init__(message)


class UpstreamError(TossRemoteError):
    """Raised when TMDB or the chat-completion service fails."""

    @classmethod
    def from_status(cls, status_code: Optional[int], detail: str) -> "UpstreamError":
        """Build an error that forwards the upstream status when known."""
        if status_code == 401:
            message = "Invalid API key"
        else:
            message = f"Error: {detail}"
        return cls(message, status_code=status_code or 500)
