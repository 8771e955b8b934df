"""
Pydantic schema for error bodies.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Every failed request answers with a single error message."""

    error: str
