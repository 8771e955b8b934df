"""
Pydantic schemas for Recommendation API.
"""

from pydantic import BaseModel, Field


class RecommendRequest(BaseModel):
    """Request body for recommendations; movies is validated by the route."""

    movies: str | None = None
    exclude_movies: list[str] | None = Field(None, alias="excludeMovies")

    class Config:
        populate_by_name = True


class RecommendResponse(BaseModel):
    """Newline-delimited "Title (Year) - Director" lines."""

    recommendations: str
