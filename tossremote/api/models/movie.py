"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel


class MovieRequest(BaseModel):
    """Request body naming a recommendation line to look up."""

    movieName: str | None = None


class DescriptionResponse(BaseModel):
    """Compact movie card with a pre-formatted description."""

    title: str
    description: str
    poster_path: str | None
    rating: float | None = None
    streaming: list[str] = []
    tmdb_url: str


class MovieDetailResponse(BaseModel):
    """Full movie record for the detail modal."""

    title: str
    description: str
    poster_path: str | None
    backdrop_path: str | None = None
    cast: list[str] = []
    director: str = ""
    genres: list[str] = []
    runtime: int | None = None
    rating: float | None = None
    year: int | None = None
    streaming: list[str] = []
    trailer: str | None = None
    tmdb_url: str


class TrendingMovie(BaseModel):
    """Single entry of the weekly trending list."""

    id: int
    title: str
    poster_path: str | None = None
    vote_average: float | None = None
    release_date: str | None = None


class TrendingResponse(BaseModel):
    """Response model for trending movies."""

    results: list[TrendingMovie]
