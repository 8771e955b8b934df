"""
FastAPI client wrapper for Streamlit UI.
"""

import os
from typing import Iterable

import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def error_message(exc: Exception, default: str) -> str:
    """Prefer the API's {"error": ...} body over a generic message."""
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            return response.json().get("error") or default
        except ValueError:
            return default
    return default


def recommend(movies: str, exclude_movies: Iterable[str] | None = None) -> str:
    """Get newline-delimited recommendations for the user's movies."""
    r = requests.post(
        f"{get_api_base_url()}/api/recommend",
        json={"movies": movies, "excludeMovies": list(exclude_movies or [])},
        timeout=60,
    )
    r.raise_for_status()
    return r.json()["recommendations"]


def get_description(movie_name: str) -> dict:
    """Get the compact description card for a recommendation line."""
    r = requests.post(
        f"{get_api_base_url()}/api/description",
        json={"movieName": movie_name},
        timeout=30,
    )
    r.raise_for_status()
    return r.json()


def get_movie_details(movie_name: str) -> dict:
    """Get the full detail record shown in the movie modal."""
    r = requests.post(
        f"{get_api_base_url()}/api/modal",
        json={"movieName": movie_name},
        timeout=30,
    )
    r.raise_for_status()
    return r.json()


def get_trending() -> list[dict]:
    """Get this week's trending movies."""
    r = requests.get(f"{get_api_base_url()}/api/trending", timeout=10)
    r.raise_for_status()
    return r.json().get("results", [])


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
