"""
API route handlers.
"""

from tossremote.api.routers import recommendations, movies, trending, system

__all__ = ["recommendations", "movies", "trending", "system"]
