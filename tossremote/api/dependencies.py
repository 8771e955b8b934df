"""
FastAPI dependency injection for the upstream service clients.
"""

import logging

from tossremote.api.config import (
    get_openai_api_key,
    get_openai_model,
    get_tmdb_api_key,
    get_tmdb_base_url,
    get_tmdb_timeout,
)
from tossremote.core.exceptions import ConfigurationError
from tossremote.core.recommender import RecommendationRequester
from tossremote.core.resolver import MovieResolver
from tossremote.core.tmdb_client import TMDBClient

logger = logging.getLogger(__name__)


def get_tmdb_client() -> TMDBClient:
    """Build a TMDB client, failing with a 500 if no key is configured."""
    api_key = get_tmdb_api_key()
    if not api_key:
        logger.error("TMDB_API_KEY is not set in environment variables.")
        raise ConfigurationError("TMDB API key is not configured")
    return TMDBClient(api_key, base_url=get_tmdb_base_url(), timeout=get_tmdb_timeout())


def get_movie_resolver() -> MovieResolver:
    """Get a resolver bound to a freshly configured TMDB client."""
    return MovieResolver(get_tmdb_client())


def get_recommendation_requester() -> RecommendationRequester:
    """Build the chat-completion requester, failing with a 500 if no key is configured."""
    api_key = get_openai_api_key()
    if not api_key:
        logger.error("OpenAI API key is missing")
        raise ConfigurationError("OpenAI API key is not configured")
    return RecommendationRequester(api_key, model=get_openai_model())
