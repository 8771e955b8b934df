"""
Movie detail API endpoints.

Both routes take a free-text "Title (Year) - Director" line, resolve it
against TMDB and return enriched details.
"""

import logging

from fastapi import APIRouter, Depends

from tossremote.api.dependencies import get_movie_resolver
from tossremote.api.models.movie import MovieRequest, DescriptionResponse, MovieDetailResponse
from tossremote.api.models.error import ErrorResponse
from tossremote.core.exceptions import MissingInputError, TossRemoteError
from tossremote.core.resolver import MovieResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["movies"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _require_movie_name(body: MovieRequest, message: str) -> str:
    if not body.movieName or not body.movieName.strip():
        raise MissingInputError(message)
    return body.movieName


@router.post("/description", response_model=DescriptionResponse, responses=ERROR_RESPONSES)
def get_description(
    body: MovieRequest,
    resolver: MovieResolver = Depends(get_movie_resolver),
):
    """Compact card: poster, formatted summary, rating and streaming."""
    movie_name = _require_movie_name(body, "Please provide a movie title")
    try:
        return resolver.get_description(movie_name)
    except TossRemoteError:
        raise
    except Exception as e:
        logger.exception("Unexpected error describing %r", movie_name)
        raise TossRemoteError("Failed to get movie details") from e


@router.post("/modal", response_model=MovieDetailResponse, responses=ERROR_RESPONSES)
def get_modal(
    body: MovieRequest,
    resolver: MovieResolver = Depends(get_movie_resolver),
):
    """Full detail record: cast, director, genres, trailer, backdrop."""
    movie_name = _require_movie_name(body, "Movie name is required")
    try:
        return resolver.get_detail(movie_name)
    except TossRemoteError:
        raise
    except Exception as e:
        logger.exception("Unexpected error fetching details for %r", movie_name)
        raise TossRemoteError("Failed to get movie details") from e
