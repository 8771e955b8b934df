"""
Trending movies API endpoint.
"""

import logging

from fastapi import APIRouter, Depends

from tossremote.api.dependencies import get_tmdb_client
from tossremote.api.models.movie import TrendingResponse
from tossremote.api.models.error import ErrorResponse
from tossremote.core.exceptions import TossRemoteError
from tossremote.core.tmdb_client import TMDBClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["trending"])


@router.get("/trending", response_model=TrendingResponse, responses={500: {"model": ErrorResponse}})
def get_trending(tmdb: TMDBClient = Depends(get_tmdb_client)):
    """This week's trending movies from TMDB."""
    try:
        data = tmdb.get_trending("week")
        return TrendingResponse(results=data.get("results") or [])
    except TossRemoteError:
        raise
    except Exception as e:
        logger.exception("Unexpected error fetching trending movies")
        raise TossRemoteError("Failed to fetch trending movies") from e
