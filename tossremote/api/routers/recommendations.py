"""
Recommendation API endpoints.
"""

import logging

from fastapi import APIRouter, Depends

from tossremote.api.dependencies import get_recommendation_requester
from tossremote.api.models.recommendation import RecommendRequest, RecommendResponse
from tossremote.api.models.error import ErrorResponse
from tossremote.core.exceptions import MissingInputError, TossRemoteError
from tossremote.core.recommender import RecommendationRequester

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.post(
    "/recommend",
    response_model=RecommendResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def recommend(
    body: RecommendRequest,
    requester: RecommendationRequester = Depends(get_recommendation_requester),
):
    """Ask the chat model for ten new movies, minus the excluded ones."""
    if not body.movies or not body.movies.strip():
        raise MissingInputError("Please provide a list of movies")
    try:
        text = requester.recommend(body.movies, exclude=body.exclude_movies)
    except TossRemoteError:
        raise
    except Exception as e:
        logger.exception("Unexpected error while requesting recommendations")
        raise TossRemoteError("Failed to get recommendations") from e
    return RecommendResponse(recommendations=text)
