"""
Pydantic schemas for API request/response validation.
"""

from tossremote.api.models.recommendation import RecommendRequest, RecommendResponse
from tossremote.api.models.movie import (
    MovieRequest,
    DescriptionResponse,
    MovieDetailResponse,
    TrendingMovie,
    TrendingResponse,
)
from tossremote.api.models.error import ErrorResponse

__all__ = [
    "RecommendRequest",
    "RecommendResponse",
    "MovieRequest",
    "DescriptionResponse",
    "MovieDetailResponse",
    "TrendingMovie",
    "TrendingResponse",
    "ErrorResponse",
]
