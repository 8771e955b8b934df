"""
Core recommendation logic: title parsing, candidate ranking,
TMDB access and chat-completion requests.
"""

from tossremote.core.titles import MovieQuery, parse_movie_line, clean_title, title_key
from tossremote.core.ranking import rank_candidates
from tossremote.core.resolver import MovieResolver
from tossremote.core.recommender import RecommendationRequester

__all__ = [
    "MovieQuery",
    "parse_movie_line",
    "clean_title",
    "title_key",
    "rank_candidates",
    "MovieResolver",
    "RecommendationRequester",
]
