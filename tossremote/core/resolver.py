"""
Resolution of free-text recommendation lines to TMDB movies.
"""

import logging
from typing import Any, Dict, List, Tuple

from tossremote.core.details import MovieDescription, MovieDetail, build_description, build_detail
from tossremote.core.exceptions import MovieNotFoundError
from tossremote.core.ranking import rank_candidates
from tossremote.core.titles import clean_title, parse_movie_line
from tossremote.core.tmdb_client import TMDBClient

logger = logging.getLogger(__name__)


class MovieResolver:
    """
    Match "Title (Year) - Director" lines to TMDB records and enrich them.

    Searches with progressively broader queries until TMDB returns a
    result, ranks the candidates, then fetches details for the best one.
    """

    def __init__(self, tmdb: TMDBClient):
        self.tmdb = tmdb

    @staticmethod
    def search_attempts(title: str, year: str = "") -> List[Tuple[str, str]]:
        """
        Build the ordered, de-duplicated list of (query, year) searches.

        Order: exact title with year, cleaned title with year, cleaned title
        alone. Attempts identical to an earlier one are dropped.
        """
        cleaned = clean_title(title)
        attempts = []
        for attempt in ((title, year), (cleaned, year), (cleaned, "")):
            if attempt[0] and attempt not in attempts:
                attempts.append(attempt)
        return attempts

    def search(self, title: str, year: str = "") -> List[Dict[str, Any]]:
        """
        Run the search attempts until one returns candidates.

        Raises:
            MovieNotFoundError: If every attempt came back empty
        """
        for query, query_year in self.search_attempts(title, year):
            logger.debug("Searching TMDB: query=%r year=%r", query, query_year)
            results = self.tmdb.search_movies(query, year=query_year)
            if results:
                return results
            logger.info("No TMDB results for query=%r year=%r", query, query_year)
        raise MovieNotFoundError()

    def resolve(self, movie_line: str) -> Dict[str, Any]:
        """Return the best-ranked TMDB search candidate for a line."""
        title, year = parse_movie_line(movie_line)
        candidates = rank_candidates(self.search(title, year), title, year)
        best = candidates[0]
        logger.info(
            "Resolved %r to TMDB id %s (%s, %s candidates)",
            movie_line, best.get("id"), best.get("title"), len(candidates),
        )
        return best

    def get_detail(self, movie_line: str) -> MovieDetail:
        """Resolve a line and return the full detail record."""
        best = self.resolve(movie_line)
        return build_detail(self.tmdb.get_movie(best["id"]))

    def get_description(self, movie_line: str) -> MovieDescription:
        """Resolve a line and return the compact description card."""
        return build_description(self.get_detail(movie_line))
