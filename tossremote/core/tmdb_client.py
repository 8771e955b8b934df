"""
Thin client for The Movie Database (TMDB) REST API.

Authenticates with a v4 read access token sent as a Bearer header.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from tossremote.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"
DETAIL_APPENDS = "credits,videos,watch/providers"


class TMDBClient:
    """
    Minimal TMDB client covering search, movie details and trending.

    Usage:
        client = TMDBClient(api_key)
        results = client.search_movies("Heat", year="1995")
        details = client.get_movie(results[0]["id"])
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: TMDB read access token
            base_url: API root (default: public v3 endpoint)
            timeout: Seconds to wait for each request
            session: Optional pre-built requests session
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {api_key}",
            "accept": "application/json",
        })

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
            r.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("TMDB request %s failed with status %s: %s", path, status, e)
            raise UpstreamError.from_status(status, str(e)) from e
        except requests.RequestException as e:
            logger.error("TMDB request %s failed: %s", path, e)
            raise UpstreamError.from_status(None, str(e)) from e
        return r.json()

    def search_movies(self, query: str, year: str = "") -> List[Dict[str, Any]]:
        """Search movies by title, optionally restricted to a release year."""
        params = {"query": query}
        if year:
            params["year"] = year
        data = self._get("/search/movie", params=params)
        return data.get("results") or []

    def get_movie(self, movie_id: int) -> Dict[str, Any]:
        """Fetch a movie with credits, videos and watch providers appended."""
        return self._get(f"/movie/{movie_id}", params={"append_to_response": DETAIL_APPENDS})

    def get_trending(self, window: str = "week") -> Dict[str, Any]:
        """Fetch trending movies for the given time window ('day' or 'week')."""
        data = self._get(f"/trending/movie/{window}")
        logger.info("Fetched %d trending movies", len(data.get("results") or []))
        return data
