"""
Shared fixtures: canned TMDB payloads and fake upstream clients.
"""

from types import SimpleNamespace

import pytest
import requests


def make_movie_payload(**overrides):
    """TMDB /movie/{id} payload with credits, videos and providers appended."""
    payload = {
        "id": 949,
        "title": "Heat",
        "overview": "A group of professional bank robbers start to feel the heat.",
        "poster_path": "/heat.jpg",
        "backdrop_path": "/heat_backdrop.jpg",
        "release_date": "1995-12-15",
        "runtime": 170,
        "vote_average": 7.9,
        "genres": [{"id": 28, "name": "Action"}, {"id": 80, "name": "Crime"}],
        "credits": {
            "cast": [{"name": name} for name in (
                "Al Pacino", "Robert De Niro", "Val Kilmer",
                "Jon Voight", "Tom Sizemore", "Diane Venora", "Amy Brenneman",
            )],
            "crew": [
                {"name": "Art Linson", "job": "Producer"},
                {"name": "Michael Mann", "job": "Director"},
            ],
        },
        "videos": {
            "results": [
                {"key": "teaser1", "type": "Teaser", "site": "YouTube"},
                {"key": "vimeo1", "type": "Trailer", "site": "Vimeo"},
                {"key": "2GfZl4kuVNI", "type": "Trailer", "site": "YouTube"},
            ]
        },
        "watch/providers": {
            "results": {
                "US": {
                    "flatrate": [{"provider_name": name} for name in (
                        "Netflix", "Max", "Hulu", "Peacock", "Paramount+", "Tubi",
                    )]
                }
            }
        },
    }
    payload.update(overrides)
    return payload


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, data=None, status_code=200):
        self._data = data if data is not None else {}
        self.status_code = status_code

    def json(self):
        return self._data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records GET calls and answers from a list of queued responses."""

    def __init__(self, responses=None):
        self.headers = {}
        self.calls = []
        self.responses = list(responses or [])

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeTMDB:
    """In-memory TMDB client keyed by (query, year)."""

    def __init__(self, search_results=None, movies=None, trending=None):
        self.search_results = search_results or {}
        self.movies = movies or {}
        self.trending = trending or {"results": []}
        self.searches = []

    def search_movies(self, query, year=""):
        self.searches.append((query, year))
        return self.search_results.get((query, year), [])

    def get_movie(self, movie_id):
        return self.movies[movie_id]

    def get_trending(self, window="week"):
        return self.trending


class FakeCompletions:
    """Mimics client.chat.completions of the openai SDK."""

    def __init__(self, content="", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_openai_client(content="", error=None):
    completions = FakeCompletions(content=content, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def movie_payload():
    return make_movie_payload()


@pytest.fixture
def heat_tmdb(movie_payload):
    """Fake TMDB that knows a single search result for Heat (1995)."""
    candidate = {
        "id": 949, "title": "Heat", "release_date": "1995-12-15",
        "vote_count": 7000, "vote_average": 7.9, "poster_path": "/heat.jpg",
    }
    return FakeTMDB(
        search_results={("Heat", "1995"): [candidate]},
        movies={949: movie_payload},
    )
