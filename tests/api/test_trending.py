"""
API tests for trending and system endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from conftest import FakeTMDB
from tossremote.api.dependencies import get_tmdb_client
from tossremote.api.main import app

client = TestClient(app)

TRENDING = {
    "page": 1,
    "results": [
        {"id": 1, "title": "New Release", "poster_path": "/new.jpg", "vote_average": 7.1,
         "release_date": "2026-10-01", "media_type": "movie", "popularity": 900.5},
        {"id": 2, "title": "Holdover", "poster_path": None, "vote_average": 6.4,
         "release_date": "2026-09-12"},
    ],
}


class TestTrendingEndpoint:
    """Tests for GET /api/trending."""

    def test_trending(self):
        app.dependency_overrides[get_tmdb_client] = lambda: FakeTMDB(trending=TRENDING)
        try:
            r = client.get("/api/trending")
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 200
        results = r.json()["results"]
        assert [m["id"] for m in results] == [1, 2]
        assert results[0] == {
            "id": 1, "title": "New Release", "poster_path": "/new.jpg",
            "vote_average": 7.1, "release_date": "2026-10-01",
        }

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("TMDB_API_KEY", raising=False)
        r = client.get("/api/trending")
        assert r.status_code == 500
        assert r.json()["error"]


class TestSystemEndpoints:
    """Tests for GET / and GET /api/health."""

    def test_root(self):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health_degraded_without_keys(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setenv("TMDB_API_KEY", "token")
        data = client.get("/api/health").json()
        assert data == {"status": "degraded", "openai_configured": False, "tmdb_configured": True}

    def test_health_healthy(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "key")
        monkeypatch.setenv("TMDB_API_KEY", "token")
        assert client.get("/api/health").json()["status"] == "healthy"

    def test_unknown_route_uses_error_body(self):
        r = client.get("/api/does-not-exist")
        assert r.status_code == 404
        assert r.json() == {"error": "Not Found"}


class TestUnexpectedErrors:
    """Failures outside the domain errors still answer with a JSON error body."""

    def test_bad_timeout_setting(self, monkeypatch):
        """A broken TMDB_TIMEOUT fails inside the dependency, before the route."""
        monkeypatch.setenv("TMDB_API_KEY", "token")
        monkeypatch.setenv("TMDB_TIMEOUT", "ten")
        lenient_client = TestClient(app, raise_server_exceptions=False)
        r = lenient_client.get("/api/trending")
        assert r.status_code == 500
        assert r.headers["content-type"].startswith("application/json")
        assert r.json() == {"error": "Internal server error"}

    def test_malformed_trending_entry(self):
        """An entry TMDB sends without a title becomes the route's failure message."""
        broken = {"results": [{"id": 1, "title": None}]}
        app.dependency_overrides[get_tmdb_client] = lambda: FakeTMDB(trending=broken)
        try:
            r = client.get("/api/trending")
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to fetch trending movies"}
