"""
API tests for the recommendation endpoint.

Uses FastAPI TestClient with the chat-completion client replaced by a fake.
"""

import pytest
from fastapi.testclient import TestClient

from conftest import make_openai_client
from tossremote.api.dependencies import get_recommendation_requester
from tossremote.api.main import app
from tossremote.core.exceptions import UpstreamError
from tossremote.core.recommender import RecommendationRequester

client = TestClient(app)

COMPLETION = "\n".join([
    "Collateral (2004) - Michael Mann",
    "Heat (1995) - Michael Mann",
    "Thief (1981) - Michael Mann",
])


@pytest.fixture
def fake_openai():
    fake = make_openai_client(COMPLETION)
    app.dependency_overrides[get_recommendation_requester] = (
        lambda: RecommendationRequester("test-key", client=fake)
    )
    yield fake
    app.dependency_overrides.clear()


class TestRecommendEndpoint:
    """Tests for POST /api/recommend."""

    def test_recommend(self, fake_openai):
        """Returns the completion text as a single string."""
        r = client.post("/api/recommend", json={"movies": "Heat, Ronin"})
        assert r.status_code == 200
        assert r.json() == {"recommendations": COMPLETION}

    def test_recommend_filters_exclusions(self, fake_openai):
        """Excluded titles are dropped even if the model returns them."""
        r = client.post(
            "/api/recommend",
            json={"movies": "Heat, Ronin", "excludeMovies": ["heat", "Thief (1981) - Michael Mann"]},
        )
        assert r.status_code == 200
        assert r.json()["recommendations"] == "Collateral (2004) - Michael Mann"
        prompt = fake_openai.chat.completions.calls[0]["messages"][1]["content"]
        assert "- heat" in prompt

    def test_missing_movies(self, fake_openai):
        """Missing or blank movies returns 400 with an error body."""
        for body in ({}, {"movies": ""}, {"movies": "   "}):
            r = client.post("/api/recommend", json=body)
            assert r.status_code == 400
            assert r.json() == {"error": "Please provide a list of movies"}

    def test_invalid_body(self, fake_openai):
        """A body of the wrong shape is a 400, not a validation 422."""
        r = client.post("/api/recommend", json={"movies": "Heat", "excludeMovies": "Heat"})
        assert r.status_code == 400
        assert r.json()["error"]

    def test_missing_api_key(self, monkeypatch):
        """Without OPENAI_API_KEY the endpoint answers 500 with an error message."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        r = client.post("/api/recommend", json={"movies": "Heat"})
        assert r.status_code == 500
        assert r.json() == {"error": "OpenAI API key is not configured"}

    def test_upstream_error_status_forwarded(self):
        class FailingRequester:
            def recommend(self, movies, exclude=None):
                raise UpstreamError.from_status(429, "Rate limit reached")

        app.dependency_overrides[get_recommendation_requester] = lambda: FailingRequester()
        try:
            r = client.post("/api/recommend", json={"movies": "Heat"})
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 429
        assert r.json() == {"error": "Error: Rate limit reached"}

    def test_unexpected_error_is_500(self):
        class BrokenRequester:
            def recommend(self, movies, exclude=None):
                raise KeyError("choices")

        app.dependency_overrides[get_recommendation_requester] = lambda: BrokenRequester()
        try:
            r = client.post("/api/recommend", json={"movies": "Heat"})
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to get recommendations"}
