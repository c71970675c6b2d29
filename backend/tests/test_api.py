"""Tests for the HTTP surface: status codes and {error} bodies."""

import httpx
import pytest
from fastapi.testclient import TestClient

from howto.common.exceptions import UpstreamError
from howto.domains.search.follow_up import FollowUpHandler
from howto.domains.search.orchestrator import SearchOrchestrator
from howto.domains.search.providers import GoogleArticleProvider, YouTubeVideoProvider
from howto.domains.search.service import get_follow_up_handler, get_search_orchestrator
from howto.main import app
from conftest import (
    StubArticleProvider,
    StubLLM,
    StubVideoProvider,
    make_article,
    make_video,
)


@pytest.fixture
def stubs():
    return {
        "videos": StubVideoProvider([make_video(1), make_video(2)]),
        "articles": StubArticleProvider([make_article(1)]),
        "llm": StubLLM(answer="Step 1: Drape the tie."),
    }


@pytest.fixture
def client(stubs):
    orchestrator = SearchOrchestrator(stubs["videos"], stubs["articles"], stubs["llm"])
    app.dependency_overrides[get_search_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_follow_up_handler] = lambda: FollowUpHandler(stubs["llm"])
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSearchEndpoint:
    """Test GET /api/search."""

    def test_success(self, client):
        resp = client.get("/api/search", params={"q": "how to tie a tie", "language": "en"})
        assert resp.status_code == 200
        body = resp.json()
        assert set(body) == {"videos", "articles", "summary"}
        assert len(body["videos"]) == 2
        assert len(body["articles"]) == 1
        assert body["summary"] == "Step 1: Drape the tie."
        assert set(body["videos"][0]) == {"id", "title", "channel", "duration", "views", "thumbnail", "url"}

    def test_missing_query_400(self, client):
        resp = client.get("/api/search")
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing search query"}

    def test_invalid_query_400_without_provider_calls(self, client, stubs):
        resp = client.get("/api/search", params={"q": "xy"})
        assert resp.status_code == 400
        assert "error" in resp.json()
        assert stubs["videos"].calls == 0
        assert stubs["articles"].calls == 0
        assert stubs["llm"].calls == 0

    def test_summary_failure_500(self, client, stubs):
        stubs["llm"].error = UpstreamError("Failed to generate summary")
        resp = client.get("/api/search", params={"q": "tie a tie"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to generate summary"}

    def test_language_defaults_to_english(self, client, stubs):
        client.get("/api/search", params={"q": "tie a tie"})
        assert "Respond ONLY in English" in stubs["llm"].prompts[0]

    def test_malformed_provider_items_fall_back(self, client, stubs, full_credentials):
        def handler(request: httpx.Request) -> httpx.Response:
            if "youtube" in request.url.path:
                return httpx.Response(200, json={"items": [{"id": {"videoId": "v1"}, "snippet": {"title": None}}]})
            return httpx.Response(200, json={"items": [{"title": "Bad", "link": 123, "snippet": None}]})

        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        orchestrator = SearchOrchestrator(
            YouTubeVideoProvider(full_credentials, client=http),
            GoogleArticleProvider(full_credentials, client=http),
            stubs["llm"],
        )
        app.dependency_overrides[get_search_orchestrator] = lambda: orchestrator

        resp = client.get("/api/search", params={"q": "tie a tie"})

        assert resp.status_code == 200
        body = resp.json()
        assert len(body["videos"]) == 5
        assert all(v["id"].startswith("fallback-video-") for v in body["videos"])
        assert all(a["id"].startswith("fallback-article-") for a in body["articles"])
        assert body["summary"] == "Step 1: Drape the tie."


class TestFollowUpEndpoint:
    """Test POST /api/follow-up."""

    def test_success(self, client):
        resp = client.post("/api/follow-up", json={
            "originalQuery": "tie a tie",
            "followUpQuery": "What about a bow tie?",
            "language": "it",
        })
        assert resp.status_code == 200
        assert resp.json() == {"answer": "Step 1: Drape the tie."}

    def test_missing_question_400(self, client):
        resp = client.post("/api/follow-up", json={"originalQuery": "tie a tie"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing follow-up query"}

    def test_non_string_question_400(self, client):
        resp = client.post("/api/follow-up", json={"originalQuery": "tie a tie", "followUpQuery": 5})
        assert resp.status_code == 400

    def test_llm_failure_500(self, client, stubs):
        stubs["llm"].error = UpstreamError("Failed to generate answer")
        resp = client.post("/api/follow-up", json={"originalQuery": "tie a tie", "followUpQuery": "why?"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to generate answer"}


class TestMiscEndpoints:
    """Test ping, demo and health endpoints."""

    def test_ping(self, client):
        resp = client.get("/api/ping")
        assert resp.status_code == 200
        assert resp.json() == {"message": "ping"}

    def test_demo(self, client):
        assert client.get("/api/demo").json()["message"]

    def test_health_reports_providers(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert set(body["providers"]) == {"youtube", "google_search", "openai"}
