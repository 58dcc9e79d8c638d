"""
Tests for the HTTP surface, with the summarizer mocked.
"""

import html
import json
import re
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from paraphraser.errors import ProviderError
from paraphraser.main import app
from paraphraser.services.action_service import GENERIC_ERROR_MESSAGE

SUMMARIZE = "paraphraser.services.action_service.summarize_job_description"
TOO_SHORT = "Please provide a job description of at least 50 characters."


@pytest.fixture
def client():
    return TestClient(app)


class TestHealthAndHome:

    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_root_redirects_to_ui(self, client):
        resp = client.get("/", follow_redirects=False)
        assert resp.status_code == 307
        assert resp.headers["location"] == "/ui/"

    @pytest.mark.parametrize("path", ["/api/llm/providers", "/api/llm/validate-key"])
    def test_key_validation_and_provider_listing_are_not_served(self, client, path):
        assert client.get(path).status_code == 404
        assert client.post(path, json={}).status_code == 404


class TestParaphraseApi:

    def test_short_input(self, client):
        with patch(SUMMARIZE, AsyncMock()) as mock:
            resp = client.post("/api/paraphrase", json={"jobDescription": "short"})

        assert resp.status_code == 200
        assert resp.json() == {"error": TOO_SHORT}
        mock.assert_not_awaited()

    def test_success_envelope_is_camel_case(self, client, summary, job_description):
        with patch(SUMMARIZE, AsyncMock(return_value=summary)):
            resp = client.post("/api/paraphrase", json={"jobDescription": job_description})

        body = resp.json()
        assert resp.status_code == 200
        assert "error" not in body
        assert body["keyTerms"] == ["Python", "FastAPI", "PostgreSQL"]
        assert body["summary"]["jobTitle"] == "Backend Engineer"
        assert "rate" not in body["summary"]

    def test_header_key_and_query_choice_are_used(self, client, summary, job_description):
        with patch(SUMMARIZE, AsyncMock(return_value=summary)) as mock:
            client.post(
                "/api/paraphrase?provider=groq&model_key=llama-3.1-8b",
                json={"jobDescription": job_description},
                headers={"X-Groq-Key": "gsk-header"},
            )

        kwargs = mock.await_args.kwargs
        assert kwargs["provider"] == "groq"
        assert kwargs["model_key"] == "llama-3.1-8b"
        assert kwargs["api_key"] == "gsk-header"

    def test_provider_failure_is_generic(self, client, job_description):
        with patch(SUMMARIZE, AsyncMock(side_effect=ProviderError("quota exceeded for key sk-123"))):
            resp = client.post("/api/paraphrase", json={"jobDescription": job_description})

        assert resp.json() == {"error": GENERIC_ERROR_MESSAGE}
        assert "sk-123" not in resp.text

    def test_missing_body_field_is_422(self, client):
        resp = client.post("/api/paraphrase", json={})
        assert resp.status_code == 422

    def test_copy_text(self, client, reply_dict):
        resp = client.post("/api/paraphrase/text", json=reply_dict)

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text.startswith("🔎 Job Title: Backend Engineer\n")
        assert "💰" not in resp.text


class TestUi:

    def test_idle_page(self, client):
        resp = client.get("/ui/")

        assert resp.status_code == 200
        assert 'name="jobDescription"' in resp.text
        assert "AI-Generated Analysis" in resp.text

    def test_fragment_success(self, client, summary, job_description):
        with patch(SUMMARIZE, AsyncMock(return_value=summary)):
            resp = client.post("/ui/paraphrase", data={"jobDescription": job_description})

        body = resp.json()
        assert "error" not in body
        assert "🔎 Backend Engineer" in body["html"]
        assert "FastAPI" in body["html"]
        assert "💰" not in body["html"]
        assert body["text"].startswith("🔎 Job Title: Backend Engineer")

    def test_fragment_error(self, client):
        resp = client.post("/ui/paraphrase", data={"jobDescription": "short"})
        assert resp.json() == {"error": TOO_SHORT}

    def test_full_page_submit_renders_result(self, client, summary, job_description):
        with patch(SUMMARIZE, AsyncMock(return_value=summary)):
            resp = client.post("/ui/", data={"jobDescription": job_description})

        assert resp.status_code == 200
        assert "What You Bring" in resp.text
        assert "3+ years of Python" in resp.text

    def test_full_page_submit_shows_notice(self, client):
        resp = client.post("/ui/", data={"jobDescription": "short"})

        assert resp.status_code == 200
        assert TOO_SHORT in resp.text
        assert "What You Bring" not in resp.text

    def test_rendered_values_are_escaped(self, client, summary, job_description):
        hostile = summary.model_copy(update={"job_title": "<script>alert(1)</script>"})
        with patch(SUMMARIZE, AsyncMock(return_value=hostile)):
            resp = client.post("/ui/paraphrase", data={"jobDescription": job_description})

        assert "<script>alert(1)</script>" not in resp.json()["html"]


    def test_full_page_error_keeps_previous_summary(self, client, summary, job_description):
        with patch(SUMMARIZE, AsyncMock(return_value=summary)):
            first = client.post("/ui/", data={"jobDescription": job_description})
        previous = _hidden_value(first.text, "previousSummary")
        assert previous

        with patch(SUMMARIZE, AsyncMock(side_effect=ProviderError("quota exceeded"))):
            second = client.post(
                "/ui/",
                data={"jobDescription": job_description, "previousSummary": previous},
            )

        assert f'class="error">{GENERIC_ERROR_MESSAGE}<' in second.text
        assert "🔎 Backend Engineer" in second.text
        assert "3+ years of Python" in second.text
        assert _hidden_value(second.text, "previousSummary") == previous

    def test_full_page_success_replaces_previous_summary(self, client, summary, job_description):
        with patch(SUMMARIZE, AsyncMock(return_value=summary)):
            first = client.post("/ui/", data={"jobDescription": job_description})
        previous = _hidden_value(first.text, "previousSummary")

        newer = summary.model_copy(update={"job_title": "Data Engineer"})
        with patch(SUMMARIZE, AsyncMock(return_value=newer)):
            second = client.post(
                "/ui/",
                data={"jobDescription": job_description, "previousSummary": previous},
            )

        assert "🔎 Data Engineer" in second.text
        assert "🔎 Backend Engineer" not in second.text

    def test_tampered_previous_summary_is_dropped(self, client):
        resp = client.post("/ui/", data={"jobDescription": "short", "previousSummary": '{"jobTitle": 1}'})

        assert resp.status_code == 200
        assert TOO_SHORT in resp.text
        assert "What You Bring" not in resp.text

    def test_fragment_returns_snapshot(self, client, summary, job_description):
        with patch(SUMMARIZE, AsyncMock(return_value=summary)):
            resp = client.post("/ui/paraphrase", data={"jobDescription": job_description})

        snapshot = json.loads(resp.json()["snapshot"])
        assert snapshot["jobTitle"] == "Backend Engineer"
        assert "rate" not in snapshot


def _hidden_value(page: str, name: str) -> str:
    match = re.search(rf'name="{name}" value="([^"]*)"', page)
    assert match, f"hidden field {name} not rendered"
    return html.unescape(match.group(1))
