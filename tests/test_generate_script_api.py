from datetime import datetime

import pytest
import requests

from tests.conftest import FakeOpenAI, FakeResponse, openai_connection_error

ENDPOINT = "/api/generate-script"
BODY = {"companyUrl": "https://acme.io", "linkedinUrl": "https://www.linkedin.com/in/jane-doe"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_generates_script_from_live_data(client, http_session, openai_client):
    resp = client.post(ENDPOINT, json=BODY)
    assert resp.status_code == 200

    data = resp.json()
    assert data["success"] is True
    assert data["script"] == "Hi Jane, let's work together."
    assert data["companySource"] == "jina"
    assert data["profileSource"] == "crustdata"
    assert data["companyDataOrigin"] == "live"
    assert data["profileDataOrigin"] == "live"
    assert data["leadInsights"]["name"] == "Jane Doe"
    assert data["leadInsights"]["currentCompany"] == "Acme"
    assert data["personalizationPoints"][0] == "Career growth from Financial Analyst to VP Finance"
    datetime.fromisoformat(data["generatedAt"].replace("Z", "+00:00"))

    # scrape, then enrich, then exactly one completion
    assert ["r.jina.ai" in u for u in http_session.hosts_called()] == [True, False]
    assert len(openai_client.completions.calls) == 1


@pytest.mark.parametrize(
    "body",
    [
        {"companyUrl": "", "linkedinUrl": "https://linkedin.com/in/jane-doe"},
        {"companyUrl": "https://acme.io"},
        {},
    ],
)
def test_missing_fields_400_without_outbound_calls(client, http_session, openai_client, body):
    resp = client.post(ENDPOINT, json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Both companyUrl and linkedinUrl are required"}
    assert http_session.calls == []
    assert openai_client.completions.calls == []


def test_bad_profile_url_400_without_outbound_calls(client, http_session, openai_client):
    resp = client.post(ENDPOINT, json={"companyUrl": "https://acme.io", "linkedinUrl": "https://x.com/jane"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid LinkedIn profile URL format"}
    assert http_session.calls == []
    assert openai_client.completions.calls == []


def test_malformed_body_is_400(client):
    resp = client.post(ENDPOINT, content=b"not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request body"}


def test_unreachable_upstreams_fall_back(client, http_session):
    http_session.routes = {
        "r.jina.ai": requests.ConnectionError("down"),
        "api.crustdata.com": FakeResponse(status_code=503, reason="Service Unavailable"),
    }
    resp = client.post(
        ENDPOINT,
        json={"companyUrl": "https://domu.ai", "linkedinUrl": "https://linkedin.com/in/kaitakami"},
    )
    assert resp.status_code == 200

    data = resp.json()
    assert data["companySource"] == "jina"
    assert data["profileSource"] == "crustdata"
    assert data["companyDataOrigin"] == "fallback"
    assert data["profileDataOrigin"] == "fallback"
    assert data["leadInsights"]["name"] == "Kaitakami"
    assert data["leadInsights"]["currentCompany"] == "Current Company"
    assert data["script"]


def test_completion_failure_is_500(client, openai_client):
    openai_client.completions.error = openai_connection_error()
    resp = client.post(ENDPOINT, json=BODY)
    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Failed to generate script",
        "details": "Failed to generate script with AI",
    }


def test_completion_failure_after_fallbacks_is_500(client, http_session, openai_client):
    http_session.routes = {}
    openai_client.completions.error = openai_connection_error()
    resp = client.post(ENDPOINT, json=BODY)
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to generate script"


def test_missing_credential_is_generic_500(client, settings, http_session):
    settings.crustdata_api_key = ""
    resp = client.post(ENDPOINT, json=BODY)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate script", "details": "Service is not configured"}
    # the scrape still ran before enrichment hit the missing key
    assert len(http_session.calls) == 1
