"""Test configuration and fixtures."""
from types import SimpleNamespace

import httpx
import pytest
import requests
from fastapi.testclient import TestClient
from openai import APIConnectionError

from main import app
from scriptgen.api.routes import get_http_session, get_openai_client
from scriptgen.config import Settings, get_settings

JINA_HOST = "r.jina.ai"
CRUSTDATA_HOST = "api.crustdata.com"


def crustdata_profile(**overrides):
    profile = {
        "linkedin_profile_url": "https://www.linkedin.com/in/jane-doe",
        "linkedin_flagship_url": "https://www.linkedin.com/in/jane-doe",
        "name": "Jane Doe",
        "email": "jane@acme.io",
        "title": "VP Finance",
        "headline": "VP Finance at Acme",
        "summary": "Finance leader scaling B2B companies.",
        "num_of_connections": 812,
        "skills": "Budgeting, Forecasting, FP&A, Leadership, Negotiation, SaaS Metrics",
        "languages": ["English", "Spanish"],
        "all_employers": ["Acme", "Globex"],
        "past_employers": [
            {
                "employer_name": "Globex",
                "employee_title": "Finance Manager",
                "start_date": "2016-02-01T00:00:00.000Z",
                "end_date": "2020-03-01T00:00:00.000Z",
            }
        ],
        "current_employers": [
            {
                "employer_name": "Acme",
                "employer_linkedin_id": "acme",
                "employer_company_id": 42,
                "employee_title": "VP Finance",
                "employee_location": "Austin, TX",
                "start_date": "2020-04-01T00:00:00.000Z",
            }
        ],
        "all_titles": ["Financial Analyst", "Finance Manager", "VP Finance"],
        "all_schools": ["UT Austin", "Wharton", "Community College"],
        "all_degrees": ["BBA", "MBA"],
    }
    profile.update(overrides)
    return profile


class FakeResponse:
    def __init__(self, status_code=200, text="", json_data=None, reason="OK"):
        self.status_code = status_code
        self.text = text
        self.reason = reason
        self._json = json_data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} {self.reason}", response=self)

    def json(self):
        if self._json is None:
            raise requests.JSONDecodeError("Expecting value", self.text, 0)
        return self._json


class FakeSession:
    """Stands in for requests.Session; answers by host, raising when given an exception."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append(SimpleNamespace(url=url, **kwargs))
        for host, outcome in self.routes.items():
            if host in url:
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise requests.ConnectionError(f"no route for {url}")

    def hosts_called(self):
        return [c.url for c in self.calls]


class FakeCompletions:
    def __init__(self, content="Hi Jane, let's work together.", error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(
            choices=[SimpleNamespace(message=message)],
            usage=SimpleNamespace(prompt_tokens=120, completion_tokens=80),
        )


class FakeOpenAI:
    def __init__(self, **kwargs):
        self.completions = FakeCompletions(**kwargs)
        self.chat = SimpleNamespace(completions=self.completions)


def openai_connection_error():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return APIConnectionError(request=request)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        jina_api_key="jina-test",
        crustdata_api_key="crust-test",
        openai_api_key="sk-test",
    )


@pytest.fixture
def http_session():
    return FakeSession(
        {
            JINA_HOST: FakeResponse(text="Acme builds invoicing software for mid-market teams."),
            CRUSTDATA_HOST: FakeResponse(json_data=[crustdata_profile()]),
        }
    )


@pytest.fixture
def openai_client():
    return FakeOpenAI()


@pytest.fixture
def client(settings, http_session, openai_client):
    """Test client with settings, outbound HTTP and the OpenAI client overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_session] = lambda: http_session
    app.dependency_overrides[get_openai_client] = lambda: openai_client

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
