import json

import pytest
from fastapi.testclient import TestClient

from logos.config import Settings
from logos.main import create_app
from logos.services.analyzer import Analyzer
from logos.services.providers import build_adapters

from conftest import SAMPLE_RESULT, SAMPLE_TEXT, FakeHTTP, FakeOpenAI, FakeResponse, chat_body


@pytest.fixture
def http():
    return FakeHTTP(FakeResponse(chat_body(json.dumps(SAMPLE_RESULT))))


@pytest.fixture
def openai_client():
    return FakeOpenAI(content=json.dumps(SAMPLE_RESULT))


@pytest.fixture
def client(settings, http, openai_client):
    adapters = build_adapters(settings, http=http, openai_client_factory=openai_client)
    app = create_app(settings=settings, analyzer=Analyzer(settings, adapters=adapters))
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_returns_canonical_result(client, openai_client):
    response = client.post("/api/analyze", json={"text": SAMPLE_TEXT, "model": "openai"})

    assert response.status_code == 200
    assert response.json() == SAMPLE_RESULT
    assert len(openai_client.calls) == 1
    assert response.headers["X-History-Key"] == "openai"


def test_analyze_openrouter_with_variant(client, http):
    response = client.post(
        "/api/analyze",
        json={"text": SAMPLE_TEXT, "model": "openrouter", "openRouterModel": "mistralai/mistral-large"},
    )

    assert response.status_code == 200
    assert http.calls[0][1]["json"]["model"] == "mistralai/mistral-large"
    assert response.headers["X-History-Key"] == "openrouter-mistralai/mistral-large"


def test_openrouter_without_variant_rejected_before_dispatch(client, http):
    response = client.post("/api/analyze", json={"text": SAMPLE_TEXT, "model": "openrouter"})

    assert response.status_code == 422
    assert http.calls == []


def test_unknown_model_rejected(client, http, openai_client):
    response = client.post("/api/analyze", json={"text": SAMPLE_TEXT, "model": "deepseek"})

    assert response.status_code == 422
    assert http.calls == [] and openai_client.calls == []


def test_provider_failure_maps_to_error_detail(client, http):
    http.response = FakeResponse(
        {"error": {"message": "Invalid API key"}}, status_code=401, reason="Unauthorized"
    )

    response = client.post("/api/analyze", json={"text": SAMPLE_TEXT, "model": "gemini"})

    assert response.status_code == 502
    assert response.json() == {"detail": "Gemini API error: Invalid API key"}


def test_missing_credential_is_server_error(http):
    settings = Settings(openai_api_key="sk")
    analyzer = Analyzer(settings, adapters=build_adapters(settings, http=http))
    client = TestClient(create_app(settings=settings, analyzer=analyzer))

    response = client.post("/api/analyze", json={"text": SAMPLE_TEXT, "model": "gemini"})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("GEMINI_API_KEY is missing")
    assert http.calls == []


def test_unexpected_error_is_generic_500(client, monkeypatch):
    def boom(request):
        raise KeyError("unexpected")

    monkeypatch.setattr(client.app.state.analyzer, "analyze", boom)

    response = client.post("/api/analyze", json={"text": SAMPLE_TEXT, "model": "openai"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to analyze argument"}


def test_models_lists_providers(client):
    response = client.get("/api/models")

    assert response.status_code == 200
    names = [p["name"] for p in response.json()]
    assert names == ["openai", "gemini", "openrouter"]
    assert all(p["configured"] for p in response.json())
