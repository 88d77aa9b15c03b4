import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.settings import settings
from app.agents.schemas import Provider
from app.agents.workflow import fallback_roadmap
from app.roadmaps import routes


@pytest.fixture
def calls(monkeypatch):
    seen = []

    async def fake_generate(goal, credential):
        seen.append((goal, credential))
        return fallback_roadmap(goal)

    monkeypatch.setattr(routes, "generate_career_roadmap", fake_generate)
    return seen


@pytest.fixture
def client():
    return TestClient(app)


def test_home_renders_form(client):
    r = client.get("/")

    assert r.status_code == 200
    assert 'id="roadmap-form"' in r.text
    assert "credentials.js" in r.text


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_form_submission_renders_roadmap(client, calls):
    r = client.post("/roadmaps", data={"goal": "  Chef ", "api_key": "k", "provider": "openai"})

    assert r.status_code == 200
    assert "Foundation (Months 1-6)" in r.text
    assert "Professional (Month 18+)" in r.text
    goal, credential = calls[0]
    assert goal == "Chef"
    assert credential.secret == "k"
    assert credential.provider == Provider.OPENAI


@pytest.mark.parametrize("data", [
    {"goal": "   ", "api_key": "k"},
    {"goal": "Chef", "api_key": ""},
])
def test_form_rejects_blank_fields(client, calls, data):
    r = client.post("/roadmaps", data=data)

    assert r.status_code == 400
    assert "alert-error" in r.text
    assert calls == []


def test_json_endpoint(client, calls):
    r = client.post("/api/roadmaps", json={"goal": "Chef", "api_key": "k"})

    assert r.status_code == 200
    body = r.json()
    assert body["goal"] == "Chef"
    assert len(body["stages"]) == 4
    assert set(body["tips"]) == {"certifications", "communities", "trends"}
    assert calls[0][1].provider == Provider.GEMINI


@pytest.mark.parametrize("payload", [
    {"goal": "", "api_key": "k"},
    {"goal": "Chef", "api_key": "  "},
    {"goal": "Chef", "api_key": "k", "provider": "claude"},
])
def test_json_endpoint_validation(client, calls, payload):
    r = client.post("/api/roadmaps", json=payload)

    assert r.status_code == 422
    assert calls == []


def test_json_endpoint_uses_configured_default_provider(client, calls, monkeypatch):
    monkeypatch.setattr(settings, "default_provider", Provider.OPENAI)

    r = client.post("/api/roadmaps", json={"goal": "Chef", "api_key": "k"})

    assert r.status_code == 200
    assert calls[0][1].provider == Provider.OPENAI


def test_form_uses_configured_default_provider(client, calls, monkeypatch):
    monkeypatch.setattr(settings, "default_provider", Provider.OPENAI)

    r = client.post("/roadmaps", data={"goal": "Chef", "api_key": "k"})

    assert r.status_code == 200
    assert calls[0][1].provider == Provider.OPENAI


def test_home_preselects_configured_default_provider(client, monkeypatch):
    monkeypatch.setattr(settings, "default_provider", Provider.OPENAI)

    r = client.get("/")

    assert '<option value="openai" selected>' in r.text
