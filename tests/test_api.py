import json

import pytest
from fastapi.testclient import TestClient

from conftest import FakeGenerator, FakeRenderer
from cv_genie.api import app, get_generator_factory, get_renderer


@pytest.fixture
def fakes():
    state = {"generator": FakeGenerator(), "renderer": FakeRenderer()}
    app.dependency_overrides[get_generator_factory] = lambda: (lambda api_key, model: state["generator"])
    app.dependency_overrides[get_renderer] = lambda: state["renderer"]
    yield state
    app.dependency_overrides.clear()


@pytest.fixture
def client(fakes):
    return TestClient(app)


def test_generate_returns_pdf_download(client, fakes, request_payload, extracted_json, curated_json):
    fakes["generator"].responses = [extracted_json, curated_json]
    response = client.post("/api/generate", json=request_payload)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == 'attachment; filename="CV_Genie.pdf"'
    assert response.content == b"%PDF-1.7 fake"
    assert fakes["generator"].calls == 2


@pytest.mark.parametrize("field", ["apiKey", "model", "targetJobTitle", "profilePhoto"])
def test_missing_required_field_is_rejected_without_model_calls(client, fakes, request_payload, field):
    request_payload.pop(field)
    response = client.post("/api/generate", json=request_payload)
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Missing required payload fields."
    assert any(field in detail for detail in body["details"])
    assert fakes["generator"].calls == 0
    assert fakes["renderer"].htmls == []


def test_blank_required_field_is_rejected(client, fakes, request_payload):
    request_payload["targetJobTitle"] = "   "
    response = client.post("/api/generate", json=request_payload)
    assert response.status_code == 400
    assert fakes["generator"].calls == 0


def test_non_json_content_type_is_rejected(client, fakes, request_payload):
    response = client.post(
        "/api/generate",
        content=json.dumps(request_payload),
        headers={"Content-Type": "text/plain"},
    )
    assert response.status_code == 415
    assert response.json() == {"error": "Expected application/json"}
    assert fakes["generator"].calls == 0


def test_invalid_json_body_is_rejected(client, fakes):
    response = client.post(
        "/api/generate",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Request body is not valid JSON."


def test_legacy_profile_text_key_is_accepted(client, fakes, request_payload, extracted_json, curated_json):
    request_payload["linkedinData"] = request_payload.pop("profileText")
    fakes["generator"].responses = [extracted_json, curated_json]
    response = client.post("/api/generate", json=request_payload)
    assert response.status_code == 200
    assert "Backend developer at Acme" in fakes["generator"].prompts[0]


def test_schema_violation_becomes_server_error(client, fakes, request_payload):
    fakes["generator"].responses = ["Sorry, I can't help with that."]
    response = client.post("/api/generate", json=request_payload)
    assert response.status_code == 500
    error = response.json()["error"]
    assert error.startswith("Backend Error: ")
    assert "Extraction output is not a valid CV record" in error
    assert fakes["generator"].calls == 1
    assert fakes["renderer"].htmls == []


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_unknown_route_is_not_found(client):
    assert client.get("/api/unknown").status_code == 404
