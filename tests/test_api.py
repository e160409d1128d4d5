import pytest
from fastapi.testclient import TestClient

from yamldoc.api.main import app
from yamldoc.descriptions.registry import DEFINITIONS_DIR, DescriptionRegistry

VALUE_YAML = "foo:\n    bar: 42\n"
DESCRIPTION_YAML = "foo:\n    __description__: Description for foo\n    bar: Description for bar\n"
EXPECTED = "# Description for foo\nfoo (Mapping): \n    # Description for bar\n    bar (Number): 42\n"


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(
        "yamldoc.descriptions.registry._registry",
        DescriptionRegistry(DEFINITIONS_DIR),
    )
    with TestClient(app) as c:
        yield c


def test_document_with_inline_description(client):
    response = client.post(
        "/v1/document",
        json={"value_yaml": VALUE_YAML, "description_yaml": DESCRIPTION_YAML},
    )
    assert response.status_code == 200
    assert response.json()["text"] == EXPECTED


def test_document_with_stored_description(client):
    response = client.post(
        "/v1/document",
        json={"value_yaml": VALUE_YAML, "description_key": "example"},
    )
    assert response.status_code == 200
    assert response.json() == {"text": EXPECTED, "description_key": "example"}


def test_document_without_description(client):
    response = client.post("/v1/document", json={"value_yaml": VALUE_YAML})
    assert response.status_code == 200
    assert response.json()["text"] == "foo (Mapping): \n    bar (Number): 42\n"


def test_document_as_text(client):
    response = client.post(
        "/v1/document/text",
        json={"value_yaml": VALUE_YAML, "description_key": "example"},
    )
    assert response.status_code == 200
    assert response.text == EXPECTED
    assert response.headers["content-type"].startswith("text/plain")


def test_both_description_sources_rejected(client):
    response = client.post(
        "/v1/document",
        json={
            "value_yaml": VALUE_YAML,
            "description_yaml": DESCRIPTION_YAML,
            "description_key": "example",
        },
    )
    assert response.status_code == 422


def test_unknown_description_key(client):
    response = client.post(
        "/v1/document",
        json={"value_yaml": VALUE_YAML, "description_key": "nope"},
    )
    assert response.status_code == 404


def test_invalid_yaml(client):
    response = client.post("/v1/document", json={"value_yaml": "a: [1, 2"})
    assert response.status_code == 422
    assert "value_yaml" in response.json()["detail"]


def test_list_and_get_descriptions(client):
    response = client.get("/v1/descriptions")
    assert response.status_code == 200
    keys = {item["key"] for item in response.json()}
    assert {"example", "service"} <= keys

    response = client.get("/v1/descriptions/example")
    assert response.status_code == 200
    assert response.json()["foo"]["bar"] == "Description for bar"

    response = client.get("/v1/descriptions/nope")
    assert response.status_code == 404


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["descriptions_loaded"] >= 2
