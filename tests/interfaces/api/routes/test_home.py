"""Tests for the home endpoint and its CORS policy."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from greeting_app.config import Settings  # noqa: E402
from main import create_app  # noqa: E402

EXPECTED_BODY = b'{"message":"Hello World!","people":["Harry","Jack","Mary"]}'


def _client(client_url: str | None = None, **kwargs) -> TestClient:
    return TestClient(create_app(Settings(client_url=client_url)), **kwargs)


def test_request_without_origin_returns_document():
    client = _client("https://a.example")

    response = client.get("/api/home")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.content == EXPECTED_BODY
    assert response.json() == {"message": "Hello World!", "people": ["Harry", "Jack", "Mary"]}
    assert "access-control-allow-origin" not in response.headers


@pytest.mark.parametrize("client_url", [None, "*"])
def test_unrestricted_policy_adds_wildcard_without_origin(client_url):
    client = _client(client_url)

    response = client.get("/api/home")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.content == EXPECTED_BODY


def test_repeated_requests_return_identical_bodies():
    client = _client()

    bodies = {client.get("/api/home").content for _ in range(3)}

    assert bodies == {EXPECTED_BODY}


def test_unrestricted_policy_answers_any_origin_with_wildcard():
    client = _client("*")

    response = client.get("/api/home", headers={"Origin": "https://b.example"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.content == EXPECTED_BODY


def test_listed_origin_is_reflected():
    client = _client("https://a.example,http://localhost:3000")

    response = client.get("/api/home", headers={"Origin": "http://localhost:3000"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.content == EXPECTED_BODY


def test_unlisted_origin_is_rejected(caplog: pytest.LogCaptureFixture):
    client = _client("https://a.example")

    with caplog.at_level(logging.WARNING, logger="greeting_app.interfaces.api.errors"):
        response = client.get("/api/home", headers={"Origin": "https://b.example"})

    assert response.status_code == 403
    assert "access-control-allow-origin" not in response.headers
    assert response.json() == {"detail": "Origen no permitido"}
    assert b"Hello World!" not in response.content
    assert any("https://b.example" in record.getMessage() for record in caplog.records)


def test_origin_matching_is_case_sensitive():
    client = _client("https://a.example")

    response = client.get("/api/home", headers={"Origin": "https://A.example"})

    assert response.status_code == 403


def test_preflight_for_listed_origin_is_accepted():
    client = _client("https://a.example")

    response = client.options(
        "/api/home",
        headers={
            "Origin": "https://a.example",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://a.example"


def test_preflight_for_unlisted_origin_is_refused():
    client = _client("https://a.example")

    response = client.options(
        "/api/home",
        headers={
            "Origin": "https://b.example",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_only_get_is_exposed():
    client = _client()

    assert client.post("/api/home", json={}).status_code == 405
    assert client.get("/api/other").status_code == 404


def test_unexpected_errors_become_internal_server_error(caplog: pytest.LogCaptureFixture):
    app = create_app(Settings())

    @app.get("/api/broken")
    async def broken() -> None:
        raise RuntimeError("boom")

    client = TestClient(app, raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR, logger="greeting_app.interfaces.api.errors"):
        response = client.get("/api/broken")

    assert response.status_code == 500
    assert response.json() == {"detail": "Error interno del servidor"}
    assert any(record.exc_info for record in caplog.records)

    # The process keeps serving after the failure.
    assert client.get("/api/home").status_code == 200


def test_startup_is_logged(caplog: pytest.LogCaptureFixture):
    app = create_app(Settings(port=9123))

    with caplog.at_level(logging.INFO, logger="main"):
        with TestClient(app) as client:
            assert client.get("/api/home").status_code == 200

    assert "Server started on port 9123" in caplog.text
