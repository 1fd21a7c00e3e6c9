"""Tests for app-level routes and the error envelope."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.errors import EmailAlreadyExistsError, register_exception_handlers
from conftest import API


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "Gophiway", "version": "v1"}


def test_welcome(client: TestClient):
    response = client.get(f"{API}/")

    assert response.status_code == 200
    assert response.json()["version"] == "v1"


def test_unknown_route_uses_error_envelope(client: TestClient):
    response = client.get(f"{API}/nope")

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": {"code": "HTTP_404", "message": "Not Found"},
    }


def _app_with_failing_routes() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("connection string postgres://secret@db leaked?")

    @app.get("/conflict")
    def conflict():
        raise EmailAlreadyExistsError()

    return app


def test_unhandled_errors_do_not_leak_details():
    client = TestClient(_app_with_failing_routes(), raise_server_exceptions=False)

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"},
    }
    assert "secret" not in response.text


def test_app_errors_map_to_status_and_code():
    client = TestClient(_app_with_failing_routes())

    response = client.get("/conflict")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_EXISTS"
