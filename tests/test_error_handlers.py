"""Tests for the global error boundary."""

import logging

import pytest
from fastapi.testclient import TestClient

from taskboard_api.app.core.config import Settings
from taskboard_api.app.core.errors import (
    InvalidInputError,
    NotFoundError,
    TaskboardError,
    UnauthorizedError,
)
from taskboard_api.app.main import create_app

AUTH = {"Authorization": "Bearer t"}


def _app_with_failing_route(environment):
    app = create_app(Settings(api_token="t", environment=environment, seed_demo_data=False))

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


def test_unhandled_error_in_production_hides_details():
    app = _app_with_failing_route("production")
    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/boom", headers=AUTH)
    assert resp.status_code == 500
    assert resp.json() == {"error": {"message": "server error"}}


def test_unhandled_error_in_development_includes_details(caplog):
    app = _app_with_failing_route("development")
    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/boom", headers=AUTH)
    assert resp.status_code == 500
    body = resp.json()
    assert body["message"] == "kaboom"
    assert body["error"]["type"] == "RuntimeError"
    assert any("kaboom" in line for line in body["error"]["traceback"])
    assert any(r.levelno == logging.ERROR and "/boom" in r.getMessage() for r in caplog.records)


def test_server_keeps_serving_after_internal_error():
    app = _app_with_failing_route("production")
    client = TestClient(app, raise_server_exceptions=False)
    assert client.get("/boom", headers=AUTH).status_code == 500
    assert client.get("/").status_code == 200


def test_internal_error_response_carries_security_headers():
    app = _app_with_failing_route("production")
    client = TestClient(app)
    resp = client.get("/boom", headers=AUTH)
    assert resp.status_code == 500
    assert resp.headers["x-content-type-options"] == "nosniff"
    assert resp.headers["x-frame-options"] == "SAMEORIGIN"


def test_internal_error_is_access_logged(caplog):
    caplog.set_level(logging.INFO, logger="taskboard_api.access")
    app = _app_with_failing_route("production")
    client = TestClient(app)
    client.get("/boom", headers=AUTH)
    lines = [r.getMessage() for r in caplog.records if r.name == "taskboard_api.access"]
    assert len(lines) == 1
    assert lines[0].startswith("GET /boom 500 ")


@pytest.mark.parametrize(
    "exc,status",
    [
        (InvalidInputError("bad"), 400),
        (NotFoundError("missing"), 404),
        (NotFoundError("missing", http_status=400), 400),
        (UnauthorizedError(), 401),
    ],
)
def test_error_statuses(exc, status):
    assert exc.http_status == status
    assert isinstance(exc, TaskboardError)


def test_error_response_shape():
    assert UnauthorizedError().to_response() == {"error": "Unauthorized request"}
    assert InvalidInputError("title is required").to_response() == {"error": "title is required"}
