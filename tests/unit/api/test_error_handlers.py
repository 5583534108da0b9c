from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from content_service.api.fastapi.middleware.errors.catchall import CatchAllExceptionMiddleware
from content_service.api.fastapi.middleware.errors.handlers import register_error_handlers
from content_service.exceptions import (
    AuthServiceError,
    InvalidRequestError,
    MissingCredentialsError,
    RecordNotFoundError,
    StorageError,
    UnauthorizedError,
)


@pytest.fixture
def error_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(CatchAllExceptionMiddleware)
    register_error_handlers(app)

    @app.get("/raise/{kind}")
    async def boom(kind: str):
        errors = {
            "invalid": InvalidRequestError("bad input"),
            "credentials": MissingCredentialsError("no authorization header found"),
            "unauthorized": UnauthorizedError("nope"),
            "auth-service": AuthServiceError("login service down"),
            "storage": StorageError("write failed"),
            "missing": RecordNotFoundError("no file found with id x"),
            "http": HTTPException(status_code=418, detail="teapot"),
        }
        if kind in errors:
            raise errors[kind]
        raise RuntimeError("unexpected")

    @app.get("/typed")
    async def typed(n: int):
        return {"n": n}

    return app


@pytest.mark.parametrize(
    "kind,status,message",
    [
        ("invalid", 400, "bad input"),
        ("credentials", 400, "no authorization header found"),
        ("unauthorized", 401, "nope"),
        ("auth-service", 500, "login service down"),
        ("storage", 500, "write failed"),
        ("missing", 500, "no file found with id x"),
        ("http", 418, "teapot"),
    ],
)
def test_errors_render_as_error_body(error_app, kind, status, message):
    resp = TestClient(error_app).get(f"/raise/{kind}")

    assert resp.status_code == status
    assert resp.json() == {"error": message}


def test_unhandled_exception_caught_as_500(error_app, caplog):
    client = TestClient(error_app, raise_server_exceptions=False)

    with caplog.at_level("ERROR"):
        resp = client.get("/raise/other")

    assert resp.status_code == 500
    assert resp.json() == {"error": "unexpected"}
    assert "RuntimeError on /raise/other" in caplog.text


def test_request_validation_error_is_bad_request(error_app):
    resp = TestClient(error_app).get("/typed", params={"n": "abc"})

    assert resp.status_code == 400
    assert resp.json()["error"].startswith("n:")


def test_unknown_route_keeps_status(error_app):
    resp = TestClient(error_app).get("/nowhere")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_exception_default_message_from_docstring():
    assert StorageError().message == "Storage collaborator failure."
