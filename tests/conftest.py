"""
Root conftest.py for content-service tests.

Provides an app wired to an in-memory storage handler and a stub token
validator, so no Mongo or login service is needed.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from content_service.api.fastapi import create_app
from content_service.app.settings import AppSettings
from content_service.db.testing import InMemoryStorageHandler
from content_service.exceptions import UnauthorizedError

VALID_TOKEN = "good-token"
AUTH_HEADERS = {"Authorization": f"Bearer {VALID_TOKEN}"}


class StubTokenValidator:
    """Accepts a fixed set of tokens and records every token it was asked about."""

    def __init__(self, valid_tokens=(VALID_TOKEN,), error: Exception | None = None):
        self.valid_tokens = set(valid_tokens)
        self.error = error
        self.seen: list[str] = []

    async def validate(self, token: str) -> None:
        self.seen.append(token)
        if self.error is not None:
            raise self.error
        if token not in self.valid_tokens:
            raise UnauthorizedError("token rejected by authentication service (status 401)")


def pytest_configure(config):
    for name, desc in [
        ("storage", "Storage handler tests"),
        ("security", "Auth and request hardening tests"),
    ]:
        config.addinivalue_line("markers", f"{name}: {desc}")


@pytest.fixture
def storage() -> InMemoryStorageHandler:
    return InMemoryStorageHandler()


@pytest.fixture
def validator() -> StubTokenValidator:
    return StubTokenValidator()


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def app(app_settings, storage, validator):
    return create_app(app_settings=app_settings, storage=storage, token_validator=validator)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def upload(client):
    """Upload a file through the API and return its id."""

    def _upload(name: str = "notes.txt", content: bytes = b"hello world") -> str:
        resp = client.post("/upload", files={"file": (name, content)}, headers=AUTH_HEADERS)
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]

    return _upload


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return dict(AUTH_HEADERS)
