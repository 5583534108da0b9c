from __future__ import annotations

import pytest

from content_service.app.core.env import Env, get_env, parse_env


@pytest.fixture(autouse=True)
def _reset_env_cache():
    get_env.cache_clear()
    yield
    get_env.cache_clear()


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, None),
        ("", None),
        ("prod", Env.PROD),
        ("Production", Env.PROD),
        (" dev ", Env.DEV),
        ("staging", Env.TEST),
        ("unknown", None),
    ],
)
def test_parse_env(raw, expected):
    assert parse_env(raw) == expected


def test_get_env_defaults_to_local(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_env() is Env.LOCAL


def test_get_env_reads_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")

    assert get_env() is Env.PROD


def test_get_env_warns_on_unknown(monkeypatch):
    monkeypatch.setenv("APP_ENV", "moon")

    with pytest.warns(RuntimeWarning):
        assert get_env() is Env.LOCAL
