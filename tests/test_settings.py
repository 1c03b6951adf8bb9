from __future__ import annotations

import pytest

from vtc_registry.labels import BASE_URL
from vtc_registry.settings import DEFAULT_TIMEOUT, get_settings, reset_settings_cache


def _reset_settings(monkeypatch, **env):
    for k, v in env.items():
        if v is None:
            monkeypatch.delenv(k, raising=False)
        else:
            monkeypatch.setenv(k, str(v))
    reset_settings_cache()


@pytest.fixture(autouse=True)
def _clean_cache():
    yield
    reset_settings_cache()


def test_defaults(monkeypatch):
    _reset_settings(monkeypatch, VTC_BASE_URL=None, VTC_HTTP_TIMEOUT=None, VTC_USER_AGENT=None)
    settings = get_settings()
    assert settings.base_url == BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.user_agent.startswith("vtc-registry/")


def test_env_overrides(monkeypatch):
    _reset_settings(
        monkeypatch,
        VTC_BASE_URL="http://localhost:8000/public/",
        VTC_HTTP_TIMEOUT="2.5",
        VTC_USER_AGENT="ci-bot",
    )
    settings = get_settings()
    assert settings.base_url == "http://localhost:8000/public"
    assert settings.timeout == 2.5
    assert settings.user_agent == "ci-bot"


@pytest.mark.parametrize("raw, expected", [("0", None), ("", None), ("abc", DEFAULT_TIMEOUT), ("-1", None)])
def test_timeout_parsing(monkeypatch, raw, expected):
    _reset_settings(monkeypatch, VTC_HTTP_TIMEOUT=raw)
    assert get_settings().timeout == expected


def test_settings_are_cached(monkeypatch):
    _reset_settings(monkeypatch, VTC_USER_AGENT="first")
    assert get_settings().user_agent == "first"
    monkeypatch.setenv("VTC_USER_AGENT", "second")
    assert get_settings().user_agent == "first"
    reset_settings_cache()
    assert get_settings().user_agent == "second"
