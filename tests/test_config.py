"""Tests for settings validation and defaults."""

import pytest
from pydantic import ValidationError

from movie_api.core.config import AppSettings, CollectApiSettings


def test_rate_limit_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("APP_RATE_LIMIT_REQUESTS", "APP_RATE_LIMIT_WINDOW_SECONDS", "APP_RATE_LIMIT_KEY_POLICY"):
        monkeypatch.delenv(var, raising=False)

    app_settings = AppSettings()

    assert app_settings.rate_limit_requests == 100
    assert app_settings.rate_limit_window_seconds == 60
    assert app_settings.rate_limit_key_policy == "client"


def test_env_overrides_are_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_RATE_LIMIT_REQUESTS", "5")
    monkeypatch.setenv("APP_RATE_LIMIT_KEY_POLICY", "client_path")

    app_settings = AppSettings()

    assert app_settings.rate_limit_requests == 5
    assert app_settings.rate_limit_key_policy == "client_path"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rate_limit_requests": 0},
        {"rate_limit_window_seconds": 0},
        {"rate_limit_window_seconds": -1},
        {"rate_limit_key_policy": "api_key"},
    ],
)
def test_invalid_rate_limit_settings_fail_fast(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        AppSettings(**kwargs)


def test_collectapi_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COLLECTAPI_BASE_URL", raising=False)

    assert CollectApiSettings().base_url == "https://api.collectapi.com/imdb"
