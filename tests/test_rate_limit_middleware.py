"""HTTP-level tests for the rate limiting middleware."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from movie_api.core import rate_limit
from movie_api.core.app_factory import create_app
from movie_api.core.config import settings
from movie_api.core.rate_limit import (
    TOO_MANY_REQUESTS_BODY,
    UNKNOWN_CLIENT,
    build_client_key,
    get_rate_limiter,
    rate_limit_middleware,
)


def _request(path: str = "/health", client: tuple[str, int] | None = ("10.0.0.1", 1234)) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": [],
        "scheme": "http",
        "server": ("testserver", 80),
        "client": client,
    }
    return Request(scope)


@pytest.fixture
def limit_of_three(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings.app, "rate_limit_enabled", True)
    monkeypatch.setattr(settings.app, "rate_limit_requests", 3)
    monkeypatch.setattr(settings.app, "rate_limit_window_seconds", 60)


@pytest.fixture
def probe_app() -> FastAPI:
    """Minimal app with two endpoints behind the limiter."""
    app = FastAPI()
    app.middleware("http")(rate_limit_middleware)

    @app.get("/a")
    def a() -> dict:
        return {"route": "a"}

    @app.get("/b")
    def b() -> dict:
        return {"route": "b"}

    return app


class TestBuildClientKey:
    def test_client_policy_uses_origin_address_only(self) -> None:
        assert build_client_key(_request("/a"), "client") == "ip:10.0.0.1"
        assert build_client_key(_request("/b"), "client") == "ip:10.0.0.1"

    def test_client_path_policy_includes_path(self) -> None:
        assert build_client_key(_request("/a"), "client_path") == "ip:10.0.0.1:/a"
        assert build_client_key(_request("/b"), "client_path") == "ip:10.0.0.1:/b"

    def test_missing_origin_falls_back_to_shared_sentinel(self) -> None:
        assert build_client_key(_request(client=None), "client") == f"ip:{UNKNOWN_CLIENT}"
        assert (
            build_client_key(_request("/a", client=None), "client_path")
            == f"ip:{UNKNOWN_CLIENT}:/a"
        )


class TestGetRateLimiter:
    def test_instance_is_reused_across_calls(self) -> None:
        assert get_rate_limiter() is get_rate_limiter()

    def test_rebuilt_when_configuration_changes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_rate_limiter()
        monkeypatch.setattr(settings.app, "rate_limit_requests", 7)

        second = get_rate_limiter()

        assert second is not first
        assert second.max_requests == 7


@pytest.mark.usefixtures("limit_of_three")
class TestRateLimitedApp:
    def test_fourth_request_gets_429_with_bare_string_body(self) -> None:
        client = TestClient(create_app())

        for _ in range(3):
            assert client.get("/health").status_code == 200

        response = client.get("/health")

        assert response.status_code == 429
        assert response.json() == TOO_MANY_REQUESTS_BODY
        assert response.json() == "Too many requests"
        assert "Retry-After" not in response.headers

    def test_rejected_response_still_carries_request_id(self) -> None:
        client = TestClient(create_app())
        for _ in range(3):
            client.get("/health")

        response = client.get("/health", headers={"X-Request-ID": "req-429"})

        assert response.status_code == 429
        assert response.headers["X-Request-ID"] == "req-429"

    def test_rejected_request_never_reaches_handler(self) -> None:
        calls: list[str] = []
        app = FastAPI()
        app.middleware("http")(rate_limit_middleware)

        @app.get("/count")
        def count() -> dict:
            calls.append("hit")
            return {"calls": len(calls)}

        client = TestClient(app)
        statuses = [client.get("/count").status_code for _ in range(5)]

        assert statuses == [200, 200, 200, 429, 429]
        assert len(calls) == 3

    def test_client_policy_shares_quota_across_paths(
        self, monkeypatch: pytest.MonkeyPatch, probe_app: FastAPI
    ) -> None:
        monkeypatch.setattr(settings.app, "rate_limit_key_policy", "client")
        client = TestClient(probe_app)

        assert client.get("/a").status_code == 200
        assert client.get("/a").status_code == 200
        assert client.get("/b").status_code == 200
        assert client.get("/b").status_code == 429
        assert client.get("/a").status_code == 429

    def test_client_path_policy_gives_each_path_its_own_quota(
        self, monkeypatch: pytest.MonkeyPatch, probe_app: FastAPI
    ) -> None:
        monkeypatch.setattr(settings.app, "rate_limit_key_policy", "client_path")
        client = TestClient(probe_app)

        for _ in range(3):
            assert client.get("/a").status_code == 200
        assert client.get("/a").status_code == 429

        for _ in range(3):
            assert client.get("/b").status_code == 200
        assert client.get("/b").status_code == 429

    def test_disabled_limiter_never_rejects(
        self, monkeypatch: pytest.MonkeyPatch, probe_app: FastAPI
    ) -> None:
        monkeypatch.setattr(settings.app, "rate_limit_enabled", False)
        client = TestClient(probe_app)

        assert all(client.get("/a").status_code == 200 for _ in range(10))
        assert rate_limit._limiter is None
