"""Pytest configuration and fixtures shared across all test modules.

Environment defaults are set before anything imports ``movie_api`` so the
settings object is built from them.
"""

import os

# Must run before settings are imported anywhere
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("APP_RATE_LIMIT_ENABLED", "true")
os.environ.setdefault("APP_RATE_LIMIT_REQUESTS", "100")
os.environ.setdefault("APP_RATE_LIMIT_WINDOW_SECONDS", "60")
os.environ.setdefault("FAVORITES_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.pop("COLLECTAPI_API_KEY", None)

import pytest  # noqa: E402

from movie_api.core.rate_limit import reset_rate_limiter  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_rate_limiter():
    """Every test starts with an empty limiter registry."""
    reset_rate_limiter()
    yield
    reset_rate_limiter()
