"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Production may inject everything via real env vars
_env_file = str(_env_path) if _env_path.is_file() else None


# Nested BaseSettings don't inherit env_file, so populate os.environ up front
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


RateLimitKeyPolicy = Literal["client", "client_path"]


class CollectApiSettings(BaseSettings):
    """Upstream CollectAPI (IMDB) configuration."""

    api_key: str | None = Field(
        None,
        description="Fallback CollectAPI key used when the request has no Authorization header",
    )
    base_url: str = Field(
        "https://api.collectapi.com/imdb",
        description="Base URL of the CollectAPI IMDB endpoints",
    )
    timeout_seconds: float = Field(
        10.0,
        description="Upstream request timeout in seconds",
        gt=0,
    )

    model_config = SettingsConfigDict(
        env_prefix="COLLECTAPI_",
        case_sensitive=False,
    )


class FavoritesSettings(BaseSettings):
    """Favorites document store configuration."""

    backend: str = Field(
        "memory",
        description="Storage backend for favorites (memory, json_file)",
    )
    file_path: str = Field(
        "data/favorites.json",
        description="JSON document file used by the json_file backend",
    )

    model_config = SettingsConfigDict(
        env_prefix="FAVORITES_",
        case_sensitive=False,
    )


class LogSettings(BaseSettings):
    """Logging output configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="Log format: json or plain")
    output: str = Field("stdout", description="Log destination: stdout or file")
    file_path: str | None = Field(None, description="Log file path when output=file")
    max_bytes: int = Field(
        10 * 1024 * 1024,
        description="Rotate the log file after this many bytes (0 disables rotation)",
        ge=0,
    )
    backup_count: int = Field(5, description="Number of rotated log files to keep", ge=0)
    request_id_header: str = Field(
        "X-Request-ID",
        description="Header carrying the request correlation id",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class AppSettings(BaseSettings):
    """Application-wide configuration."""

    debug: bool = Field(
        False,
        description="Enable debug mode with verbose logging",
    )

    rate_limit_enabled: bool = Field(
        True,
        description="Enable the sliding-window rate limiter in front of all routes",
    )
    rate_limit_requests: int = Field(
        100,
        description="Maximum number of admitted requests per trailing window (per client key)",
        ge=1,
    )
    rate_limit_window_seconds: float = Field(
        60,
        description="Length of the trailing rate limit window in seconds",
        gt=0,
    )
    rate_limit_key_policy: RateLimitKeyPolicy = Field(
        "client",
        description=(
            "How requests are bucketed: 'client' shares one quota per origin address, "
            "'client_path' gives each (origin address, path) pair its own quota"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
    )


def _build_app_settings() -> AppSettings:
    return AppSettings()


def _build_collectapi_settings() -> CollectApiSettings:
    return CollectApiSettings()


def _build_favorites_settings() -> FavoritesSettings:
    return FavoritesSettings()


def _build_log_settings() -> LogSettings:
    return LogSettings()


class Settings(BaseSettings):
    """Main application settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.
    Raises validation errors on startup if settings are invalid.
    """

    app_env: str = APP_ENV
    app: AppSettings = Field(default_factory=_build_app_settings)
    collectapi: CollectApiSettings = Field(default_factory=_build_collectapi_settings)
    favorites: FavoritesSettings = Field(default_factory=_build_favorites_settings)
    log: LogSettings = Field(default_factory=_build_log_settings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


# Global settings instance - nested groups are built via default_factory
# so each one reads its own env prefix.
settings = Settings()
