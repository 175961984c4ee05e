"""OpenAPI metadata and customization utilities.

Enriches the generated schema with:
- The ``ApiKeyAuth`` security scheme (CollectAPI key in the ``authorization`` header)
- Security requirements on the operations that call the upstream API only
- Tags metadata
- The 429 response every operation can return from the rate limiter
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI

from movie_api.core.rate_limit import TOO_MANY_REQUESTS_BODY

# Paths whose handlers forward a CollectAPI key upstream
UPSTREAM_PATHS = frozenset(
    {
        "/imdbSearchByName",
        "/imdbSearchById",
        "/addFavoritesMoviesById",
    }
)

TAGS_METADATA = [
    {
        "name": "Movies",
        "description": "IMDB search pass-through to CollectAPI.",
    },
    {
        "name": "Favorites",
        "description": "Favorite movies list.",
    },
    {
        "name": "Health",
        "description": "Liveness checks.",
    },
]

_RATE_LIMITED_RESPONSE = {
    "description": "Too many requests from this client within the rate limit window",
    "content": {
        "application/json": {
            "schema": {"type": "string", "example": TOO_MANY_REQUESTS_BODY},
        }
    },
}


def apply_openapi_customizations(app: FastAPI) -> None:
    """Patch FastAPI's OpenAPI generation to add security and tag metadata."""

    original_openapi = app.openapi

    def custom_openapi() -> Dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        schema = original_openapi()

        components = schema.setdefault("components", {})
        security_schemes = components.setdefault("securitySchemes", {})
        security_schemes.setdefault(
            "ApiKeyAuth",
            {
                "type": "apiKey",
                "in": "header",
                "name": "authorization",
                "description": "Enter your CollectAPI key",
            },
        )

        tags = schema.setdefault("tags", [])
        existing_tag_names = {t.get("name") for t in tags}
        for tag in TAGS_METADATA:
            if tag["name"] not in existing_tag_names:
                tags.append(tag)

        for path, methods in schema.get("paths", {}).items():
            for method_obj in methods.values():
                if not isinstance(method_obj, dict):
                    continue
                if path in UPSTREAM_PATHS:
                    method_obj["security"] = [{"ApiKeyAuth": []}]
                method_obj.setdefault("responses", {}).setdefault("429", _RATE_LIMITED_RESPONSE)

        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi  # type: ignore[assignment]
