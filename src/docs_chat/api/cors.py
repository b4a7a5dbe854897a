"""Cross-origin headers for the browser chat widget."""

from __future__ import annotations

from docs_chat.config.settings import Settings

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"


def cors_headers(settings: Settings) -> dict[str, str]:
    """Only the docs origin in production; anything goes elsewhere."""
    return {
        "Access-Control-Allow-Origin": settings.allowed_origin if settings.is_production else "*",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }
