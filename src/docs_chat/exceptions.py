"""Custom exception hierarchy for the docs chat service."""

from __future__ import annotations


class DocsChatError(Exception):
    """Base exception for all docs chat errors."""


class ConfigurationError(DocsChatError):
    """No usable completion provider is configured."""


class RetrievalError(DocsChatError):
    """Error querying the documentation search index."""


class ProviderError(DocsChatError):
    """Upstream chat-completion provider returned an error or a malformed body."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
