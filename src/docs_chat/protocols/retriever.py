"""Protocol for documentation retrievers."""

from __future__ import annotations

from typing import Protocol

from docs_chat.models.domain import DocSnippet


class DocRetriever(Protocol):
    @property
    def enabled(self) -> bool: ...

    async def retrieve(self, query: str, top_k: int = 3) -> list[DocSnippet]: ...
