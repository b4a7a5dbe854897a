"""Best-effort documentation lookup against the site's Algolia DocSearch index."""

from __future__ import annotations

from typing import Any

import httpx

from docs_chat.config.constants import DEFAULT_DOC_TITLE, EXCERPT_LENGTH
from docs_chat.config.settings import Settings
from docs_chat.exceptions import RetrievalError
from docs_chat.models.domain import DocSnippet
from docs_chat.observability.logger import get_logger

logger = get_logger("docsearch")

RETRIEVED_ATTRIBUTES = ["content", "hierarchy", "url"]


class DocSearchRetriever:
    """Query the DocSearch index with the public, search-only credentials.

    ``retrieve`` never raises: any failure is logged and turns into an empty
    result so the chat flow carries on without documentation.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._app_id = settings.algolia_app_id
        self._api_key = settings.algolia_search_key
        self._index_name = settings.algolia_index_name
        self._hits_per_page = settings.docsearch_hits_per_page
        self._docs_base_url = settings.docs_base_url.rstrip("/")
        self._enabled = bool(
            settings.docsearch_enabled and self._app_id and self._api_key
        )

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def search_url(self) -> str:
        return f"https://{self._app_id}-dsn.algolia.net/1/indexes/{self._index_name}/query"

    async def retrieve(self, query: str, top_k: int = 3) -> list[DocSnippet]:
        if not self._enabled:
            return []
        try:
            hits = await self._search(query)
        except RetrievalError as e:
            logger.warning("docsearch_failed", query=query, error=str(e))
            return []

        if not hits:
            logger.warning("docsearch_no_results", query=query)
            return []

        snippets = [self._to_snippet(hit) for hit in hits[:top_k]]
        logger.info(
            "docsearch_results",
            query=query,
            total_hits=len(hits),
            used=len(snippets),
            sections=[s.title for s in snippets],
        )
        return snippets

    async def _search(self, query: str) -> list[dict[str, Any]]:
        try:
            response = await self._client.post(
                self.search_url,
                headers={
                    "X-Algolia-Application-Id": self._app_id,
                    "X-Algolia-API-Key": self._api_key,
                },
                json={
                    "query": query,
                    "hitsPerPage": self._hits_per_page,
                    "attributesToRetrieve": RETRIEVED_ATTRIBUTES,
                    "attributesToHighlight": [],
                    "removeStopWords": True,
                },
            )
            response.raise_for_status()
            hits = response.json()["hits"]
        except Exception as e:
            raise RetrievalError(f"Documentation search failed: {e}") from e

        if not isinstance(hits, list):
            raise RetrievalError("Documentation search returned malformed hits")
        return [hit for hit in hits if isinstance(hit, dict)]

    def _to_snippet(self, hit: dict[str, Any]) -> DocSnippet:
        hierarchy = hit.get("hierarchy") or {}
        title = (hierarchy.get("lvl1") if isinstance(hierarchy, dict) else None) or DEFAULT_DOC_TITLE
        content = str(hit.get("content") or "")
        return DocSnippet(
            title=str(title),
            url=self._absolute_url(str(hit.get("url") or "")),
            content=content,
            excerpt=content[:EXCERPT_LENGTH] + "...",
        )

    def _absolute_url(self, url: str) -> str:
        if url.startswith("http"):
            return url
        return f"{self._docs_base_url}{url}"
