"""Shared test fixtures."""

from __future__ import annotations

import json

import httpx
import pytest

from docs_chat.config.settings import Settings
from docs_chat.models.domain import CompletionResult, DocSnippet


def make_settings(**overrides) -> Settings:
    values = {
        "_env_file": None,
        "environment": "development",
        "openai_api_key": "test-key",
        "openai_base_url": "https://api.openai.test/v1",
        "openai_model": "gpt-4",
        "stream_chunk_delay_ms": 0,
        "json_logs": False,
    }
    values.update(overrides)
    return Settings(**values)


def completion_body(text: str, total_tokens: int | None = 42) -> dict:
    body = {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-4",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": text},
                "finish_reason": "stop",
            }
        ],
    }
    if total_tokens is not None:
        body["usage"] = {
            "prompt_tokens": total_tokens - 2,
            "completion_tokens": 2,
            "total_tokens": total_tokens,
        }
    return body


class MockUpstream:
    """Stands in for both the Algolia index and the completion provider."""

    def __init__(
        self,
        hits: list[dict] | None = None,
        completion_text: str = "Use mavg(X) to compute a moving average.",
        completion_status: int = 200,
        completion_raw: str | None = None,
        search_status: int = 200,
        search_raises: bool = False,
    ) -> None:
        self.hits = hits if hits is not None else []
        self.completion_text = completion_text
        self.completion_status = completion_status
        self.completion_raw = completion_raw
        self.search_status = search_status
        self.search_raises = search_raises
        self.search_requests: list[httpx.Request] = []
        self.completion_requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.url.host.endswith("algolia.net"):
            self.search_requests.append(request)
            if self.search_raises:
                raise httpx.ConnectError("search index unreachable", request=request)
            return httpx.Response(
                self.search_status, json={"hits": self.hits, "nbHits": len(self.hits)}
            )

        self.completion_requests.append(request)
        if self.completion_raw is not None:
            return httpx.Response(
                self.completion_status,
                text=self.completion_raw,
                headers={"content-type": "application/json"},
            )
        return httpx.Response(self.completion_status, json=completion_body(self.completion_text))

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def sent_messages(self, index: int = -1) -> list[dict]:
        return json.loads(self.completion_requests[index].content)["messages"]


class FakeRetriever:
    """Retriever double that records every call."""

    def __init__(self, snippets: list[DocSnippet] | None = None, enabled: bool = True) -> None:
        self.snippets = snippets or []
        self.enabled = enabled
        self.calls: list[tuple[str, int]] = []

    async def retrieve(self, query: str, top_k: int = 3) -> list[DocSnippet]:
        self.calls.append((query, top_k))
        return list(self.snippets[:top_k])


class FakeCompletionClient:
    def __init__(self, text: str = "Here is an answer.", tokens_used: int | str = 10) -> None:
        self.text = text
        self.tokens_used = tokens_used
        self.prompts = []

    async def complete(self, decision, prompt) -> CompletionResult:
        self.prompts.append(prompt)
        return CompletionResult(text=self.text, tokens_used=self.tokens_used)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def aggregation_snippet() -> DocSnippet:
    content = "Aggregations such as mavg, msum and mcount compute values over groups."
    return DocSnippet(
        title="Aggregations",
        url="https://docs.prometheux.ai/learn/vadalog/aggregations",
        content=content,
        excerpt=content[:200] + "...",
    )


@pytest.fixture
def aggregation_hit() -> dict:
    return {
        "hierarchy": {"lvl0": "Vadalog", "lvl1": "Aggregations"},
        "content": "Aggregations such as mavg, msum and mcount compute values over groups.",
        "url": "/learn/vadalog/aggregations",
    }
