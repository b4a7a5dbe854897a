"""Tests for the completion requester."""

from __future__ import annotations

import json

import httpx
import pytest

from conftest import MockUpstream, completion_body, make_settings

from docs_chat.config.provider import ProviderDecision, resolve_provider
from docs_chat.exceptions import ConfigurationError, ProviderError
from docs_chat.generation.completion import CompletionClient
from docs_chat.generation.prompt_assembler import assemble_prompt
from docs_chat.generation.prompt_templates import SYNTAX_RULES

PROMPT = assemble_prompt(SYNTAX_RULES["concise"], [], query="What is a fact?")


async def test_openai_request_and_result():
    upstream = MockUpstream(completion_text="A fact ends with a dot.")
    client = CompletionClient(http_client=upstream.client())

    result = await client.complete(resolve_provider(make_settings()), PROMPT)

    assert result.text == "A fact ends with a dot."
    assert result.tokens_used == 42
    request = upstream.completion_requests[0]
    assert request.url.host == "api.openai.test"
    assert request.url.path == "/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-key"
    body = json.loads(request.content)
    assert body["model"] == "gpt-4"
    assert body["max_tokens"] == 1500
    assert body["temperature"] == 0.3
    assert body["messages"][0] == {"role": "system", "content": PROMPT.system_text}
    assert body["messages"][1] == {"role": "user", "content": "What is a fact?"}


async def test_azure_request_uses_deployment_and_api_version():
    upstream = MockUpstream()
    settings = make_settings(
        use_azure_openai=True,
        azure_openai_key="azure-key",
        azure_openai_endpoint="https://example.openai.azure.com",
        azure_openai_deployment="docs-gpt4",
    )
    client = CompletionClient(http_client=upstream.client())

    await client.complete(resolve_provider(settings), PROMPT)

    request = upstream.completion_requests[0]
    assert request.url.host == "example.openai.azure.com"
    assert request.url.path == "/openai/deployments/docs-gpt4/chat/completions"
    assert request.url.params["api-version"] == "2024-02-15-preview"
    assert request.headers["api-key"] == "azure-key"


async def test_error_status_raises_with_raw_body_and_no_retry():
    raw = '{"error": {"message": "Rate limit reached", "code": "rate_limit_exceeded"}}'
    upstream = MockUpstream(completion_status=429, completion_raw=raw)
    client = CompletionClient(http_client=upstream.client())

    with pytest.raises(ProviderError) as exc_info:
        await client.complete(resolve_provider(make_settings()), PROMPT)

    assert exc_info.value.status_code == 429
    assert exc_info.value.body == raw
    assert len(upstream.completion_requests) == 1


async def test_empty_choices_is_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        body = completion_body("unused")
        body["choices"] = []
        return httpx.Response(200, json=body)

    client = CompletionClient(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    with pytest.raises(ProviderError):
        await client.complete(resolve_provider(make_settings()), PROMPT)


async def test_missing_content_and_usage_defaults():
    def handler(request: httpx.Request) -> httpx.Response:
        body = completion_body("", total_tokens=None)
        body["choices"][0]["message"]["content"] = None
        return httpx.Response(200, json=body)

    client = CompletionClient(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    result = await client.complete(resolve_provider(make_settings()), PROMPT)
    assert result.text == "No response"
    assert result.tokens_used == "unknown"


async def test_unreachable_provider_is_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = CompletionClient(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    with pytest.raises(ProviderError) as exc_info:
        await client.complete(resolve_provider(make_settings()), PROMPT)
    assert exc_info.value.status_code is None


async def test_no_provider_refused_before_any_request():
    upstream = MockUpstream()
    client = CompletionClient(http_client=upstream.client())
    with pytest.raises(ConfigurationError):
        await client.complete(ProviderDecision(active="none"), PROMPT)
    assert upstream.completion_requests == []


def test_http_client_is_required():
    with pytest.raises(TypeError):
        CompletionClient()
