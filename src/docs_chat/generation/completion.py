"""Chat-completion calls against OpenAI or Azure OpenAI."""

from __future__ import annotations

import httpx
from openai import APIConnectionError, APIError, APIStatusError, AsyncAzureOpenAI, AsyncOpenAI

from docs_chat.config.constants import NO_RESPONSE_TEXT
from docs_chat.config.provider import ProviderDecision
from docs_chat.exceptions import ConfigurationError, ProviderError
from docs_chat.models.domain import AssembledPrompt, CompletionResult
from docs_chat.observability.logger import get_logger

logger = get_logger("completion")


class CompletionClient:
    """Issue exactly one completion request per call; the SDK's retries are off.

    The SDK clients built per call borrow ``http_client``, whose owner closes it.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        max_tokens: int = 1500,
        temperature: float = 0.3,
    ) -> None:
        self._http_client = http_client
        self._max_tokens = max_tokens
        self._temperature = temperature

    def _client_for(self, decision: ProviderDecision) -> AsyncOpenAI:
        if decision.active == "secondary":
            return AsyncAzureOpenAI(
                azure_endpoint=decision.endpoint,
                api_key=decision.credential,
                api_version=decision.api_version,
                max_retries=0,
                http_client=self._http_client,
            )
        if decision.active == "primary":
            return AsyncOpenAI(
                api_key=decision.credential,
                base_url=decision.endpoint or None,
                max_retries=0,
                http_client=self._http_client,
            )
        raise ConfigurationError("No completion provider configured")

    async def complete(
        self, decision: ProviderDecision, prompt: AssembledPrompt
    ) -> CompletionResult:
        client = self._client_for(decision)
        logger.info(
            "completion_requested",
            provider=decision.provider_name,
            model=decision.model_id,
            messages=len(prompt.messages),
        )
        try:
            response = await client.chat.completions.create(
                model=decision.model_id,
                messages=[m.to_dict() for m in prompt.messages],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except APIStatusError as e:
            logger.error(
                "completion_failed",
                provider=decision.provider_name,
                status=e.status_code,
                body=e.response.text,
            )
            raise ProviderError(
                f"{decision.provider_name} error",
                status_code=e.status_code,
                body=e.response.text,
            ) from e
        except APIConnectionError as e:
            logger.error("completion_unreachable", provider=decision.provider_name, error=str(e))
            raise ProviderError(f"{decision.provider_name} error", body=str(e)) from e
        except APIError as e:
            raise ProviderError(
                f"{decision.provider_name} error",
                status_code=getattr(e, "status_code", None),
                body=str(e),
            ) from e
        except ValueError as e:
            # body was not valid JSON
            raise ProviderError(
                f"{decision.provider_name} error", status_code=200, body=str(e)
            ) from e

        choices = getattr(response, "choices", None)
        if not choices:
            raise ProviderError(
                f"{decision.provider_name} error",
                status_code=200,
                body="Completion response contained no choices",
            )

        message = getattr(choices[0], "message", None)
        text = getattr(message, "content", None) or NO_RESPONSE_TEXT
        usage = getattr(response, "usage", None)
        tokens_used = getattr(usage, "total_tokens", None) or "unknown"

        logger.info(
            "completion_received",
            provider=decision.provider_name,
            answer_len=len(text),
            tokens_used=tokens_used,
        )
        return CompletionResult(text=text, tokens_used=tokens_used)
