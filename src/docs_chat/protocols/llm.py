"""Protocol for chat-completion requesters."""

from __future__ import annotations

from typing import Protocol

from docs_chat.config.provider import ProviderDecision
from docs_chat.models.domain import AssembledPrompt, CompletionResult


class CompletionRequester(Protocol):
    async def complete(
        self, decision: ProviderDecision, prompt: AssembledPrompt
    ) -> CompletionResult: ...
