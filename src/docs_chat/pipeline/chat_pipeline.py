"""Request flow shared by both chat endpoints."""

from __future__ import annotations

from docs_chat.config.provider import ProviderDecision, resolve_provider
from docs_chat.config.settings import Settings
from docs_chat.exceptions import ConfigurationError
from docs_chat.formatting.structured import build_assistant_response
from docs_chat.generation.prompt_assembler import assemble_prompt
from docs_chat.generation.prompt_templates import SYNTAX_RULES
from docs_chat.models.domain import ChatMessage, ChatOutcome, DocSnippet
from docs_chat.models.schemas import AssistantRequest, AssistantResponse, ChatRequest
from docs_chat.observability.logger import get_logger
from docs_chat.observability.metrics import (
    log_completion_metrics,
    log_latency,
    log_retrieval_metrics,
)
from docs_chat.observability.tracing import TraceContext
from docs_chat.protocols.llm import CompletionRequester
from docs_chat.protocols.retriever import DocRetriever
from docs_chat.query.normalizer import normalize_query

logger = get_logger("chat_pipeline")


class ChatPipeline:
    """Config gate, optional doc lookup, prompt assembly, one completion call.

    Holds only immutable collaborators; every request builds its own prompt
    and snippet list.
    """

    def __init__(
        self,
        settings: Settings,
        retriever: DocRetriever,
        completion_client: CompletionRequester,
    ) -> None:
        self._settings = settings
        self._retriever = retriever
        self._completion = completion_client

    @property
    def rules(self) -> str:
        return SYNTAX_RULES[self._settings.prompt_rules_version]

    def check_provider(self) -> ProviderDecision:
        decision = resolve_provider(self._settings)
        if not decision.available:
            logger.error("no_provider_configured")
            raise ConfigurationError("AI assistant is not configured for this deployment.")
        return decision

    async def answer(self, request: AssistantRequest) -> AssistantResponse:
        """Single-shot question -> structured JSON envelope."""
        outcome = await self._run(
            user_query=request.query,
            include_docs=request.include_docs,
            context=request.context,
            messages=[ChatMessage(role="user", content=request.query)],
        )
        return build_assistant_response(outcome)

    async def chat(self, request: ChatRequest) -> ChatOutcome:
        """Conversation -> completion, left to the caller to stream."""
        messages = [ChatMessage(role=m.role, content=m.content) for m in request.messages]
        return await self._run(
            user_query=messages[-1].content,
            include_docs=True,
            context=None,
            messages=messages,
        )

    async def _run(
        self,
        user_query: str,
        include_docs: bool,
        context: str | None,
        messages: list[ChatMessage],
    ) -> ChatOutcome:
        decision = self.check_provider()
        trace = TraceContext()

        snippets: list[DocSnippet] = []
        search_query = ""
        if include_docs and self._retriever.enabled:
            search_query = normalize_query(user_query) if user_query else ""
            if search_query:
                with trace.span("retrieval"):
                    snippets = await self._retriever.retrieve(
                        search_query, top_k=self._settings.docsearch_top_k
                    )

        prompt = assemble_prompt(self.rules, snippets, context=context, messages=messages)
        log_retrieval_metrics(
            trace.trace_id,
            original_query=user_query,
            search_query=search_query,
            num_snippets=len(snippets),
            prompt_chars=len(prompt.system_text),
        )

        with trace.span("completion"):
            completion = await self._completion.complete(decision, prompt)

        log_completion_metrics(
            trace.trace_id,
            provider=decision.provider_name,
            model=decision.model_id,
            tokens_used=completion.tokens_used,
            answer_chars=len(completion.text),
        )
        for stage, duration_ms in trace.stage_durations().items():
            log_latency(trace.trace_id, stage, duration_ms)

        return ChatOutcome(
            completion=completion,
            snippets=snippets,
            provider=decision.provider_name,
            model=decision.model_id,
        )
