"""Structured JSON envelope for the single-shot endpoint."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from docs_chat.config.constants import CODE_DESCRIPTION, CODE_LANGUAGE
from docs_chat.models.domain import ChatOutcome, CodeBlock
from docs_chat.models.schemas import (
    AssistantResponse,
    CodeExample,
    RelevantDoc,
    ResponseMetadata,
)

CODE_FENCE_RE = re.compile(r"```(?:vadalog|prolog)?\n([\s\S]*?)```")


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def extract_code_blocks(text: str) -> list[CodeBlock]:
    """Return fenced Vadalog/Prolog (or untagged) regions in order, trimmed."""
    return [
        CodeBlock(language=CODE_LANGUAGE, code=match.group(1).strip())
        for match in CODE_FENCE_RE.finditer(text)
    ]


def build_assistant_response(outcome: ChatOutcome) -> AssistantResponse:
    text = outcome.completion.text
    return AssistantResponse(
        response=text,
        code_examples=[
            CodeExample(language=block.language, code=block.code, description=CODE_DESCRIPTION)
            for block in extract_code_blocks(text)
        ],
        relevant_docs=[
            RelevantDoc(title=s.title, url=s.url, excerpt=s.excerpt) for s in outcome.snippets
        ],
        metadata=ResponseMetadata(
            provider=outcome.provider,
            model=outcome.model,
            tokens_used=outcome.completion.tokens_used,
            search_results=len(outcome.snippets),
        ),
        timestamp=utc_timestamp(),
    )
