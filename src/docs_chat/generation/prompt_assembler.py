"""Build the system prompt and the outbound message list."""

from __future__ import annotations

from collections.abc import Sequence

from docs_chat.generation.prompt_templates import (
    CLOSING_INSTRUCTION,
    CONTEXT_HEADER,
    DOCUMENTATION_HEADER,
    DOCUMENTATION_INSTRUCTION,
    ROLE_FRAMING,
    format_documentation_block,
)
from docs_chat.models.domain import AssembledPrompt, ChatMessage, DocSnippet


def build_system_text(
    rules: str,
    snippets: Sequence[DocSnippet],
    context: str | None = None,
) -> str:
    """Role framing, rules, caller context, then retrieved docs.

    Retrieved documentation always comes after the fixed rules so that the
    rules win when the two disagree.
    """
    sections = [ROLE_FRAMING, rules]
    if context:
        sections.append(f"{CONTEXT_HEADER} {context}")
    if snippets:
        sections.append(
            f"{DOCUMENTATION_HEADER}\n{format_documentation_block(list(snippets))}"
            f"\n\n{DOCUMENTATION_INSTRUCTION}"
        )
    sections.append(CLOSING_INSTRUCTION)
    return "\n\n".join(sections)


def assemble_prompt(
    rules: str,
    snippets: Sequence[DocSnippet],
    context: str | None = None,
    messages: Sequence[ChatMessage] = (),
    query: str | None = None,
) -> AssembledPrompt:
    """Prepend the system message to the caller's messages, or to ``query``."""
    system_text = build_system_text(rules, snippets, context)
    conversation = list(messages)
    if not conversation and query is not None:
        conversation = [ChatMessage(role="user", content=query)]
    return AssembledPrompt(
        system_text=system_text,
        messages=[ChatMessage(role="system", content=system_text), *conversation],
    )
