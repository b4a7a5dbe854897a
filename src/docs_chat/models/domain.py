"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class DocSnippet:
    title: str
    url: str
    content: str
    excerpt: str


@dataclass
class AssembledPrompt:
    system_text: str
    messages: list[ChatMessage] = field(default_factory=list)


@dataclass
class CompletionResult:
    text: str
    tokens_used: int | Literal["unknown"] = "unknown"


@dataclass(frozen=True)
class CodeBlock:
    language: str
    code: str


@dataclass
class ChatOutcome:
    """Everything a formatter needs once the completion has returned."""

    completion: CompletionResult
    snippets: list[DocSnippet]
    provider: str
    model: str
