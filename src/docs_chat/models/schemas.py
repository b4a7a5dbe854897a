"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class Message(BaseModel):
    role: str
    content: str = ""


class AssistantRequest(BaseModel):
    query: str
    context: str | None = None
    include_docs: bool = True


class ChatRequest(BaseModel):
    messages: list[Message] = Field(min_length=1)


class CodeExample(BaseModel):
    language: str
    code: str
    description: str


class RelevantDoc(BaseModel):
    title: str
    url: str
    excerpt: str


class ResponseMetadata(BaseModel):
    provider: str
    model: str
    tokens_used: int | Literal["unknown"]
    search_results: int


class AssistantResponse(BaseModel):
    response: str
    code_examples: list[CodeExample]
    relevant_docs: list[RelevantDoc]
    metadata: ResponseMetadata
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    provider: str
    docsearch_enabled: bool
