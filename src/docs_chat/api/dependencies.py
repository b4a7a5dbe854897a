"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Request

from docs_chat.config.settings import Settings
from docs_chat.pipeline.chat_pipeline import ChatPipeline
from docs_chat.protocols.retriever import DocRetriever


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_chat_pipeline(request: Request) -> ChatPipeline:
    return request.app.state.chat_pipeline


def get_retriever(request: Request) -> DocRetriever:
    return request.app.state.retriever
