"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from docs_chat.api.dependencies import get_retriever, get_settings
from docs_chat.config.provider import resolve_provider
from docs_chat.config.settings import Settings
from docs_chat.models.schemas import HealthResponse
from docs_chat.protocols.retriever import DocRetriever

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings),
    retriever: DocRetriever = Depends(get_retriever),
) -> HealthResponse:
    decision = resolve_provider(settings)
    return HealthResponse(
        status="ok" if decision.available else "degraded",
        provider=decision.provider_name,
        docsearch_enabled=retriever.enabled,
    )
