"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docs_chat import __version__
from docs_chat.api.cors import cors_headers
from docs_chat.api.middleware import RequestTimingMiddleware
from docs_chat.api.routes_chat import router as chat_router
from docs_chat.api.routes_health import router as health_router
from docs_chat.config.provider import resolve_provider
from docs_chat.config.settings import Settings
from docs_chat.generation.completion import CompletionClient
from docs_chat.observability.logger import get_logger, setup_logging
from docs_chat.pipeline.chat_pipeline import ChatPipeline
from docs_chat.retrieval.docsearch import DocSearchRetriever

logger = get_logger("app")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Default 422 body, plus CORS headers so the browser widget can read it."""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
        headers=cors_headers(request.app.state.settings),
    )


def create_app(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the app. ``http_client`` is shared by docsearch and the provider SDK."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        resolved = settings or Settings()
        setup_logging(resolved.log_level, resolved.json_logs)

        client = http_client or httpx.AsyncClient()
        retriever = DocSearchRetriever(client, resolved)
        completion_client = CompletionClient(
            http_client=client,
            max_tokens=resolved.completion_max_tokens,
            temperature=resolved.completion_temperature,
        )

        app.state.settings = resolved
        app.state.retriever = retriever
        app.state.chat_pipeline = ChatPipeline(
            settings=resolved,
            retriever=retriever,
            completion_client=completion_client,
        )

        decision = resolve_provider(resolved)
        logger.info(
            "startup_complete",
            environment=resolved.environment,
            provider=decision.provider_name,
            model=decision.model_id,
            openai_key="SET" if resolved.openai_api_key else "NOT SET",
            azure_key="SET" if resolved.azure_openai_key else "NOT SET",
            azure_endpoint="SET" if resolved.azure_openai_endpoint else "NOT SET",
            docsearch_enabled=retriever.enabled,
        )

        yield

        if http_client is None:
            await client.aclose()
        logger.info("shutdown_complete")

    app = FastAPI(
        title="Vadalog Docs Chat API",
        version=__version__,
        description="Chat assistant backend for the Vadalog documentation site",
        lifespan=lifespan,
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_middleware(RequestTimingMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(chat_router, tags=["chat"])
    return app
