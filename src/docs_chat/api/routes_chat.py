"""Chat endpoints used by the docs site: single-shot JSON and streamed conversation."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse, StreamingResponse

from docs_chat.api.cors import cors_headers
from docs_chat.api.dependencies import get_chat_pipeline, get_settings
from docs_chat.config.settings import Settings
from docs_chat.exceptions import ConfigurationError, ProviderError
from docs_chat.formatting.streaming import stream_chunks
from docs_chat.formatting.structured import utc_timestamp
from docs_chat.models.schemas import AssistantRequest, AssistantResponse, ChatRequest
from docs_chat.observability.logger import get_logger
from docs_chat.pipeline.chat_pipeline import ChatPipeline

logger = get_logger("routes_chat")

router = APIRouter()

UNAVAILABLE_ERROR = "AI assistant not available"
INTERNAL_ERROR = "Internal Server Error"


@router.options("/api/vadalog")
@router.options("/api/docsChat")
async def preflight(settings: Settings = Depends(get_settings)) -> Response:
    return Response(status_code=200, headers=cors_headers(settings))


@router.post("/api/vadalog", response_model=AssistantResponse)
async def vadalog_assistant(
    body: AssistantRequest,
    pipeline: ChatPipeline = Depends(get_chat_pipeline),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    headers = cors_headers(settings)
    try:
        result = await pipeline.answer(body)
    except ConfigurationError as e:
        return JSONResponse(
            status_code=503,
            headers=headers,
            content={
                "error": UNAVAILABLE_ERROR,
                "message": str(e),
                "status": 503,
                "timestamp": utc_timestamp(),
            },
        )
    except ProviderError as e:
        return JSONResponse(
            status_code=500,
            headers=headers,
            content={
                "error": str(e),
                "status": e.status_code,
                "details": e.body,
                "timestamp": utc_timestamp(),
            },
        )
    except Exception as e:
        logger.exception("vadalog_endpoint_failed")
        return JSONResponse(
            status_code=500,
            headers=headers,
            content={"error": INTERNAL_ERROR, "details": str(e), "timestamp": utc_timestamp()},
        )

    return JSONResponse(content=result.model_dump(), headers=headers)


@router.post("/api/docsChat")
async def docs_chat(
    body: ChatRequest,
    request: Request,
    pipeline: ChatPipeline = Depends(get_chat_pipeline),
    settings: Settings = Depends(get_settings),
) -> Response:
    headers = cors_headers(settings)
    try:
        outcome = await pipeline.chat(body)
    except ConfigurationError as e:
        return JSONResponse(
            status_code=503,
            headers=headers,
            content={
                "error": UNAVAILABLE_ERROR,
                "message": f"{e} Please contact the administrator.",
            },
        )
    except ProviderError as e:
        return JSONResponse(
            status_code=500,
            headers=headers,
            content={"error": str(e), "status": e.status_code, "details": e.body},
        )
    except Exception as e:
        logger.exception("docs_chat_endpoint_failed")
        return JSONResponse(
            status_code=500,
            headers=headers,
            content={"error": INTERNAL_ERROR, "details": str(e)},
        )

    return StreamingResponse(
        stream_chunks(
            outcome.completion.text,
            delay=settings.stream_chunk_delay_ms / 1000,
            is_disconnected=request.is_disconnected,
        ),
        media_type="text/plain",
        headers={
            **headers,
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
        },
    )
