"""Metric recording helpers for pipeline stages."""

from __future__ import annotations

from docs_chat.observability.logger import get_logger

logger = get_logger("metrics")


def log_retrieval_metrics(
    trace_id: str,
    original_query: str,
    search_query: str,
    num_snippets: int,
    prompt_chars: int,
) -> None:
    logger.info(
        "retrieval_metrics",
        trace_id=trace_id,
        original_query=original_query,
        search_query=search_query,
        num_snippets=num_snippets,
        prompt_chars=prompt_chars,
    )


def log_completion_metrics(
    trace_id: str,
    provider: str,
    model: str,
    tokens_used: int | str,
    answer_chars: int,
) -> None:
    logger.info(
        "completion_metrics",
        trace_id=trace_id,
        provider=provider,
        model=model,
        tokens_used=tokens_used,
        answer_chars=answer_chars,
    )


def log_latency(trace_id: str, stage: str, duration_ms: float) -> None:
    logger.info(
        "latency",
        trace_id=trace_id,
        stage=stage,
        duration_ms=round(duration_ms, 2),
    )
