"""Reduce a natural-language question to the keywords worth searching for."""

from __future__ import annotations

from docs_chat.config.constants import (
    MIN_KEYWORD_LENGTH,
    QUERY_PUNCTUATION,
    QUERY_STOPWORDS,
)

_STRIP_TABLE = str.maketrans("", "", QUERY_PUNCTUATION)


def strip_punctuation(text: str) -> str:
    return text.lower().translate(_STRIP_TABLE)


def normalize_query(raw: str) -> str:
    """Lowercase, strip punctuation, drop stop words and short tokens.

    Falls back to the cleaned original when nothing survives, and to the raw
    input when even that is empty, so non-empty input never maps to "".
    """
    cleaned = strip_punctuation(raw)
    keywords = [
        token
        for token in cleaned.split()
        if token not in QUERY_STOPWORDS and len(token) >= MIN_KEYWORD_LENGTH
    ]
    if keywords:
        return " ".join(keywords)
    return cleaned.strip() or raw
