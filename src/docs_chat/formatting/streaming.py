"""Re-emit a finished completion as the line-oriented text stream chat widgets render.

Each line is ``0:"<chunk>"`` where the chunk has backslashes doubled, quotes
escaped, and newlines and carriage returns written as ``\\n`` and ``\\r``
so a chunk never spans lines.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator

from docs_chat.observability.logger import get_logger

logger = get_logger("streaming")

CHUNK_PREFIX = '0:"'
CHUNK_SUFFIX = '"\n'

_UNESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r"}


def escape_chunk(chunk: str) -> str:
    return (
        chunk.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def unescape_chunk(escaped: str) -> str:
    out: list[str] = []
    chars = iter(escaped)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            out.append(_UNESCAPES.get(nxt, "\\" + nxt))
        else:
            out.append(ch)
    return "".join(out)


def encode_chunk(chunk: str) -> str:
    return f"{CHUNK_PREFIX}{escape_chunk(chunk)}{CHUNK_SUFFIX}"


def decode_chunk_line(line: str) -> str:
    """Inverse of ``encode_chunk`` for one line (trailing newline optional)."""
    line = line.rstrip("\n")
    if not (line.startswith(CHUNK_PREFIX) and line.endswith('"')) or len(line) < 4:
        raise ValueError(f"Not a text chunk line: {line!r}")
    return unescape_chunk(line[len(CHUNK_PREFIX) : -1])


def iter_word_chunks(text: str) -> Iterator[str]:
    """Split on single spaces; every word after the first carries one leading space."""
    for i, word in enumerate(text.split(" ")):
        yield word if i == 0 else " " + word


async def stream_chunks(
    text: str,
    delay: float = 0.01,
    is_disconnected: Callable[[], Awaitable[bool]] | None = None,
) -> AsyncIterator[str]:
    """Yield encoded chunk lines, pausing ``delay`` seconds between them.

    Stops early once ``is_disconnected`` reports the peer has gone away.
    """
    sent = 0
    for chunk in iter_word_chunks(text):
        if is_disconnected is not None and await is_disconnected():
            logger.info("stream_client_disconnected", chunks_sent=sent)
            return
        if sent and delay > 0:
            await asyncio.sleep(delay)
        yield encode_chunk(chunk)
        sent += 1
    logger.debug("stream_complete", chunks_sent=sent)
