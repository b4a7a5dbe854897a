"""Tests for the streamed chunk wire format."""

import pytest

from docs_chat.formatting.streaming import (
    decode_chunk_line,
    encode_chunk,
    escape_chunk,
    iter_word_chunks,
    stream_chunks,
)


def test_word_chunks_prefix_spaces():
    assert list(iter_word_chunks("path is transitive")) == ["path", " is", " transitive"]


def test_word_chunks_keep_repeated_spaces():
    assert list(iter_word_chunks("a  b")) == ["a", " ", " b"]


def test_encode_escapes_quotes_backslashes_and_newlines():
    assert encode_chunk('say "hi"\\n\nnext') == '0:"say \\"hi\\"\\\\n\\nnext"\n'


def test_escape_backslash_before_quote():
    assert escape_chunk('\\"') == '\\\\\\"'


def test_decode_rejects_other_lines():
    with pytest.raises(ValueError):
        decode_chunk_line('1:"x"')


@pytest.mark.parametrize(
    "text",
    [
        "Use mavg(X) to compute an average.",
        'Rules:\n```vadalog\npath(X,Y) :- #TC(edge).\n@output("path").\n```',
        "C:\\temp\\n is not a newline",
        "  leading and trailing  ",
        "",
        "tab\tseparated \"quoted\" \\\\ end\n",
        "windows\r\nline endings\r and a lone CR",
    ],
)
async def test_stream_reconstructs_text(text):
    lines = [line async for line in stream_chunks(text, delay=0)]
    assert all(line.startswith('0:"') and line.endswith('"\n') for line in lines)
    assert all("\n" not in line[:-1] for line in lines)
    assert "".join(decode_chunk_line(line) for line in lines) == text


async def test_stream_stops_when_peer_disconnects():
    checks = 0

    async def is_disconnected() -> bool:
        nonlocal checks
        checks += 1
        return checks > 2

    lines = [line async for line in stream_chunks("one two three four five", 0, is_disconnected)]
    assert lines == ['0:"one"\n', '0:" two"\n']


def test_carriage_return_escaped_so_chunk_stays_on_one_line():
    line = encode_chunk("a\r\nb")
    assert line == '0:"a\\r\\nb"\n'
    assert line.splitlines() == ['0:"a\\r\\nb"']
    assert decode_chunk_line(line) == "a\r\nb"
