"""Ask the docs chat API a question from the command line.

Usage:
    1. Start the server:   python -m docs_chat.main
    2. Ask (JSON):         python scripts/ask.py "How do I compute an average?"
    3. Ask (streamed):     python scripts/ask.py --stream "How do I compute an average?"
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from docs_chat.formatting.streaming import decode_chunk_line

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 120.0


async def ask_structured(client: httpx.AsyncClient, query: str, include_docs: bool) -> int:
    response = await client.post(
        "/api/vadalog", json={"query": query, "include_docs": include_docs}
    )
    data = response.json()
    if response.status_code != 200:
        print(json.dumps(data, indent=2), file=sys.stderr)
        return 1

    print(data["response"])
    if data["relevant_docs"]:
        print("\nSources:")
        for doc in data["relevant_docs"]:
            print(f"  - {doc['title']}: {doc['url']}")
    meta = data["metadata"]
    print(f"\n[{meta['provider']} / {meta['model']}, tokens: {meta['tokens_used']}]")
    return 0


async def ask_streamed(client: httpx.AsyncClient, query: str) -> int:
    payload = {"messages": [{"role": "user", "content": query}]}
    async with client.stream("POST", "/api/docsChat", json=payload) as response:
        if response.status_code != 200:
            body = await response.aread()
            print(body.decode(), file=sys.stderr)
            return 1
        async for line in response.aiter_lines():
            if line:
                print(decode_chunk_line(line), end="", flush=True)
    print()
    return 0


async def run(args: argparse.Namespace) -> int:
    async with httpx.AsyncClient(
        base_url=args.base_url, timeout=httpx.Timeout(args.timeout)
    ) as client:
        if args.stream:
            return await ask_streamed(client, args.query)
        return await ask_structured(client, args.query, include_docs=not args.no_docs)


def main() -> None:
    parser = argparse.ArgumentParser(description="Ask the Vadalog docs assistant")
    parser.add_argument("query", help="Question to ask")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    parser.add_argument("--stream", action="store_true", help="Use the streamed chat endpoint")
    parser.add_argument("--no-docs", action="store_true", help="Skip documentation lookup")
    args = parser.parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
