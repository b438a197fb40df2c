# app/utils/sse.py
"""
Server-Sent Events helpers.

Events are framed as ``data: <payload>\\n\\n``. Multi-line payloads are
split across several ``data:`` lines, which clients join back with ``\\n``.
"""

import asyncio
from typing import AsyncIterable, AsyncIterator, Callable, TypeVar

from fastapi import Request

EVENT_STREAM_MEDIA_TYPE = "text/event-stream"

T = TypeVar("T")


def format_event(data: str) -> str:
    """Frame one payload as a single SSE event."""
    lines = data.splitlines() or [""]
    return "".join(f"data: {line}\n" for line in lines) + "\n"


def wants_event_stream(request: Request) -> bool:
    """
    True when the client's Accept header lists text/event-stream with a
    non-zero quality. Wildcards do not count.
    """
    for media_range in request.headers.get("accept", "").split(","):
        media_type, *params = [part.strip() for part in media_range.split(";")]
        if media_type.lower() != EVENT_STREAM_MEDIA_TYPE:
            continue

        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        return quality > 0
    return False


async def paced_events(
    items: AsyncIterable[T],
    *,
    delay: float,
    serialize: Callable[[T], str],
) -> AsyncIterator[str]:
    """
    Yield one SSE event per item, waiting ``delay`` seconds before each.

    Items are pulled from the source lazily, one at a time, in source order.
    """
    async for item in items:
        if delay > 0:
            await asyncio.sleep(delay)
        yield format_event(serialize(item))
