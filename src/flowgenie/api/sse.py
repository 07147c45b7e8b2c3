import asyncio
import logging
from collections.abc import Callable
from typing import Any

from .models import ChatOut, PlaybackOut

logger = logging.getLogger(__name__)


def format_sse_event(event_type: str, data: str) -> dict:
    """Format an SSE event for sse-starlette's EventSourceResponse."""
    return {"event": event_type, "data": data}


def sse_chat(chat: ChatOut) -> dict:
    return format_sse_event("chat", chat.model_dump_json())


def sse_playback(playback: PlaybackOut) -> dict:
    return format_sse_event("playback", playback.model_dump_json())


def sse_error(error: str) -> dict:
    return format_sse_event("error", error)


async def stream_updates(subscribe: Callable, initial: Any, to_event: Callable[[Any], dict]):
    """Yield ``initial`` and then every update pushed to the subscribed listener, as SSE events."""
    queue: asyncio.Queue = asyncio.Queue()
    unsubscribe = subscribe(queue.put_nowait)
    try:
        yield to_event(initial)
        while True:
            yield to_event(await queue.get())
    except Exception as e:
        logger.exception("Error in event stream")
        yield sse_error(str(e))
    finally:
        unsubscribe()
