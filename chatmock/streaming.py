import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

from pydantic import BaseModel

from chatmock.assembler import CompletionAssembler
from chatmock.models import ChatResponse

logger = logging.getLogger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "Access-Control-Allow-Origin": "*",
    "X-Accel-Buffering": "no",
}

END_FRAME = "event: end\n\n"


def format_data_frame(payload: BaseModel) -> str:
    """Frame a model as a single event-stream `data:` message."""
    return f"data: {payload.model_dump_json()}\n\n"


async def stream_completion(
    initial: ChatResponse,
    chunks: int,
    interval: float,
    is_disconnected: Callable[[], Awaitable[bool]] | None = None,
) -> AsyncIterator[str]:
    """
    Emit a scripted completion as event-stream frames.

    Yields the initial fragment, then `chunks` choice fragments with
    `interval` seconds slept after each, then the terminal end frame.
    Stops early if the client goes away.

    Args:
        initial: Usage-only fragment built before the response starts
        chunks: Number of choice fragments to emit
        interval: Seconds to sleep after each choice fragment
        is_disconnected: Optional probe for the client having hung up
    """
    logger.info(f"Streaming {initial.id}: {chunks} parts every {interval}s")
    yield format_data_frame(initial)

    try:
        for part in range(chunks):
            if is_disconnected is not None and await is_disconnected():
                logger.info(f"Client disconnected from {initial.id} before part {part}")
                return
            yield format_data_frame(CompletionAssembler.build_stream_choice(part))
            await asyncio.sleep(interval)
    except asyncio.CancelledError:
        logger.info(f"Stream {initial.id} cancelled")
        raise

    yield END_FRAME
    logger.debug(f"Stream {initial.id} finished")
