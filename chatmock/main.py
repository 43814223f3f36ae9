import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import StreamingResponse

from chatmock.assembler import CompletionAssembler
from chatmock.config import Settings, get_settings, settings
from chatmock.middleware import install_error_handling
from chatmock.models import ChatRequest, ChatResponse, PingResponse
from chatmock.streaming import SSE_HEADERS, stream_completion

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mock Chat Completion API",
    description="Canned chat completions in an OpenAI-like wire format",
    version="1.0.0"
)

install_error_handling(app)


def get_assembler(settings: Settings = Depends(get_settings)) -> CompletionAssembler:
    return CompletionAssembler(settings)


async def decode_chat_request(http_request: Request) -> ChatRequest:
    """
    Decode the raw body as a ChatRequest whatever its Content-Type.

    Raises:
        pydantic.ValidationError: if the body is not valid JSON or has the wrong shape
    """
    return ChatRequest.model_validate_json(await http_request.body())


@app.get("/ping")
async def ping() -> PingResponse:
    """Liveness probe."""
    return PingResponse()


@app.post("/chat/completions")
async def create_chat_completion(
    request: ChatRequest = Depends(decode_chat_request),
    assembler: CompletionAssembler = Depends(get_assembler),
) -> ChatResponse:
    """Return the canned completion as a single JSON body."""
    logger.debug(
        f"Chat completion request: model={request.model}, "
        f"messages={len(request.messages)}"
    )
    return assembler.build_completion(request)


@app.post("/chat/completions/streaming", response_model=None)
async def create_streaming_chat_completion(
    http_request: Request,
    request: ChatRequest = Depends(decode_chat_request),
    assembler: CompletionAssembler = Depends(get_assembler),
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    """
    Stream the scripted completion as server-sent events.

    The initial fragment is built before the response starts so that an
    invalid request still gets a plain 400 JSON error.
    """
    initial = assembler.build_initial_fragment(request)
    return StreamingResponse(
        stream_completion(
            initial,
            chunks=settings.stream_chunks,
            interval=settings.stream_interval,
            is_disconnected=http_request.is_disconnected,
        ),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "chatmock.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level
    )
