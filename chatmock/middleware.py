import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from chatmock.errors import ChatMockError
from chatmock.models import ApiError

logger = logging.getLogger(__name__)


def error_response(message: str) -> JSONResponse:
    """Build the 400 envelope shared by every endpoint."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ApiError(error=message or "bad request").model_dump(),
    )


def describe_validation_error(errors: list[dict[str, Any]]) -> str:
    """
    Turn FastAPI or pydantic validation errors into a single line.

    Only the first error is reported, mirroring a decoder that stops at the
    first problem.

    Example:
        >>> describe_validation_error([{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error",
        ...                             "ctx": {"error": "Expecting value"}}])
        'JSON decode error: Expecting value'
    """
    if not errors:
        return "invalid request body"

    first = errors[0]
    msg = first.get("msg", "invalid request body")
    ctx = first.get("ctx") or {}
    if first.get("type") == "json_invalid":
        detail = ctx.get("error")
        if detail and str(detail) not in msg:
            return f"{msg}: {detail}"
        return msg

    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    if loc:
        return f"{'.'.join(loc)}: {msg}"
    return msg


async def validation_error_handler(request: Request, exc: RequestValidationError | ValidationError) -> JSONResponse:
    message = describe_validation_error(list(exc.errors()))
    logger.warning(f"Rejected body for {request.url.path}: {message}")
    return error_response(message)


async def chatmock_error_handler(request: Request, exc: ChatMockError) -> JSONResponse:
    logger.warning(f"Rejected request for {request.url.path}: {exc}")
    return error_response(str(exc))


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):
    """Log every request and turn unhandled handler errors into 400 responses."""

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and wrap any escaping exception.

        Errors raised after a streaming body has started are not seen here;
        they end the connection instead.
        """
        logger.info(f"{request.method} {request.url.path}")

        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Error handling {request.method} {request.url.path}: {e}", exc_info=True)
            return error_response(str(e))


def install_error_handling(app: FastAPI) -> None:
    """Register the exception handlers and the envelope middleware on `app`."""
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ChatMockError, chatmock_error_handler)
    app.add_middleware(ErrorEnvelopeMiddleware)
