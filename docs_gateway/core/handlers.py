"""Exception handlers rendering every client-visible error as plain text.

Errors carry only a short message in a `text/plain` body, never a JSON
wrapper, so the frontend can show `await res.text()` directly.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse

logger = logging.getLogger(__name__)

_STATUS_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def error_response(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(
        message,
        status_code=status_code,
        headers={"X-Content-Type-Options": "nosniff"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    # Routing errors carry Starlette's title-case phrases; normalise them
    if exc.status_code in _STATUS_MESSAGES and message in ("Not Found", "Method Not Allowed"):
        message = _STATUS_MESSAGES[exc.status_code]
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.debug("validation error on %s: %s", request.url.path, exc.errors())
    return error_response(400, "Invalid request")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
