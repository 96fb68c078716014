"""
Error taxonomy and its translation to HTTP responses.

Routers raise ``ApiError`` (directly, or through ``unwrap`` for store
results). The exception handlers installed by ``register_exception_handlers``
are the only place where errors become status codes and JSON bodies.
"""

import logging
from enum import Enum
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviehub.api.models.error import ErrorResponse
from moviehub.store.results import StoreError, StoreResult

logger = logging.getLogger(__name__)


class JSONUTF8Response(JSONResponse):
    """JSON response that always advertises its charset."""

    media_type = "application/json; charset=UTF-8"


class ErrorKind(Enum):
    """Error kinds with their HTTP status and default message."""

    NOT_FOUND = (404, "movie not found")
    ALREADY_EXISTS = (409, "movie already exists")
    MALFORMED_INPUT = (400, "malformed request")
    MALFORMED_BODY = (422, "JSON parse error")
    VALIDATION_FAILED = (422, "validation error")
    UNSUPPORTED_MEDIA_TYPE = (415, "unsupported media type")
    METHOD_NOT_ALLOWED = (405, "method not allowed for this path")
    UNKNOWN_ENDPOINT = (404, "unknown endpoint")
    INTERNAL = (500, "internal server error")

    @property
    def status_code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


_STORE_ERRORS = {
    StoreError.NOT_FOUND: ErrorKind.NOT_FOUND,
    StoreError.ALREADY_EXISTS: ErrorKind.ALREADY_EXISTS,
}


class ApiError(Exception):
    """An anticipated request failure of a known kind."""

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        details: Optional[List[str]] = None,
    ):
        self.kind = kind
        self.message = message or kind.message
        self.details = details
        super().__init__(self.message)


def unwrap(result: StoreResult):
    """Return the value of a successful store result or raise its ApiError."""
    if not result.ok:
        raise ApiError(_STORE_ERRORS[result.error])
    return result.value


def error_response(
    kind: ErrorKind,
    message: Optional[str] = None,
    details: Optional[List[str]] = None,
) -> JSONUTF8Response:
    """Build the JSON error body for ``kind``."""
    body = ErrorResponse(
        status=kind.status_code,
        error=message or kind.message,
        details=details,
    )
    return JSONUTF8Response(
        status_code=kind.status_code,
        content=body.model_dump(exclude_none=True),
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONUTF8Response:
    logger.warning(
        "%s %s rejected: %s %s",
        request.method, request.url.path, exc.kind.status_code, exc.message,
    )
    return error_response(exc.kind, exc.message, exc.details)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONUTF8Response:
    """Render framework-level routing errors in the API error shape."""
    if exc.status_code == 405:
        return error_response(ErrorKind.METHOD_NOT_ALLOWED)
    if exc.status_code == 404:
        return error_response(ErrorKind.UNKNOWN_ENDPOINT)
    body = ErrorResponse(status=exc.status_code, error=str(exc.detail))
    return JSONUTF8Response(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONUTF8Response:
    # ServerErrorMiddleware re-raises after this response, so the server logs the traceback
    return error_response(ErrorKind.INTERNAL, str(exc) or ErrorKind.INTERNAL.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error translation handlers on ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
