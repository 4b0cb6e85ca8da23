"""
Centralized error handlers for FastAPI.

Maps raised errors to HTTP responses carrying the standard error
envelope. No stack traces are exposed to clients; unexpected exceptions
only reveal their message when explicitly configured.
"""

import logging
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from swerrors.core.config import settings
from swerrors.domain.errors import (
    ErrorEntry,
    ErrorSource,
    ErrorSourceKey,
    new_error,
)
from swerrors.interfaces.response import (
    ErrorResponse,
    new_detailed_response,
    new_response,
    unknown_error,
    unprocessable_entity,
)
from swerrors.shared.errors.rendering import render_error_response
from swerrors.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

HTTP_422 = 422
HTTP_500 = 500
BODYLESS_STATUSES = frozenset({204, 304})
INTERNAL_ERROR_TITLE = "Internal server error"


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _validation_entry(error: dict[str, Any]) -> ErrorEntry:
    """Convert one pydantic validation error into an entry."""
    loc = [str(part) for part in error.get("loc", ())]
    source: Optional[ErrorSource] = None
    if loc:
        try:
            key = ErrorSourceKey(loc[0])
        except ValueError:
            key = None
        if key is not None:
            source = ErrorSource(key=key, value=".".join(loc[1:]))
    return new_error(
        HTTP_422, error.get("msg", "Invalid value"), ".".join(loc), source
    )


def validation_error_response(exc: RequestValidationError) -> ErrorResponse:
    """Build a 422 response listing every validation error in order."""
    entries = [_validation_entry(error) for error in exc.errors()]
    return unprocessable_entity().with_entries(*entries)


def http_exception_response(exc: StarletteHTTPException) -> ErrorResponse:
    phrase = _status_phrase(exc.status_code)
    if exc.status_code in BODYLESS_STATUSES:
        return new_response(exc.status_code, phrase)
    detail = "" if exc.detail is None else str(exc.detail)
    return new_detailed_response(exc.status_code, phrase, detail).append_entries(
        new_error(exc.status_code, phrase, detail)
    )


def unexpected_error_response(exc: Exception) -> ErrorResponse:
    if settings.expose_unknown_errors:
        return unknown_error(exc)
    return new_response(HTTP_500, INTERNAL_ERROR_TITLE).append_entries(
        new_error(HTTP_500, INTERNAL_ERROR_TITLE)
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(ErrorResponse)
    async def handle_error_response(
        _request: Request, exc: ErrorResponse
    ) -> Response:
        """Write an ErrorResponse raised by a route."""
        if exc.http_status >= HTTP_500:
            logger.error("Server error response: %d %s", exc.http_status, exc.title)
        else:
            logger.warning("Client error response: %d %s", exc.http_status, exc.title)
        return render_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> Response:
        """Handle request validation failures."""
        logger.warning("Request validation failed: %d error(s)", len(exc.errors()))
        return render_error_response(validation_error_response(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Handle HTTP exceptions raised by routes or routing."""
        logger.warning("HTTP exception: %d", exc.status_code)
        response = render_error_response(http_exception_response(exc))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return render_error_response(unexpected_error_response(exc))
