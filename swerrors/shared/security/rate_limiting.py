"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits. Exceeded limits are
reported with the standard error envelope.

The shared ``limiter`` keeps its route limits across decorations and is
meant to serve a single application. Build a separate Limiter for each
additional app.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from swerrors.core.config import settings
from swerrors.domain.errors import new_error
from swerrors.interfaces.response import too_many_requests
from swerrors.shared.errors.rendering import render_error_response

HTTP_429 = 429
RATE_LIMIT_TITLE = "Rate limit exceeded"

limiter = Limiter(
    key_func=get_remote_address, default_limits=[settings.rate_limit_default]
)


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> Response:
    """Handle rate limit exceeded errors with a 429 error envelope.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 response with one entry naming the exceeded limit.
    """
    error = too_many_requests().append_entries(
        new_error(HTTP_429, RATE_LIMIT_TITLE, str(exc.detail))
    )
    return render_error_response(error)
