"""
Turns an ErrorResponse into a Starlette response.

This is the recovery boundary: a body that cannot be serialized is
logged and replaced by a bare 500.
"""

import logging

from starlette.responses import Response

from swerrors.core.config import settings
from swerrors.domain.errors import SerializationError
from swerrors.infrastructure.producers import BufferedResponseWriter, JSONProducer
from swerrors.interfaces.response import ErrorResponse

logger = logging.getLogger(__name__)

HTTP_500 = 500


def render_error_response(error: ErrorResponse) -> Response:
    """Write ``error`` through the JSON producer and return the response.

    The content type is ``settings.media_type`` when configured, otherwise
    the producer's media type.
    """
    writer = BufferedResponseWriter()
    producer = JSONProducer()
    try:
        error.write_response(writer, producer)
    except SerializationError as exc:
        logger.error("Could not write error response: %s", exc.reason)
        return Response(status_code=HTTP_500)
    return writer.to_response(media_type=settings.media_type or producer.media_type)
