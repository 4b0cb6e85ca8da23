"""
swerrors: standardized HTTP error responses for OpenAPI services.

Builds error responses (status plus ordered code/title/detail/source
entries) and writes them as a fixed JSON envelope.

Layers:
    - domain: Entry and source types, errors, writer/producer ports.
    - interfaces: ErrorResponse builder and the Pydantic wire envelope.
    - infrastructure: JSON producer and buffered response writer.
    - shared: FastAPI error handlers, rate limiting, logging.
"""

from swerrors.domain.errors import (
    ErrorEntry,
    ErrorSource,
    ErrorSourceKey,
    ErrorsDomainError,
    SerializationError,
    UnsupportedOperationError,
    new_error,
    new_source,
)
from swerrors.interfaces.response import (
    ErrorResponse,
    bad_request,
    conflict,
    forbidden,
    method_not_allowed,
    new_detailed_response,
    new_response,
    not_acceptable,
    not_found,
    service_unavailable,
    teapot,
    too_many_requests,
    unauthorized,
    unknown_error,
    unprocessable_entity,
)

__all__ = [
    # Types
    "ErrorEntry",
    "ErrorSource",
    "ErrorSourceKey",
    "ErrorResponse",
    # Errors
    "ErrorsDomainError",
    "SerializationError",
    "UnsupportedOperationError",
    # Factories
    "new_error",
    "new_source",
    "new_response",
    "new_detailed_response",
    "unknown_error",
    "unprocessable_entity",
    "bad_request",
    "not_found",
    "forbidden",
    "too_many_requests",
    "unauthorized",
    "teapot",
    "conflict",
    "method_not_allowed",
    "not_acceptable",
    "service_unavailable",
]
