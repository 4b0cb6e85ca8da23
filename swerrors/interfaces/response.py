"""
ErrorResponse builder and its convenience constructors.

An ErrorResponse carries an HTTP status plus an ordered list of error
entries. Builder methods never mutate the receiver: each returns a new
response, so chains such as ``bad_request().append_entries(...)`` are safe
to share between callers.
"""

from http import HTTPStatus
from typing import Any, Iterable, Optional

from swerrors.domain.errors import (
    ErrorEntry,
    SerializationError,
    UnsupportedOperationError,
)
from swerrors.domain.ports import Producer, ResponseWriter
from swerrors.interfaces.schemas import ErrorEnvelope, ErrorItem, ErrorSourceItem

UNKNOWN_ERROR_CODE = 0
UNKNOWN_ERROR_TITLE = "Unknown error"


class ErrorResponse(Exception):
    """Structured HTTP error response.

    Can be raised from request handlers; the registered exception handler
    writes it to the client.

    Attributes:
        http_status: Status sent to the client. Fixed at construction.
        title: Response-level summary.
        details: Response-level explanation, empty by default.
        code: Response-level application code, 0 by default.
        entries: Error entries in the order they were added.
    """

    def __init__(
        self,
        http_status: int,
        title: str,
        details: str = "",
        code: int = 0,
        entries: Iterable[ErrorEntry] = (),
    ) -> None:
        self._http_status = int(http_status)
        self._title = title
        self._details = details
        self._code = code
        self._entries: tuple[ErrorEntry, ...] = tuple(entries)
        super().__init__(self._http_status, title)

    @property
    def http_status(self) -> int:
        return self._http_status

    @property
    def title(self) -> str:
        return self._title

    @property
    def details(self) -> str:
        return self._details

    @property
    def code(self) -> int:
        return self._code

    @property
    def entries(self) -> tuple[ErrorEntry, ...]:
        return self._entries

    def _evolve(self, entries: Iterable[ErrorEntry]) -> "ErrorResponse":
        return ErrorResponse(
            http_status=self._http_status,
            title=self._title,
            details=self._details,
            code=self._code,
            entries=entries,
        )

    # -- builders -------------------------------------------------------

    def with_entries(self, *entries: ErrorEntry) -> "ErrorResponse":
        """Return a copy whose entries are exactly ``entries``.

        Entries added earlier are discarded.
        """
        return self._evolve(entries)

    def append_entries(self, *entries: ErrorEntry) -> "ErrorResponse":
        """Return a copy with ``entries`` appended after the existing ones."""
        return self._evolve(self._entries + entries)

    def append_unknown(self, *errors: BaseException) -> "ErrorResponse":
        """Return a copy with one zero-code entry per generic error.

        Only the error message survives; the exception type is dropped.
        """
        # TODO: map ORM and message-queue exceptions to their own codes
        unknown = tuple(
            ErrorEntry(
                code=UNKNOWN_ERROR_CODE,
                title=UNKNOWN_ERROR_TITLE,
                details=str(err),
            )
            for err in errors
        )
        return self._evolve(self._entries + unknown)

    # -- serialization --------------------------------------------------

    def to_envelope(self) -> ErrorEnvelope:
        """Build the wire envelope for the current entries."""
        items = []
        for entry in self._entries:
            source = None
            if entry.source is not None and entry.source.is_set:
                source = ErrorSourceItem(
                    key=entry.source.key.value, value=entry.source.value
                )
            items.append(
                ErrorItem(
                    code=str(entry.code),
                    title=entry.title,
                    detail=entry.details,
                    source=source,
                )
            )
        return ErrorEnvelope(errors=items)

    def to_json_bytes(self) -> bytes:
        """Encode the envelope as JSON; empty bytes when there are no entries."""
        if not self._entries:
            return b""
        return self.to_envelope().marshal_binary()

    def to_json_string(self) -> str:
        return self.to_json_bytes().decode("utf-8")

    def error_message(self) -> str:
        """Flatten all entries into one ``"<code>. <title>. <details>"`` string."""
        return "".join(
            f"{entry.code}. {entry.title}. {entry.details}" for entry in self._entries
        )

    def __str__(self) -> str:
        return self.error_message()

    def __repr__(self) -> str:
        return (
            f"ErrorResponse(http_status={self._http_status!r}, "
            f"title={self._title!r}, entries={len(self._entries)})"
        )

    # -- transport ------------------------------------------------------

    def write_response(self, writer: ResponseWriter, producer: Producer) -> None:
        """Write the status, then the envelope if there is anything to report.

        Raises:
            SerializationError: If the producer fails to write the body.
        """
        writer.write_header(self._http_status)
        if not self._entries:
            return

        try:
            producer.produce(writer, self.to_envelope())
        except (OSError, TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc

    def with_payload(self, payload: Any) -> "ErrorResponse":
        """Present only for interface compatibility with generated responders."""
        raise UnsupportedOperationError("with_payload")

    def set_payload(self, payload: Any) -> None:
        """Present only for interface compatibility with generated responders."""
        raise UnsupportedOperationError("set_payload")


def new_response(status: int, title: str) -> ErrorResponse:
    return ErrorResponse(http_status=status, title=title)


def new_detailed_response(status: int, title: str, details: str) -> ErrorResponse:
    return ErrorResponse(http_status=status, title=title, details=details)


def unknown_error(err: Optional[BaseException]) -> ErrorResponse:
    """500 response carrying ``err`` as an unknown entry."""
    response = new_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Unknown error")
    if err is None:
        return response
    return response.append_unknown(err)


def unprocessable_entity() -> ErrorResponse:
    return new_response(HTTPStatus.UNPROCESSABLE_ENTITY, "Unprocessable entity")


def bad_request() -> ErrorResponse:
    return new_response(HTTPStatus.BAD_REQUEST, "Bad request")


def not_found() -> ErrorResponse:
    return new_response(HTTPStatus.NOT_FOUND, "Not found")


def forbidden() -> ErrorResponse:
    return new_response(HTTPStatus.FORBIDDEN, "Forbidden")


def too_many_requests() -> ErrorResponse:
    return new_response(HTTPStatus.TOO_MANY_REQUESTS, "Too many requests")


def unauthorized() -> ErrorResponse:
    return new_response(HTTPStatus.UNAUTHORIZED, "Unauthorized")


def teapot() -> ErrorResponse:
    # Title does not match the status; kept as shipped.
    return new_response(HTTPStatus.IM_A_TEAPOT, "Unauthorized")


def conflict() -> ErrorResponse:
    return new_response(HTTPStatus.CONFLICT, "Conflict")


def method_not_allowed() -> ErrorResponse:
    return new_response(HTTPStatus.METHOD_NOT_ALLOWED, "Method not allowed")


def not_acceptable() -> ErrorResponse:
    return new_response(HTTPStatus.NOT_ACCEPTABLE, "Not acceptable")


def service_unavailable() -> ErrorResponse:
    return new_response(HTTPStatus.SERVICE_UNAVAILABLE, "Service unavailable")
