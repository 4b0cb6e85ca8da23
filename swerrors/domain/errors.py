"""
Domain types and errors for structured error responses.

An entry describes one discrete problem; a source attributes it to a
location in the request. No framework imports allowed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ErrorSourceKey(Enum):
    """Location in the request an error is attributed to."""

    HEADER = "header"
    PATH = "path"
    QUERY = "query"
    BODY = "body"


@dataclass(frozen=True)
class ErrorSource:
    """Where in the request an error originated.

    A source whose key is ``None`` is unset and is not rendered.
    String keys are coerced to ErrorSourceKey; unknown keys raise ValueError.
    """

    key: Optional[ErrorSourceKey]
    value: str = ""

    def __post_init__(self) -> None:
        if self.key is not None:
            object.__setattr__(self, "key", ErrorSourceKey(self.key))

    @property
    def is_set(self) -> bool:
        return self.key is not None


@dataclass(frozen=True)
class ErrorEntry:
    """One discrete problem reported in an error response."""

    code: int
    title: str
    details: str = ""
    source: Optional[ErrorSource] = None


def new_source(key: Union[ErrorSourceKey, str], value: str) -> ErrorSource:
    """Build an ErrorSource, accepting the key as enum member or its value.

    Raises:
        ValueError: If ``key`` is not one of header, path, query or body.
    """
    return ErrorSource(key=ErrorSourceKey(key), value=value)


def new_error(
    code: int,
    title: str,
    details: str = "",
    source: Optional[ErrorSource] = None,
) -> ErrorEntry:
    """Build an ErrorEntry."""
    return ErrorEntry(code=code, title=title, details=details, source=source)


class ErrorsDomainError(Exception):
    """Base error for all error-response domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnsupportedOperationError(ErrorsDomainError):
    """Raised when an entry point that must never be used is invoked."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Unsupported operation: {operation}")
        self.operation = operation


class SerializationError(ErrorsDomainError):
    """Raised when an error response body cannot be written."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Error response serialization failed: {reason}")
        self.reason = reason
