"""
Port interfaces (ABCs) for writing error responses.

Ports define what an error response needs from the transport layer.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Any


class ResponseWriter(ABC):
    """Port for the HTTP response being written."""

    @abstractmethod
    def write_header(self, status: int) -> None:
        """Set the HTTP status of the response."""
        raise NotImplementedError

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Append bytes to the response body.

        Returns:
            The number of bytes written.
        """
        raise NotImplementedError


class Producer(ABC):
    """Port for serializing a value onto a response writer.

    Implementations raise ``OSError`` on transport failures and
    ``TypeError`` or ``ValueError`` when the value cannot be encoded.
    """

    media_type: str = "application/octet-stream"

    @abstractmethod
    def produce(self, writer: ResponseWriter, data: Any) -> None:
        """Serialize ``data`` and write it to ``writer``."""
        raise NotImplementedError
