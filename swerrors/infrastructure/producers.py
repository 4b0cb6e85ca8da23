"""
Adapters implementing the response-writing ports.

JSONProducer encodes values as compact JSON. BufferedResponseWriter
collects status and body in memory and turns them into a Starlette
response once writing is finished.
"""

import json
from typing import Any, Optional

from pydantic import BaseModel
from starlette.responses import Response

from swerrors.domain.ports import Producer, ResponseWriter

JSON_MEDIA_TYPE = "application/json"
DEFAULT_STATUS = 200


class JSONProducer(Producer):
    """Producer writing values as compact UTF-8 JSON.

    Pydantic models are encoded with their own serializer, ``None``
    fields dropped. Anything else goes through ``json.dumps``.
    """

    media_type = JSON_MEDIA_TYPE

    def produce(self, writer: ResponseWriter, data: Any) -> None:
        if isinstance(data, BaseModel):
            body = data.model_dump_json(exclude_none=True).encode("utf-8")
        else:
            body = json.dumps(
                data, separators=(",", ":"), ensure_ascii=False
            ).encode("utf-8")
        writer.write(body)


class BufferedResponseWriter(ResponseWriter):
    """In-memory response writer.

    The status may only be set once; later calls are ignored, matching
    how HTTP servers treat a second header write.
    """

    def __init__(self) -> None:
        self.status: Optional[int] = None
        self._chunks: list[bytes] = []

    def write_header(self, status: int) -> None:
        if self.status is None:
            self.status = status

    def write(self, data: bytes) -> int:
        if self.status is None:
            self.status = DEFAULT_STATUS
        self._chunks.append(bytes(data))
        return len(data)

    @property
    def body(self) -> bytes:
        return b"".join(self._chunks)

    def to_response(self, media_type: str = JSON_MEDIA_TYPE) -> Response:
        """Build the Starlette response.

        An empty body produces a response without content or content type.
        """
        status = self.status if self.status is not None else DEFAULT_STATUS
        body = self.body
        if not body:
            return Response(status_code=status)
        return Response(content=body, status_code=status, media_type=media_type)
