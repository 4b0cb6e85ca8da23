"""
Pydantic schemas for the JSON error envelope.

These schemas define the wire contract of every error body:
{"errors": [{"code", "title", "detail", "source": {"key", "value"}}]}
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, Field

SOURCE_KEY_PATTERN = r"^(header|path|query|body)$"


class ErrorSourceItem(BaseModel):
    """Request location an error item is attributed to."""

    key: str = Field(..., pattern=SOURCE_KEY_PATTERN)
    value: str


class ErrorItem(BaseModel):
    """A single error item in the envelope.

    Attributes:
        code: Application error code, rendered as a string.
        title: Short summary of the problem.
        detail: Human-readable explanation.
        source: Optional request location, omitted when absent.
    """

    code: str
    title: str
    detail: str = ""
    source: Optional[ErrorSourceItem] = None


class ErrorEnvelope(BaseModel):
    """Top-level error body wrapping the list of items."""

    errors: list[ErrorItem] = Field(default_factory=list)

    def marshal_binary(self) -> bytes:
        """Encode the envelope as compact JSON, dropping absent sources."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")

    @classmethod
    def unmarshal_binary(cls, data: bytes) -> "ErrorEnvelope":
        """Decode an envelope previously produced by marshal_binary."""
        return cls.model_validate_json(data)
