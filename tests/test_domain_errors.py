"""
Tests for the error domain layer.

Tests entry/source types and domain error classes in isolation.
No external dependencies or IO required.
"""

import dataclasses

import pytest

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


class TestErrorSource:
    """Tests for ErrorSource and new_source."""

    @pytest.mark.parametrize("key", ["header", "path", "query", "body"])
    def test_new_source_accepts_string_keys(self, key: str) -> None:
        """Each of the four locations is accepted by its string value."""
        source = new_source(key, "id")
        assert source.key is ErrorSourceKey(key)
        assert source.value == "id"

    def test_new_source_accepts_enum_member(self) -> None:
        """Enum members are passed through unchanged."""
        source = new_source(ErrorSourceKey.QUERY, "limit")
        assert source == ErrorSource(key=ErrorSourceKey.QUERY, value="limit")

    def test_new_source_rejects_unknown_key(self) -> None:
        """Locations outside the closed set are rejected."""
        with pytest.raises(ValueError):
            new_source("cookie", "session")

    def test_string_key_is_coerced(self) -> None:
        """Building ErrorSource directly with a string key yields the enum member."""
        source = ErrorSource(key="query", value="id")
        assert source.key is ErrorSourceKey.QUERY
        assert source == new_source(ErrorSourceKey.QUERY, "id")

    def test_direct_construction_rejects_unknown_key(self) -> None:
        """The closed key set also holds for direct construction."""
        with pytest.raises(ValueError):
            ErrorSource(key="cookie", value="session")

    def test_unset_source(self) -> None:
        """A source without key is reported as unset."""
        assert not ErrorSource(key=None).is_set
        assert new_source("body", "name").is_set


class TestErrorEntry:
    """Tests for ErrorEntry and new_error."""

    def test_new_error_defaults(self) -> None:
        """Details default to empty and source to absent."""
        entry = new_error(404, "Not found")
        assert entry == ErrorEntry(code=404, title="Not found", details="", source=None)

    def test_entry_is_immutable(self) -> None:
        """Entries are frozen values."""
        entry = new_error(1, "A", "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.code = 2  # type: ignore[misc]


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_unsupported_operation_message(self) -> None:
        """UnsupportedOperationError names the operation."""
        err = UnsupportedOperationError("set_payload")
        assert isinstance(err, ErrorsDomainError)
        assert err.operation == "set_payload"
        assert "set_payload" in err.message

    def test_serialization_error_message(self) -> None:
        """SerializationError keeps the failure reason."""
        err = SerializationError("broken pipe")
        assert err.reason == "broken pipe"
        assert str(err) == "Error response serialization failed: broken pipe"
