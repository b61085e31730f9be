"""HBaseSearch Core Types - Common type definitions and aliases.

This module contains the type aliases and enums shared by the record mapping
core: row and column identifiers, field and type names, and the source a
field takes its raw bytes from.
"""

from enum import Enum
from typing import NewType, Union


# Byte-based identifiers as stored in the table
RowKey = NewType("RowKey", bytes)                  # Row identity
ColumnFamily = NewType("ColumnFamily", bytes)      # e.g., b"content"
ColumnQualifier = NewType("ColumnQualifier", bytes)  # e.g., b"title"

# String-based names from the field configuration
FieldName = NewType("FieldName", str)    # Target index field name
TypeName = NewType("TypeName", str)      # e.g., "string", "long"

# Accepted wherever a byte identifier is expected
BytesLike = Union[bytes, bytearray, memoryview, str]


class ValueSource(Enum):
    """Part of a matching cell that becomes the raw field value."""

    VALUE = "value"
    QUALIFIER = "qualifier"

    @classmethod
    def from_string(cls, value: Union[str, "ValueSource", None]) -> "ValueSource":
        """Convert string to ValueSource, defaulting to VALUE when unset.

        Raises:
            ValueError: If the name is not a known value source
        """
        if isinstance(value, ValueSource):
            return value
        if value is None or not str(value).strip():
            return cls.VALUE
        return cls(str(value).strip().lower())


def to_bytes(value: BytesLike) -> bytes:
    """Normalize a byte identifier; strings are encoded as UTF-8."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected bytes or str, got {type(value).__name__}")
