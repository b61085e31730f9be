"""HBaseSearch Core Types Package - Common type definitions and aliases.

The types are organized into logical groups:
- Byte identifiers for rows and columns
- Names coming from the field configuration
- The value source enumeration
"""

from .common import (
    BytesLike,
    ColumnFamily,
    ColumnQualifier,
    FieldName,
    RowKey,
    TypeName,
    ValueSource,
    to_bytes,
)

__all__ = [
    # Enums
    "ValueSource",

    # Byte identifiers
    "RowKey",
    "ColumnFamily",
    "ColumnQualifier",
    "BytesLike",

    # String types
    "FieldName",
    "TypeName",

    # Helpers
    "to_bytes",
]
