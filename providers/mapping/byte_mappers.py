"""Built-in byte value mappers for HBaseSearch.

Encodings follow the HBase ``Bytes`` utility: numbers are big-endian,
strings UTF-8, booleans a single byte and dates epoch milliseconds stored
as a long.
"""

import struct
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

from core.exceptions import ValueDecodingError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ByteValueMapperBase:
    """Base class for value mappers; subclasses implement ``_decode``."""

    type_name = "binary"

    def map(self, raw: bytes) -> Any:
        """Decode raw bytes, raising ValueDecodingError on malformed input."""
        if raw is None:
            raise ValueDecodingError(self.type_name, raw, "No value")
        try:
            return self._decode(bytes(raw))
        except ValueDecodingError:
            raise
        except (ValueError, TypeError, ArithmeticError, struct.error) as e:
            raise ValueDecodingError(self.type_name, raw, str(e), cause=e)

    def _decode(self, raw: bytes) -> Any:
        return raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BinaryValueMapper(ByteValueMapperBase):
    """Returns the stored bytes unchanged."""

    type_name = "binary"


class StringValueMapper(ByteValueMapperBase):
    """Decodes UTF-8 text."""

    type_name = "string"

    def _decode(self, raw: bytes) -> str:
        return raw.decode("utf-8")


class FixedWidthValueMapper(ByteValueMapperBase):
    """Decodes a fixed-width struct encoding."""

    fmt = ">q"

    def _decode(self, raw: bytes) -> Any:
        size = struct.calcsize(self.fmt)
        if len(raw) != size:
            raise ValueDecodingError(
                self.type_name, raw, f"Expected {size} bytes, got {len(raw)}"
            )
        return struct.unpack(self.fmt, raw)[0]


class ShortValueMapper(FixedWidthValueMapper):
    type_name = "short"
    fmt = ">h"


class IntegerValueMapper(FixedWidthValueMapper):
    type_name = "integer"
    fmt = ">i"


class LongValueMapper(FixedWidthValueMapper):
    type_name = "long"
    fmt = ">q"


class FloatValueMapper(FixedWidthValueMapper):
    type_name = "float"
    fmt = ">f"


class DoubleValueMapper(FixedWidthValueMapper):
    type_name = "double"
    fmt = ">d"


class BooleanValueMapper(ByteValueMapperBase):
    """Decodes a single byte; any non-zero byte is true."""

    type_name = "boolean"

    def _decode(self, raw: bytes) -> bool:
        if len(raw) != 1:
            raise ValueDecodingError(self.type_name, raw, f"Expected 1 byte, got {len(raw)}")
        return raw[0] != 0


class DateValueMapper(LongValueMapper):
    """Decodes epoch milliseconds into a timezone-aware UTC datetime."""

    type_name = "date"

    def _decode(self, raw: bytes) -> datetime:
        millis = super()._decode(raw)
        return _EPOCH + timedelta(milliseconds=millis)


class DecimalValueMapper(ByteValueMapperBase):
    """Decodes a 4-byte scale followed by the two's-complement unscaled value."""

    type_name = "decimal"

    def _decode(self, raw: bytes) -> Decimal:
        if len(raw) < 5:
            raise ValueDecodingError(
                self.type_name, raw, f"Expected at least 5 bytes, got {len(raw)}"
            )
        scale = struct.unpack(">i", raw[:4])[0]
        unscaled = int.from_bytes(raw[4:], "big", signed=True)
        return Decimal(unscaled).scaleb(-scale)
