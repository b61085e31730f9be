"""Mapping providers package for HBaseSearch - built-in byte value mappers."""

from .byte_mappers import (
    BinaryValueMapper,
    BooleanValueMapper,
    ByteValueMapperBase,
    DateValueMapper,
    DecimalValueMapper,
    DoubleValueMapper,
    FloatValueMapper,
    IntegerValueMapper,
    LongValueMapper,
    ShortValueMapper,
    StringValueMapper,
)

__all__ = [
    "ByteValueMapperBase",
    "StringValueMapper",
    "IntegerValueMapper",
    "LongValueMapper",
    "ShortValueMapper",
    "FloatValueMapper",
    "DoubleValueMapper",
    "BooleanValueMapper",
    "DateValueMapper",
    "DecimalValueMapper",
    "BinaryValueMapper",
]
