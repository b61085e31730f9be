"""Interfaces package for HBaseSearch - abstract protocols for mapper components and collaborators."""

from .index_writer import IndexWriter
from .record_mapper import RecordMapper
from .record_store import RecordStore
from .value_extractor import ByteArrayExtractor
from .value_mapper import ByteArrayValueMapper
from .value_transformer import IndexValueTransformer

__all__ = [
    "ByteArrayExtractor",
    "ByteArrayValueMapper",
    "IndexValueTransformer",
    "RecordMapper",
    "RecordStore",
    "IndexWriter",
]
