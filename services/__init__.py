"""Service layer for HBaseSearch - record mapping and indexing coordination."""

from .base_service import BaseService
from .indexing_coordinator import IndexingCoordinator
from .record_mapper import RecordToDocumentMapper
from .value_transformer import RecordValueTransformer

__all__ = [
    'BaseService',
    'RecordValueTransformer',
    'RecordToDocumentMapper',
    'IndexingCoordinator',
]
