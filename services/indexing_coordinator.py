"""Indexing coordinator service for HBaseSearch - routes row mutations to the search index."""

from typing import Any, Dict, Iterable, List, Tuple

from loguru import logger

from core.models import Cell
from core.types import BytesLike, RowKey, to_bytes
from interfaces.index_writer import IndexWriter
from interfaces.record_mapper import RecordMapper
from interfaces.record_store import RecordStore
from .base_service import BaseService


class IndexingCoordinator(BaseService):
    """Coordinates re-indexing of rows whose cells changed.

    Changed cells are checked against the mapper first, so rows whose
    mutations cannot affect the document are never fetched. Store and
    writer errors propagate to the caller; nothing is retried here.
    """

    def __init__(
        self,
        record_mapper: RecordMapper,
        record_store: RecordStore,
        index_writer: IndexWriter
    ):
        """Initialize indexing coordinator.

        Args:
            record_mapper: Mapper turning records into documents
            record_store: Storage client fetching rows
            index_writer: Search index client persisting documents
        """
        super().__init__(record_mapper)
        self._store = record_store
        self._writer = index_writer

    def process_row(self, row: BytesLike, changed_cells: Iterable[Cell]) -> Dict[str, Any]:
        """Re-index one row after some of its cells changed.

        Args:
            row: Row key of the changed row
            changed_cells: Cells that changed in the row

        Returns:
            Dictionary with the processing status ("indexed", "deleted" or
            "skipped") and the number of indexed fields
        """
        row_key = RowKey(to_bytes(row))

        if not self.filter_relevant(changed_cells):
            logger.debug(f"Skipping row {row_key!r}: no relevant cell changed")
            return {"status": "skipped", "row": row_key, "fields": 0}

        descriptor = self._mapper.get_fetch_descriptor(row_key)
        record = self._store.fetch(row_key, descriptor)

        if record is None or record.is_empty:
            self._writer.delete(row_key)
            logger.debug(f"Deleted document of row {row_key!r}")
            return {"status": "deleted", "row": row_key, "fields": 0}

        document = self._mapper.map(record)
        self._writer.add(row_key, document)
        logger.debug(f"Indexed row {row_key!r} with {len(document)} fields")
        return {"status": "indexed", "row": row_key, "fields": len(document)}

    def process_mutations(self, mutations: Iterable[Tuple[BytesLike, Cell]]) -> Dict[str, int]:
        """Re-index every row touched by a batch of mutations.

        Rows are processed once each, in the order they first appear.

        Args:
            mutations: (row key, changed cell) pairs

        Returns:
            Counts of processed, indexed, deleted and skipped rows
        """
        cells_by_row: Dict[bytes, List[Cell]] = {}
        for row, cell in mutations:
            cells_by_row.setdefault(to_bytes(row), []).append(cell)

        stats = {"rows": 0, "indexed": 0, "deleted": 0, "skipped": 0}
        for row, row_cells in cells_by_row.items():
            result = self.process_row(row, row_cells)
            stats["rows"] += 1
            stats[result["status"]] += 1

        logger.info(
            f"Processed {stats['rows']} rows: {stats['indexed']} indexed, "
            f"{stats['deleted']} deleted, {stats['skipped']} skipped"
        )
        return stats
