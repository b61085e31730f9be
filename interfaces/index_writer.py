"""IndexWriter protocol for HBaseSearch - search index client persisting documents."""

from typing import Protocol

from core.models import Document
from core.types import RowKey


class IndexWriter(Protocol):
    """Abstract protocol for the search index client."""
    
    def add(self, row: RowKey, document: Document) -> None:
        """Add or replace the document of a row."""
        ...
    
    def delete(self, row: RowKey) -> None:
        """Delete the document of a row."""
        ...
