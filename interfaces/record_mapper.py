"""RecordMapper protocol for HBaseSearch - maps stored records to index documents."""

from typing import Any, Dict, List, Protocol

from core.models import Cell, Document, FetchDescriptor, Record
from core.types import BytesLike


class RecordMapper(Protocol):
    """Abstract protocol for turning records into index documents.
    
    Implementations are immutable once constructed and safe for concurrent
    use by many workers.
    """
    
    def parse(self, record: Record) -> Dict[str, List[Any]]:
        """Parse a record into field names and their ordered values."""
        ...
    
    def map(self, record: Record) -> Document:
        """Map a record into an index document."""
        ...
    
    def is_relevant(self, cell: Cell) -> bool:
        """Check whether a changed cell could affect the indexed document."""
        ...
    
    def get_fetch_descriptor(self, row: BytesLike) -> FetchDescriptor:
        """Get the columns to fetch in order to map the given row."""
        ...
