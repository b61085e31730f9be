"""RecordStore protocol for HBaseSearch - storage layer supplying records."""

from typing import Optional, Protocol

from core.models import FetchDescriptor, Record
from core.types import RowKey


class RecordStore(Protocol):
    """Abstract protocol for the storage client that fetches records."""
    
    def fetch(self, row: RowKey, descriptor: FetchDescriptor) -> Optional[Record]:
        """Fetch one row restricted to the descriptor's columns.
        
        Args:
            row: Row key to fetch
            descriptor: Families and columns to retrieve
            
        Returns:
            The record, or None if the row does not exist
        """
        ...
