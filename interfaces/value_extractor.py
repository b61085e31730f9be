"""ByteArrayExtractor protocol for HBaseSearch - locates raw bytes for one field inside a record."""

from typing import List, Optional, Protocol

from core.models import Cell, ColumnAddress, Record
from core.types import ValueSource


class ByteArrayExtractor(Protocol):
    """Abstract protocol for extracting raw byte values from a record.
    
    An extractor addresses either one fixed column or a set of qualifiers
    under one family. It answers two questions: which raw values of a
    record belong to its field, and whether a single changed cell could
    change them.
    """
    
    @property
    def address(self) -> ColumnAddress:
        """Column address this extractor reads."""
        ...
    
    @property
    def value_source(self) -> ValueSource:
        """Part of the matching cells that is returned."""
        ...
    
    @property
    def column_family(self) -> bytes:
        """Column family addressed by this extractor."""
        ...
    
    @property
    def column_qualifier(self) -> Optional[bytes]:
        """Fixed qualifier, or None when several qualifiers are addressed."""
        ...
    
    def extract(self, record: Record) -> List[bytes]:
        """Extract the raw values of the field from a record.
        
        Args:
            record: Record to read from; never modified
            
        Returns:
            Raw byte values in record order, empty if nothing matches
        """
        ...
    
    def is_applicable(self, cell: Cell) -> bool:
        """Check whether a cell is addressed by this extractor.
        
        Args:
            cell: A single (family, qualifier, value) cell
            
        Returns:
            True if the cell's column is addressed by this extractor
        """
        ...
