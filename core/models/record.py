"""HBaseSearch Record Domain Model - A stored row and its cells.

This module contains the Cell and Record models handed to the mapper by the
storage layer. Both are immutable; extraction reads them and never changes
them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..types import BytesLike, ColumnFamily, ColumnQualifier, RowKey, to_bytes
from ..exceptions import ValidationError


@dataclass(frozen=True)
class Cell:
    """One (family, qualifier, value) triple of a stored row.
    
    Identifiers given as strings are encoded as UTF-8 so that callers and
    tests can write ``Cell("content", "title", "Hello")``.
    
    Attributes:
        family: Column family
        qualifier: Column qualifier
        value: Raw stored bytes
        timestamp: Optional cell version timestamp
    """
    
    family: ColumnFamily
    qualifier: ColumnQualifier
    value: bytes = b""
    timestamp: Optional[int] = None
    
    def __post_init__(self):
        """Normalize identifiers to bytes and validate."""
        try:
            object.__setattr__(self, "family", ColumnFamily(to_bytes(self.family)))
            object.__setattr__(self, "qualifier", ColumnQualifier(to_bytes(self.qualifier)))
            object.__setattr__(self, "value", to_bytes(self.value))
        except TypeError as e:
            raise ValidationError("cell", (self.family, self.qualifier), str(e))
        
        if not self.family:
            raise ValidationError("family", self.family, "Column family cannot be empty")
    
    @property
    def column(self) -> Tuple[bytes, bytes]:
        """Get the (family, qualifier) pair of this cell."""
        return (self.family, self.qualifier)
    
    def __repr__(self) -> str:
        return f"Cell({self.family!r}, {self.qualifier!r}, {self.value!r})"


@dataclass(frozen=True)
class Record:
    """Domain model representing one stored row.
    
    Cells keep the order the storage layer returned them in. When a
    column appears more than once (several versions), the first cell wins,
    matching stores that list the newest version first.
    
    Attributes:
        row: Row key
        cells: Cells of the row
    """
    
    row: RowKey
    cells: Tuple[Cell, ...] = field(default_factory=tuple)
    
    def __post_init__(self):
        """Normalize the row key and freeze the cell sequence."""
        try:
            object.__setattr__(self, "row", RowKey(to_bytes(self.row)))
        except TypeError as e:
            raise ValidationError("row", self.row, str(e))
        object.__setattr__(self, "cells", tuple(self.cells))
        
        for cell in self.cells:
            if not isinstance(cell, Cell):
                raise ValidationError("cells", cell, "Record cells must be Cell instances")
    
    @classmethod
    def from_cells(cls, row: BytesLike, cells: Iterable[Cell]) -> "Record":
        """Create a record from a row key and any iterable of cells."""
        return cls(row=RowKey(to_bytes(row)), cells=tuple(cells))
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        """Create a record from ``{"row": ..., "cells": [[family, qualifier, value], ...]}``.
        
        Raises:
            ValidationError: If the row key is missing or a cell is malformed
        """
        row = data.get("row")
        if row is None:
            raise ValidationError("row", row, "Row key is required")
        
        cells = []
        for entry in data.get("cells", []):
            if isinstance(entry, dict):
                cells.append(Cell(
                    family=entry.get("family"),
                    qualifier=entry.get("qualifier", b""),
                    value=entry.get("value", b""),
                    timestamp=entry.get("timestamp"),
                ))
            else:
                try:
                    family, qualifier, value = entry
                except (TypeError, ValueError):
                    raise ValidationError("cells", entry, "Cell must be a (family, qualifier, value) triple")
                cells.append(Cell(family, qualifier, value))
        
        return cls.from_cells(row, cells)
    
    @property
    def is_empty(self) -> bool:
        """Return True if the record holds no cells."""
        return not self.cells
    
    def get_cell(self, family: BytesLike, qualifier: BytesLike) -> Optional[Cell]:
        """Get the first cell stored under a column, or None."""
        family = to_bytes(family)
        qualifier = to_bytes(qualifier)
        for cell in self.cells:
            if cell.family == family and cell.qualifier == qualifier:
                return cell
        return None
    
    def get_value(self, family: BytesLike, qualifier: BytesLike) -> Optional[bytes]:
        """Get the value stored under a column, or None."""
        cell = self.get_cell(family, qualifier)
        return cell.value if cell is not None else None
    
    def get_family_cells(self, family: BytesLike) -> List[Cell]:
        """Get the cells of one family, one per qualifier, in record order."""
        family = to_bytes(family)
        seen = set()
        cells = []
        for cell in self.cells:
            if cell.family == family and cell.qualifier not in seen:
                seen.add(cell.qualifier)
                cells.append(cell)
        return cells
    
    def __len__(self) -> int:
        return len(self.cells)
