"""HBaseSearch Document Domain Model - Index document handed to the search index.

A Document maps field names to the ordered values of that field. Every
added value is a separate occurrence of the field, so multi-valued fields
are supported natively.
"""

from typing import Any, Dict, Iterator, List, Optional


class Document:
    """Field-name to repeated-value structure consumed by an index writer."""
    
    def __init__(self, fields: Optional[Dict[str, List[Any]]] = None):
        """Initialize document.
        
        Args:
            fields: Optional initial field values, copied
        """
        self._fields: Dict[str, List[Any]] = {}
        for name, values in (fields or {}).items():
            for value in values:
                self.add_field(name, value)
    
    def add_field(self, name: str, value: Any) -> None:
        """Add one occurrence of a field."""
        self._fields.setdefault(name, []).append(value)
    
    def get_values(self, name: str) -> List[Any]:
        """Get all values of a field, empty if absent."""
        return list(self._fields.get(name, []))
    
    def get_first_value(self, name: str) -> Optional[Any]:
        """Get the first value of a field, or None."""
        values = self._fields.get(name)
        return values[0] if values else None
    
    @property
    def field_names(self) -> List[str]:
        """Get field names in insertion order."""
        return list(self._fields)
    
    def to_dict(self) -> Dict[str, List[Any]]:
        """Convert document to a plain dictionary of value lists."""
        return {name: list(values) for name, values in self._fields.items()}
    
    def __contains__(self, name: object) -> bool:
        return name in self._fields
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)
    
    def __len__(self) -> int:
        return len(self._fields)
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._fields == other._fields
    
    def __repr__(self) -> str:
        return f"Document({self._fields!r})"
