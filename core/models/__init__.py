"""HBaseSearch Core Models Package - Domain model definitions.

This package contains the domain models of the record mapping core:
- FieldDefinition, the configured description of one index field
- Cell and Record, the stored data handed in by the storage layer
- Column addresses and the FetchDescriptor derived from them
- Document, the multi-valued structure handed to the search index

Everything except Document is an immutable dataclass, so a constructed
mapper can be shared between threads without locking.
"""

from .field_definition import DEFAULT_TYPE_NAME, FieldDefinition
from .record import Cell, Record
from .column import ColumnAddress, FetchDescriptor, FixedColumn, QualifierPrefix, WholeFamily
from .document import Document

__all__ = [
    "FieldDefinition",
    "DEFAULT_TYPE_NAME",
    "Cell",
    "Record",
    "ColumnAddress",
    "FixedColumn",
    "WholeFamily",
    "QualifierPrefix",
    "FetchDescriptor",
    "Document",
]
