"""HBaseSearch Column Domain Models - Column addresses and the fetch descriptor.

A column address says which cells of a record an extractor reads. It is a
tagged variant: a single fixed column, a whole family, or the qualifiers of
a family that share a prefix. The FetchDescriptor is the union of the
addresses of every configured field and tells the storage layer which
columns to retrieve.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple, Union

from ..types import BytesLike, ColumnFamily, ColumnQualifier, to_bytes
from .record import Record


@dataclass(frozen=True)
class FixedColumn:
    """Address of exactly one column."""
    
    family: ColumnFamily
    qualifier: ColumnQualifier
    
    def matches(self, family: bytes, qualifier: bytes) -> bool:
        """Return True if the column is this exact column."""
        return family == self.family and qualifier == self.qualifier
    
    @property
    def fetch_entry(self) -> Tuple[bytes, ...]:
        return (self.family, self.qualifier)
    
    def __str__(self) -> str:
        return f"{_show(self.family)}:{_show(self.qualifier)}"


@dataclass(frozen=True)
class WholeFamily:
    """Address of every qualifier under one family."""
    
    family: ColumnFamily
    
    def matches(self, family: bytes, qualifier: bytes) -> bool:
        """Return True for any column in this family."""
        return family == self.family
    
    @property
    def fetch_entry(self) -> Tuple[bytes, ...]:
        return (self.family,)
    
    def __str__(self) -> str:
        return f"{_show(self.family)}:*"


@dataclass(frozen=True)
class QualifierPrefix:
    """Address of the qualifiers of one family starting with a prefix."""
    
    family: ColumnFamily
    prefix: bytes
    
    def matches(self, family: bytes, qualifier: bytes) -> bool:
        """Return True for columns in this family whose qualifier has the prefix."""
        return family == self.family and qualifier.startswith(self.prefix)
    
    @property
    def fetch_entry(self) -> Tuple[bytes, ...]:
        # Prefix filtering happens client side, the whole family is fetched
        return (self.family,)
    
    def __str__(self) -> str:
        return f"{_show(self.family)}:{_show(self.prefix)}*"


ColumnAddress = Union[FixedColumn, WholeFamily, QualifierPrefix]


def _show(value: bytes) -> str:
    return value.decode("utf-8", errors="backslashreplace")


@dataclass(frozen=True)
class FetchDescriptor:
    """Immutable set of families and columns a mapper needs fetched.
    
    The descriptor is exactly the union of the configured addresses: a
    fixed column stays listed even if its family is also fetched whole.
    
    Attributes:
        families: Families fetched completely
        columns: Individual (family, qualifier) columns
    """
    
    families: FrozenSet[bytes] = field(default_factory=frozenset)
    columns: FrozenSet[Tuple[bytes, bytes]] = field(default_factory=frozenset)
    
    @classmethod
    def from_addresses(cls, addresses: Iterable[ColumnAddress]) -> "FetchDescriptor":
        """Build the descriptor as the union of the given addresses."""
        families = set()
        columns = set()
        for address in addresses:
            entry = address.fetch_entry
            if len(entry) == 1:
                families.add(entry[0])
            else:
                columns.add((entry[0], entry[1]))
        return cls(families=frozenset(families), columns=frozenset(columns))
    
    @property
    def is_empty(self) -> bool:
        """Return True if nothing needs to be fetched."""
        return not self.families and not self.columns
    
    def covers(self, family: BytesLike, qualifier: BytesLike) -> bool:
        """Return True if fetching this descriptor retrieves the column."""
        family = to_bytes(family)
        qualifier = to_bytes(qualifier)
        return family in self.families or (family, qualifier) in self.columns
    
    def restrict(self, record: Record) -> Record:
        """Drop the cells of a record this descriptor would not have fetched."""
        return Record(
            row=record.row,
            cells=tuple(cell for cell in record.cells if self.covers(cell.family, cell.qualifier)),
        )
    
    def __str__(self) -> str:
        parts = sorted(f"{_show(f)}:*" for f in self.families)
        parts += sorted(f"{_show(f)}:{_show(q)}" for f, q in self.columns)
        return f"FetchDescriptor({', '.join(parts)})"
