"""Column extractors for HBaseSearch - concrete ByteArrayExtractor implementations."""

from abc import ABC, abstractmethod
from typing import List, Optional

from core.models import Cell, ColumnAddress, FixedColumn, Record
from core.types import ValueSource

from .column_expression import parse_column_expression


class ColumnExtractorBase(ABC):
    """Base extractor with shared applicability and value-source handling."""

    def __init__(self, address: ColumnAddress, value_source: ValueSource = ValueSource.VALUE):
        """Initialize extractor.

        Args:
            address: Column address to read
            value_source: Part of the matching cells to return
        """
        self._address = address
        self._value_source = value_source

    @property
    def address(self) -> ColumnAddress:
        """Column address this extractor reads."""
        return self._address

    @property
    def value_source(self) -> ValueSource:
        """Part of the matching cells that is returned."""
        return self._value_source

    @property
    def column_family(self) -> bytes:
        """Column family addressed by this extractor."""
        return self._address.family

    @property
    def column_qualifier(self) -> Optional[bytes]:
        """Fixed qualifier, or None when several qualifiers are addressed."""
        return None

    def is_applicable(self, cell: Cell) -> bool:
        """Check whether a cell is addressed by this extractor."""
        return self._address.matches(cell.family, cell.qualifier)

    @abstractmethod
    def extract(self, record: Record) -> List[bytes]:
        """Extract the raw values of the field from a record."""
        ...

    def _emit(self, cell: Cell) -> bytes:
        if self._value_source is ValueSource.QUALIFIER:
            return cell.qualifier
        return cell.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._address}, {self._value_source.value})"


class SingleColumnExtractor(ColumnExtractorBase):
    """Extracts the value of one fixed column."""

    def __init__(self, address: FixedColumn, value_source: ValueSource = ValueSource.VALUE):
        super().__init__(address, value_source)

    @property
    def column_qualifier(self) -> Optional[bytes]:
        return self._address.qualifier

    def extract(self, record: Record) -> List[bytes]:
        cell = record.get_cell(self._address.family, self._address.qualifier)
        if cell is None:
            return []
        return [self._emit(cell)]


class FamilyExtractor(ColumnExtractorBase):
    """Extracts every matching qualifier of one family.

    Covers both the whole-family wildcard and qualifier prefixes.
    """

    def extract(self, record: Record) -> List[bytes]:
        return [
            self._emit(cell)
            for cell in record.get_family_cells(self._address.family)
            if self._address.matches(cell.family, cell.qualifier)
        ]


def create_extractor(
    expression: str,
    value_source: ValueSource = ValueSource.VALUE
) -> ColumnExtractorBase:
    """Create the extractor for a column expression.

    Args:
        expression: Column expression, e.g. "content:title" or "meta:*"
        value_source: Part of the matching cells to return

    Returns:
        SingleColumnExtractor for fixed columns, FamilyExtractor otherwise

    Raises:
        ConfigurationError: If the expression cannot be parsed
    """
    address = parse_column_expression(expression)
    if isinstance(address, FixedColumn):
        return SingleColumnExtractor(address, value_source)
    return FamilyExtractor(address, value_source)
