"""HBaseSearch test package."""

__version__ = "1.0.0"

from core.models import Cell, FieldDefinition, Record
from core.types import ValueSource


# Test utilities
def make_record(row, *cells) -> Record:
    """Create a record from (family, qualifier, value) triples."""
    return Record.from_cells(row, [Cell(family, qualifier, value) for family, qualifier, value in cells])


def make_field(name: str, expression: str, type_name: str = "string", source: str = "value") -> FieldDefinition:
    """Create a field definition with short arguments."""
    return FieldDefinition(
        name=name,
        value_expression=expression,
        value_source=ValueSource.from_string(source),
        type_name=type_name,
    )
