"""Extraction providers package for HBaseSearch - column expression parsing and extractors."""

from .column_expression import parse_column_expression
from .column_extractors import (
    ColumnExtractorBase,
    FamilyExtractor,
    SingleColumnExtractor,
    create_extractor,
)

__all__ = [
    "parse_column_expression",
    "ColumnExtractorBase",
    "SingleColumnExtractor",
    "FamilyExtractor",
    "create_extractor",
]
