"""Providers package for HBaseSearch - concrete implementations of the mapper interfaces."""

from .extraction import FamilyExtractor, SingleColumnExtractor, create_extractor
from .mapping import StringValueMapper

__all__ = [
    # Extraction providers
    "SingleColumnExtractor",
    "FamilyExtractor",
    "create_extractor",

    # Mapping providers
    "StringValueMapper",
]
