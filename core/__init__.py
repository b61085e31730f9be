"""HBaseSearch Core Package - Domain models, types, and exceptions.

This package contains the core domain models and types of the record mapping
core. They are independent of any storage or search-index client.

Modules:
    models: Field definitions, records, column addresses and documents
    types: Common type definitions and aliases
    exceptions: Core exception classes for error handling
"""

from .exceptions import (
    ConfigurationError,
    HBaseSearchError,
    ValidationError,
    ValueDecodingError,
)
from .models import Cell, Document, FetchDescriptor, FieldDefinition, Record
from .types import ValueSource

__all__ = [
    # Domain Models
    "FieldDefinition",
    "Cell",
    "Record",
    "FetchDescriptor",
    "Document",

    # Types
    "ValueSource",

    # Exceptions
    "HBaseSearchError",
    "ValidationError",
    "ConfigurationError",
    "ValueDecodingError",
]

__version__ = "1.0.0"
