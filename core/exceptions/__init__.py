"""HBaseSearch Core Exceptions Package - Core exception classes for error handling.

This package contains the exception hierarchy for the record mapping core.
The hierarchy separates two failure modes:
- Configuration failures, fatal and raised while a mapper is built
- Decoding failures, recoverable and isolated to a single cell value
"""

from .core import (
    ConfigurationError,
    HBaseSearchError,
    ValidationError,
    ValueDecodingError,
)

__all__ = [
    # Base exception
    "HBaseSearchError",

    # Domain-specific exceptions
    "ValidationError",
    "ConfigurationError",
    "ValueDecodingError",
]
