"""
Configuration management package for HBaseSearch.

This package provides type-safe mapper settings validated with Pydantic,
loaded from runtime parameters and HBASESEARCH_* environment variables.
"""

from .mapper_config import FieldConfig, MapperConfig

__all__ = [
    "FieldConfig",
    "MapperConfig",
]
