"""HBaseSearch - Maps stored table records to multi-valued search index documents."""

__version__ = "1.0.0"
__description__ = "Maps stored table records to multi-valued search index documents"

# Import modules only when needed to avoid dependency issues during setup
__all__ = [
    "MapperConfig",
    "setup_logging",
    "create_record_mapper",
]

def __getattr__(name: str):
    """Lazy import to avoid dependency issues during setup."""
    if name == "MapperConfig":
        from .core.config import MapperConfig
        return MapperConfig
    elif name == "setup_logging":
        from .logging_setup import setup_logging
        return setup_logging
    elif name == "create_record_mapper":
        from registry import create_record_mapper
        return create_record_mapper
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
