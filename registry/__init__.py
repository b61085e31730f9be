"""Value mapper registry and record mapper factory for HBaseSearch."""

from typing import Dict, Iterable, List, Optional, Sequence

from loguru import logger

from core.exceptions import ConfigurationError
from core.models import FieldDefinition
from interfaces.value_mapper import ByteArrayValueMapper
from providers.mapping import (
    BinaryValueMapper,
    BooleanValueMapper,
    DateValueMapper,
    DecimalValueMapper,
    DoubleValueMapper,
    FloatValueMapper,
    IntegerValueMapper,
    LongValueMapper,
    ShortValueMapper,
    StringValueMapper,
)
from services.record_mapper import RecordToDocumentMapper


class ValueMapperRegistry:
    """Registry resolving type names to value mappers.

    A registry is built once at process start and handed to every record
    mapper built afterwards. Type names are case-insensitive. Mappers are
    stateless, so one instance per type is shared by all fields.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._mappers: Dict[str, ByteArrayValueMapper] = {}

    def register(
        self,
        type_name: str,
        mapper: ByteArrayValueMapper,
        aliases: Iterable[str] = ()
    ) -> None:
        """Register a value mapper for a type name.

        Args:
            type_name: Type name used in field definitions
            mapper: Mapper instance decoding values of this type
            aliases: Additional names resolving to the same mapper
        """
        for name in (type_name, *aliases):
            key = self._normalize(name)
            if not key:
                raise ConfigurationError("type_name", name, "Type name cannot be empty")
            if key in self._mappers:
                logger.debug(f"Replacing value mapper for type '{key}'")
            self._mappers[key] = mapper

        logger.debug(f"Registered {type(mapper).__name__} as {type_name}")

    def get_mapper(self, type_name: str) -> ByteArrayValueMapper:
        """Get the value mapper for a type name.

        Args:
            type_name: Type name from a field definition

        Returns:
            Shared mapper instance

        Raises:
            ConfigurationError: If no mapper is registered for the name
        """
        key = self._normalize(type_name)
        if key not in self._mappers:
            raise ConfigurationError(
                "type_name", type_name,
                f"Unknown type '{type_name}', expected one of: {', '.join(self.type_names)}"
            )
        return self._mappers[key]

    def has_mapper(self, type_name: str) -> bool:
        """Check whether a type name is registered."""
        return self._normalize(type_name) in self._mappers

    @property
    def type_names(self) -> List[str]:
        """Get all registered type names, aliases included, sorted."""
        return sorted(self._mappers)

    @staticmethod
    def _normalize(type_name: Optional[str]) -> str:
        return (type_name or "").strip().lower()


def create_default_registry() -> ValueMapperRegistry:
    """Create a registry holding the built-in value mappers.

    Returns:
        New registry; callers may register custom types before use
    """
    registry = ValueMapperRegistry()
    registry.register("string", StringValueMapper())
    registry.register("integer", IntegerValueMapper(), aliases=("int",))
    registry.register("long", LongValueMapper())
    registry.register("short", ShortValueMapper())
    registry.register("float", FloatValueMapper())
    registry.register("double", DoubleValueMapper())
    registry.register("boolean", BooleanValueMapper())
    registry.register("date", DateValueMapper())
    registry.register("decimal", DecimalValueMapper(), aliases=("bigdecimal",))
    registry.register("binary", BinaryValueMapper())
    return registry


def create_record_mapper(
    field_definitions: Sequence[FieldDefinition],
    registry: Optional[ValueMapperRegistry] = None
) -> RecordToDocumentMapper:
    """Create a record mapper for field definitions.

    Args:
        field_definitions: Ordered definitions of the fields to index
        registry: Value mapper registry, the built-in types when omitted

    Returns:
        Configured RecordToDocumentMapper instance

    Raises:
        ConfigurationError: If any expression or type name is invalid
    """
    return RecordToDocumentMapper(field_definitions, registry or create_default_registry())


__all__ = [
    'ValueMapperRegistry',
    'create_default_registry',
    'create_record_mapper',
]
