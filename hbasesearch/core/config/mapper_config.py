"""
Mapper configuration for HBaseSearch.

This module provides a type-safe, validated configuration model for the
record mapper. Field lists arrive already parsed (from whatever source the
caller reads them) as runtime parameters or as a JSON list in the
HBASESEARCH_FIELDS environment variable.
"""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError, ValidationError
from core.models import FieldDefinition
from core.types import FieldName, TypeName, ValueSource


class FieldConfig(BaseModel):
    """Configuration of one index field."""

    name: str = Field(
        ...,
        min_length=1,
        description="Target field name in the index document"
    )

    value: str = Field(
        ...,
        min_length=1,
        description="Column expression, e.g. 'content:title' or 'meta:*'"
    )

    source: Optional[Literal['value', 'qualifier']] = Field(
        default=None,
        description="Part of the matching cells to index (uses default_source if not specified)"
    )

    type: Optional[str] = Field(
        default=None,
        description="Value type name (uses default_type if not specified)"
    )


class MapperConfig(BaseSettings):
    """
    Configuration for the record mapper.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Environment variables (HBASESEARCH_*)
    3. Default values (lowest priority)

    Environment Variable Examples:
        HBASESEARCH_DEFAULT_TYPE=string
        HBASESEARCH_DEFAULT_SOURCE=value
        HBASESEARCH_FIELDS='[{"name": "title", "value": "content:title"}]'
        HBASESEARCH_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix='HBASESEARCH_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
    )

    fields: List[FieldConfig] = Field(
        default_factory=list,
        description="Index fields in evaluation order"
    )

    default_type: str = Field(
        default='string',
        description="Type name for fields that do not declare one"
    )

    default_source: Literal['value', 'qualifier'] = Field(
        default='value',
        description="Value source for fields that do not declare one"
    )

    debug: bool = Field(
        default=False,
        description="Log at DEBUG level, including every configured field"
    )

    @field_validator('default_type')
    def validate_default_type(cls, v: str) -> str:
        """Validate the default type name is not blank."""
        if not v.strip():
            raise ValueError("default_type cannot be empty")
        return v.strip()

    def field_definitions(self) -> List[FieldDefinition]:
        """
        Convert the configured fields into field definitions.

        Returns:
            Field definitions in configuration order

        Raises:
            ConfigurationError: If a field cannot be represented
        """
        definitions = []
        for field_config in self.fields:
            try:
                definitions.append(FieldDefinition(
                    name=FieldName(field_config.name),
                    value_expression=field_config.value,
                    value_source=ValueSource.from_string(field_config.source or self.default_source),
                    type_name=TypeName(field_config.type or self.default_type),
                ))
            except ValidationError as e:
                raise ConfigurationError(
                    field_config.name, field_config.value, e.reason, cause=e
                )
        return definitions

    def create_record_mapper(self, registry: Any = None):
        """
        Build a record mapper for the configured fields.

        Args:
            registry: Optional ValueMapperRegistry, built-in types when omitted

        Returns:
            Configured RecordToDocumentMapper instance
        """
        from registry import create_record_mapper

        return create_record_mapper(self.field_definitions(), registry)

    def configure_logging(self) -> None:
        """
        Install the log sink for this configuration.

        Debug mode also shows DEBUG messages, such as each configured
        field, with source locations; otherwise INFO and above are shown.
        """
        from hbasesearch.logging_setup import setup_logging

        setup_logging(verbose=self.debug)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert configuration to dictionary format.

        Returns:
            Configuration as dictionary
        """
        return self.model_dump(mode='json', exclude_none=True)

    def __repr__(self) -> str:
        return (
            f"MapperConfig("
            f"fields={[f.name for f in self.fields]}, "
            f"default_type={self.default_type}, "
            f"default_source={self.default_source})"
        )
