"""HBaseSearch FieldDefinition Domain Model - Declares one target index field.

A FieldDefinition names an index field, the column expression its raw bytes
are read from, which part of the matching cells is used, and the type name
the bytes are decoded as. Definitions are created by the configuration
loader and never mutated afterwards.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..types import FieldName, TypeName, ValueSource
from ..exceptions import ValidationError


DEFAULT_TYPE_NAME = TypeName("string")


@dataclass(frozen=True)
class FieldDefinition:
    """Domain model representing one configured index field.
    
    Attributes:
        name: Target field name in the index document
        value_expression: Column expression, e.g. "content:title" or "meta:*"
        value_source: Whether cell values or qualifiers become field values
        type_name: Name of the value mapper decoding the raw bytes
    """
    
    name: FieldName
    value_expression: str
    value_source: ValueSource = ValueSource.VALUE
    type_name: TypeName = DEFAULT_TYPE_NAME
    
    def __post_init__(self):
        """Validate field definition after initialization."""
        self._validate()
    
    def _validate(self) -> None:
        """Validate field definition attributes."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("name", self.name, "Field name must be a non-empty string")
        
        if not isinstance(self.value_expression, str) or not self.value_expression.strip():
            raise ValidationError(
                "value_expression", self.value_expression, "Value expression must be a non-empty string"
            )
        
        if not isinstance(self.value_source, ValueSource):
            raise ValidationError(
                "value_source", self.value_source, "Value source must be a ValueSource"
            )
        
        if not isinstance(self.type_name, str) or not self.type_name.strip():
            raise ValidationError("type_name", self.type_name, "Type name must be a non-empty string")
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldDefinition":
        """Create a FieldDefinition from a configuration dictionary.
        
        Both the short configuration keys ("value", "source", "type") and the
        attribute names are accepted.
        
        Args:
            data: Dictionary containing field definition data
            
        Returns:
            FieldDefinition created from dictionary data
            
        Raises:
            ValidationError: If required fields are missing or invalid
        """
        name = data.get("name")
        if not name:
            raise ValidationError("name", name, "Field name is required")
        
        expression = data.get("value_expression", data.get("value"))
        if not expression:
            raise ValidationError("value_expression", expression, "Value expression is required")
        
        source_value = data.get("value_source", data.get("source"))
        try:
            value_source = ValueSource.from_string(source_value)
        except ValueError as e:
            raise ValidationError("value_source", source_value, str(e))
        
        type_name = data.get("type_name", data.get("type")) or DEFAULT_TYPE_NAME
        
        return cls(
            name=FieldName(str(name)),
            value_expression=str(expression),
            value_source=value_source,
            type_name=TypeName(str(type_name)),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert field definition to dictionary representation."""
        return {
            "name": self.name,
            "value_expression": self.value_expression,
            "value_source": self.value_source.value,
            "type_name": self.type_name,
        }
    
    def __str__(self) -> str:
        """Return a short description of the field definition."""
        return f"{self.name} <- {self.value_expression} ({self.value_source.value}, {self.type_name})"
