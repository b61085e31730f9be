"""Tests for the value mapper registry."""

import struct
from unittest.mock import Mock

import pytest

from core.exceptions import ConfigurationError
from providers.mapping import DecimalValueMapper, IntegerValueMapper, StringValueMapper
from registry import ValueMapperRegistry, create_default_registry


@pytest.fixture
def registry():
    """Create a registry with the built-in mappers."""
    return create_default_registry()


class TestDefaultRegistry:
    """Test the built-in type names."""

    @pytest.mark.parametrize("type_name", [
        "string", "integer", "long", "float", "boolean", "date", "binary",
        "short", "double", "decimal",
    ])
    def test_builtin_types_registered(self, registry, type_name):
        assert registry.has_mapper(type_name)
        assert registry.get_mapper(type_name).type_name == type_name

    def test_aliases(self, registry):
        assert isinstance(registry.get_mapper("int"), IntegerValueMapper)
        assert isinstance(registry.get_mapper("bigdecimal"), DecimalValueMapper)

    def test_lookup_is_case_insensitive(self, registry):
        assert isinstance(registry.get_mapper(" String "), StringValueMapper)
        assert registry.get_mapper("LONG").map(struct.pack(">q", 5)) == 5

    def test_mappers_are_shared(self, registry):
        assert registry.get_mapper("string") is registry.get_mapper("string")
        assert registry.get_mapper("int") is registry.get_mapper("integer")

    def test_unknown_type_raises_configuration_error(self, registry):
        with pytest.raises(ConfigurationError) as exc_info:
            registry.get_mapper("money")
        assert exc_info.value.config_key == "type_name"
        assert exc_info.value.config_value == "money"
        assert "string" in str(exc_info.value)

    def test_registries_are_independent(self):
        first = create_default_registry()
        second = create_default_registry()
        first.register("custom", Mock())
        assert first.has_mapper("custom")
        assert not second.has_mapper("custom")


class TestValueMapperRegistry:
    """Test registering custom mappers."""

    def test_empty_registry(self):
        registry = ValueMapperRegistry()
        assert registry.type_names == []
        with pytest.raises(ConfigurationError):
            registry.get_mapper("string")

    def test_register_with_aliases(self):
        registry = ValueMapperRegistry()
        mapper = Mock()
        registry.register("Geo", mapper, aliases=("location",))
        assert registry.get_mapper("geo") is mapper
        assert registry.get_mapper("location") is mapper
        assert registry.type_names == ["geo", "location"]

    def test_register_replaces_existing(self, registry):
        replacement = Mock()
        registry.register("string", replacement)
        assert registry.get_mapper("string") is replacement

    def test_register_rejects_blank_name(self):
        with pytest.raises(ConfigurationError):
            ValueMapperRegistry().register("  ", Mock())
