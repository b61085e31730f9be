"""Tests for the core domain models."""

import dataclasses

import pytest

from core.exceptions import ValidationError
from core.models import (
    Cell,
    Document,
    FetchDescriptor,
    FieldDefinition,
    FixedColumn,
    QualifierPrefix,
    Record,
    WholeFamily,
)
from core.types import ValueSource
from tests import make_record


class TestFieldDefinition:
    """Test FieldDefinition model."""

    def test_defaults(self):
        definition = FieldDefinition(name="title", value_expression="content:title")
        assert definition.value_source is ValueSource.VALUE
        assert definition.type_name == "string"

    def test_is_immutable(self):
        definition = FieldDefinition(name="title", value_expression="content:title")
        with pytest.raises(dataclasses.FrozenInstanceError):
            definition.name = "other"

    @pytest.mark.parametrize("kwargs,field", [
        ({"name": "", "value_expression": "a:b"}, "name"),
        ({"name": "  ", "value_expression": "a:b"}, "name"),
        ({"name": "title", "value_expression": ""}, "value_expression"),
        ({"name": "title", "value_expression": "a:b", "type_name": ""}, "type_name"),
        ({"name": "title", "value_expression": "a:b", "value_source": "value"}, "value_source"),
        ({"name": 1, "value_expression": "a:b"}, "name"),
        ({"name": "title", "value_expression": 42}, "value_expression"),
        ({"name": "title", "value_expression": "a:b", "type_name": None}, "type_name"),
    ])
    def test_validation(self, kwargs, field):
        with pytest.raises(ValidationError) as exc_info:
            FieldDefinition(**kwargs)
        assert exc_info.value.field == field

    def test_from_dict_short_keys(self):
        definition = FieldDefinition.from_dict(
            {"name": "tags", "value": "meta:*", "source": "qualifier", "type": "string"}
        )
        assert definition == FieldDefinition("tags", "meta:*", ValueSource.QUALIFIER, "string")

    def test_from_dict_attribute_keys(self):
        definition = FieldDefinition.from_dict({
            "name": "count",
            "value_expression": "stats:count",
            "value_source": "VALUE",
            "type_name": "long",
        })
        assert definition.value_source is ValueSource.VALUE
        assert definition.type_name == "long"

    def test_from_dict_defaults(self):
        definition = FieldDefinition.from_dict({"name": "title", "value": "content:title"})
        assert definition.value_source is ValueSource.VALUE
        assert definition.type_name == "string"

    def test_from_dict_missing_expression(self):
        with pytest.raises(ValidationError) as exc_info:
            FieldDefinition.from_dict({"name": "title"})
        assert exc_info.value.field == "value_expression"

    def test_from_dict_unknown_source(self):
        with pytest.raises(ValidationError) as exc_info:
            FieldDefinition.from_dict({"name": "title", "value": "a:b", "source": "timestamp"})
        assert exc_info.value.field == "value_source"

    def test_to_dict(self):
        definition = FieldDefinition("tags", "meta:*", ValueSource.QUALIFIER, "string")
        assert definition.to_dict() == {
            "name": "tags",
            "value_expression": "meta:*",
            "value_source": "qualifier",
            "type_name": "string",
        }


class TestCellAndRecord:
    """Test Cell and Record models."""

    def test_cell_encodes_strings(self):
        cell = Cell("content", "title", "Hello")
        assert cell.family == b"content"
        assert cell.qualifier == b"title"
        assert cell.value == b"Hello"
        assert cell.column == (b"content", b"title")

    def test_cell_requires_family(self):
        with pytest.raises(ValidationError):
            Cell("", "title", "x")

    def test_cell_rejects_non_bytes(self):
        with pytest.raises(ValidationError):
            Cell("content", 42, "x")

    def test_record_lookups(self):
        record = make_record(
            "row1",
            ("content", "title", "Hello"),
            ("meta", "tag1", "a"),
            ("meta", "tag2", "b"),
        )
        assert record.row == b"row1"
        assert len(record) == 3
        assert record.get_value("content", "title") == b"Hello"
        assert record.get_value("content", "missing") is None
        assert [c.qualifier for c in record.get_family_cells("meta")] == [b"tag1", b"tag2"]
        assert record.get_family_cells("absent") == []

    def test_record_cells_are_a_tuple(self):
        record = Record(row=b"r", cells=[Cell("a", "b", "c")])
        assert isinstance(record.cells, tuple)

    def test_record_rejects_non_cells(self):
        with pytest.raises(ValidationError):
            Record(row=b"r", cells=[("a", "b", "c")])

    def test_empty_record(self):
        assert Record(row=b"r").is_empty

    def test_from_dict(self):
        record = Record.from_dict({
            "row": "row1",
            "cells": [
                ["content", "title", "Hello"],
                {"family": "meta", "qualifier": "tag1", "value": "a", "timestamp": 5},
            ],
        })
        assert record.row == b"row1"
        assert record.get_value("content", "title") == b"Hello"
        assert record.get_cell("meta", "tag1").timestamp == 5

    def test_from_dict_requires_row(self):
        with pytest.raises(ValidationError):
            Record.from_dict({"cells": []})

    def test_from_dict_rejects_malformed_cell(self):
        with pytest.raises(ValidationError):
            Record.from_dict({"row": "r", "cells": [["content", "title"]]})


class TestFetchDescriptor:
    """Test FetchDescriptor model."""

    def test_union_of_addresses(self):
        descriptor = FetchDescriptor.from_addresses([
            FixedColumn(b"content", b"title"),
            WholeFamily(b"meta"),
            QualifierPrefix(b"links", b"out"),
            FixedColumn(b"content", b"title"),
        ])
        assert descriptor.families == frozenset({b"meta", b"links"})
        assert descriptor.columns == frozenset({(b"content", b"title")})

    def test_fixed_column_kept_when_family_fetched(self):
        descriptor = FetchDescriptor.from_addresses([
            WholeFamily(b"content"),
            FixedColumn(b"content", b"title"),
        ])
        assert descriptor.families == frozenset({b"content"})
        assert descriptor.columns == frozenset({(b"content", b"title")})

    def test_empty(self):
        assert FetchDescriptor.from_addresses([]).is_empty
        assert FetchDescriptor() == FetchDescriptor.from_addresses([])

    def test_covers(self):
        descriptor = FetchDescriptor.from_addresses([
            FixedColumn(b"content", b"title"),
            WholeFamily(b"meta"),
        ])
        assert descriptor.covers("content", "title")
        assert not descriptor.covers("content", "body")
        assert descriptor.covers("meta", "anything")
        assert not descriptor.covers("other", "x")

    def test_restrict(self):
        descriptor = FetchDescriptor.from_addresses([FixedColumn(b"content", b"title")])
        record = make_record("r", ("content", "title", "Hello"), ("content", "body", "World"))
        restricted = descriptor.restrict(record)
        assert restricted.row == b"r"
        assert restricted.cells == (Cell("content", "title", "Hello"),)

    def test_str(self):
        descriptor = FetchDescriptor.from_addresses([
            FixedColumn(b"content", b"title"),
            WholeFamily(b"meta"),
        ])
        assert str(descriptor) == "FetchDescriptor(meta:*, content:title)"


class TestDocument:
    """Test Document model."""

    def test_multi_valued_fields(self):
        document = Document()
        document.add_field("tags", "a")
        document.add_field("title", "Hello")
        document.add_field("tags", "b")
        assert document.field_names == ["tags", "title"]
        assert document.get_values("tags") == ["a", "b"]
        assert document.get_first_value("title") == "Hello"
        assert document.to_dict() == {"tags": ["a", "b"], "title": ["Hello"]}
        assert "tags" in document
        assert len(document) == 2

    def test_absent_field(self):
        document = Document()
        assert document.get_values("missing") == []
        assert document.get_first_value("missing") is None
        assert "missing" not in document

    def test_equality(self):
        assert Document({"a": [1, 2]}) == Document({"a": [1, 2]})
        assert Document({"a": [1, 2]}) != Document({"a": [2, 1]})

    def test_get_values_returns_copy(self):
        document = Document({"a": [1]})
        document.get_values("a").append(2)
        assert document.get_values("a") == [1]
