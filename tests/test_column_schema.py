from dataclasses import dataclass

import pytest

from tablekit.errors import ColumnNotFoundError, DuplicateColumnKeyError, TableError
from tablekit.services.column_schema import ColumnDescriptor, ColumnSchema


@dataclass
class Player:
    name: str
    points: int


def test_find_returns_descriptor_in_declared_order():
    schema = ColumnSchema(
        [ColumnDescriptor("name", sortable=True), ColumnDescriptor("points")]
    )
    assert schema.keys() == ["name", "points"]
    assert schema.find("points").sortable is False
    assert "name" in schema and "missing" not in schema
    assert len(schema) == 2


def test_duplicate_key_rejected_at_construction():
    with pytest.raises(DuplicateColumnKeyError) as info:
        ColumnSchema([ColumnDescriptor("name"), ColumnDescriptor("name", title="Again")])
    assert info.value.context == {"key": "name"}
    assert isinstance(info.value, TableError)


def test_find_unknown_key_raises_not_found():
    schema = ColumnSchema([ColumnDescriptor("name")])
    with pytest.raises(ColumnNotFoundError) as info:
        schema.find("email")
    assert "email" in str(info.value)
    assert isinstance(info.value, KeyError)
    assert schema.get("email") is None


def test_value_reads_mappings_and_objects():
    col = ColumnDescriptor("name")
    assert col.value({"name": "Amy"}) == "Amy"
    assert col.value(Player("Bob", 3)) == "Bob"
    assert col.value({}) is None
    assert ColumnDescriptor("missing").value(Player("Bob", 3)) is None


def test_field_and_accessor_override_key():
    by_field = ColumnDescriptor("pts", field="points")
    by_accessor = ColumnDescriptor("double", accessor=lambda p: p.points * 2)
    assert by_field.value(Player("Amy", 4)) == 4
    assert by_accessor.value(Player("Amy", 4)) == 8


def test_display_applies_value_renderer():
    col = ColumnDescriptor("role", render=lambda value, record, index: f"{index}:{value}")
    assert col.display({"role": "Admin"}, 2) == "2:Admin"
    assert ColumnDescriptor("role").display({"role": "User"}, 0) == "User"


def test_label_defaults_to_key():
    assert ColumnDescriptor("email").label == "email"
    assert ColumnDescriptor("email", title="E-Mail").label == "E-Mail"


def test_invalid_alignment_rejected():
    with pytest.raises(ValueError):
        ColumnDescriptor("name", align="justify")


def test_coerce_keeps_existing_schema():
    schema = ColumnSchema([ColumnDescriptor("a")])
    assert ColumnSchema.coerce(schema) is schema
    assert ColumnSchema.coerce([ColumnDescriptor("b")]).keys() == ["b"]
