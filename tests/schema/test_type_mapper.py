"""Tests for mapping semantic field types to schema fragments."""

from __future__ import annotations

import pytest

from schemagraph.core.fragments import PrimitiveFragment
from schemagraph.core.types import ArrayOf, EnumOf, MapOf, ScalarType
from schemagraph.errors import UnsupportedTypeError
from schemagraph.schema.type_mapper import fragment_for


class Money:
    """User type supplying its own schema."""

    @classmethod
    def to_json_schema(cls) -> dict:
        return {"type": "string", "pattern": r"^\d+\.\d{2}$"}


class Percent:
    @staticmethod
    def to_json_schema() -> PrimitiveFragment:
        return PrimitiveFragment(type="number", format="float")


class Tag:
    def to_json_schema(self) -> dict:
        return {"type": "string"}


class Point:
    @classmethod
    def to_json_schema(cls) -> list:
        return ["not", "a", "schema"]


@pytest.mark.parametrize(
    ("field_type", "expected"),
    [
        (ScalarType.ID, {"type": "integer"}),
        (ScalarType.INTEGER, {"type": "integer"}),
        (ScalarType.BINARY_ID, {"type": "string"}),
        (ScalarType.FLOAT, {"type": "number", "format": "float"}),
        (ScalarType.DECIMAL, {"type": "number", "format": "float"}),
        (ScalarType.BOOLEAN, {"type": "boolean"}),
        (ScalarType.STRING, {"type": "string"}),
        (ScalarType.MAP, {"type": "object", "additionalProperties": {}}),
        (ScalarType.DATE, {"type": "string", "format": "date"}),
        (ScalarType.TIME, {"type": "string"}),
        (ScalarType.TIME_USEC, {"type": "string"}),
        (ScalarType.NAIVE_DATETIME, {"type": "string", "format": "date-time"}),
        (ScalarType.NAIVE_DATETIME_USEC, {"type": "string", "format": "date-time"}),
        (ScalarType.UTC_DATETIME, {"type": "string", "format": "date-time"}),
        (ScalarType.UTC_DATETIME_USEC, {"type": "string", "format": "date-time"}),
    ],
)
def test_scalar_types_map_to_primitive_fragments(field_type: ScalarType, expected: dict) -> None:
    assert fragment_for(field_type).to_schema() == expected


def test_scalar_tag_strings_are_accepted() -> None:
    assert fragment_for("utc_datetime").to_schema() == {"type": "string", "format": "date-time"}


def test_array_of_strings() -> None:
    assert fragment_for(ArrayOf(ScalarType.STRING)).to_schema() == {
        "type": "array",
        "items": {"type": "string"},
    }


def test_nested_array_and_typed_map() -> None:
    schema = fragment_for(MapOf(ArrayOf(ScalarType.DATE))).to_schema()
    assert schema == {
        "type": "object",
        "additionalProperties": {
            "type": "array",
            "items": {"type": "string", "format": "date"},
        },
    }


def test_enum_lists_values_in_order() -> None:
    schema = fragment_for(EnumOf(("draft", "published", "archived"))).to_schema()
    assert schema == {"type": "string", "enum": ["draft", "published", "archived"]}


def test_custom_hook_returning_mapping() -> None:
    assert fragment_for(Money).to_schema() == {"type": "string", "pattern": r"^\d+\.\d{2}$"}


def test_custom_hook_returning_fragment() -> None:
    assert fragment_for(Percent).to_schema() == {"type": "number", "format": "float"}


def test_custom_hook_inside_array() -> None:
    schema = fragment_for(ArrayOf(Money)).to_schema()
    assert schema["items"]["pattern"] == r"^\d+\.\d{2}$"


def test_unsupported_type_names_type_and_hook() -> None:
    with pytest.raises(UnsupportedTypeError) as excinfo:
        fragment_for(bytes)

    message = str(excinfo.value)
    assert "builtins.bytes" in message
    assert "to_json_schema()" in message
    assert excinfo.value.type_name == "builtins.bytes"


def test_unknown_scalar_tag_is_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError, match="binary"):
        fragment_for("binary")


def test_unsupported_type_nested_in_array_fails() -> None:
    with pytest.raises(UnsupportedTypeError):
        fragment_for(ArrayOf(object()))


def test_instance_method_hook_is_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError, match="callable without arguments") as excinfo:
        fragment_for(Tag)

    assert excinfo.value.type_name.endswith(".Tag")


def test_hook_returning_non_mapping_is_unsupported() -> None:
    with pytest.raises(UnsupportedTypeError, match="returned list, expected a mapping") as excinfo:
        fragment_for(Point)

    assert excinfo.value.type_name.endswith(".Point")
