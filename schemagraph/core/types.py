"""Semantic field types understood by the type mapper."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ScalarType(str, Enum):
    """Primitive and semantic field tags."""

    ID = "id"
    BINARY_ID = "binary_id"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    STRING = "string"
    MAP = "map"
    DATE = "date"
    TIME = "time"
    TIME_USEC = "time_usec"
    NAIVE_DATETIME = "naive_datetime"
    NAIVE_DATETIME_USEC = "naive_datetime_usec"
    UTC_DATETIME = "utc_datetime"
    UTC_DATETIME_USEC = "utc_datetime_usec"


@dataclass(frozen=True, slots=True)
class ArrayOf:
    """Homogeneous array of ``inner``."""

    inner: Any


@dataclass(frozen=True, slots=True)
class MapOf:
    """String-keyed map whose values are ``inner``."""

    inner: Any


@dataclass(frozen=True, slots=True)
class EnumOf:
    """Fixed set of string values."""

    values: tuple[str, ...]


def parse_field_type(payload: Any) -> Any:
    """Parse a descriptor type payload into a semantic type.

    Strings become ``ScalarType`` members when they name one and are kept as
    raw strings otherwise, so unknown tags surface later as unsupported types.
    """

    if isinstance(payload, str):
        try:
            return ScalarType(payload)
        except ValueError:
            return payload

    if isinstance(payload, dict) and len(payload) == 1:
        key, value = next(iter(payload.items()))
        if key == "array":
            return ArrayOf(parse_field_type(value))
        if key == "map":
            return MapOf(parse_field_type(value))
        if key == "enum" and isinstance(value, list):
            return EnumOf(tuple(str(item) for item in value))

    raise ValueError(f"Invalid field type payload: {payload!r}")
