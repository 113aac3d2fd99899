"""Map semantic field types to JSON Schema fragments."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any

from schemagraph.core.fragments import (
    FRAGMENT_TYPES,
    ArrayFragment,
    CustomFragment,
    Fragment,
    MapFragment,
    PrimitiveFragment,
)
from schemagraph.core.metadata import CustomSchemaProvider
from schemagraph.core.types import ArrayOf, EnumOf, MapOf, ScalarType
from schemagraph.errors import UnsupportedTypeError

_INTEGER = PrimitiveFragment(type="integer")
_STRING = PrimitiveFragment(type="string")
_FLOAT = PrimitiveFragment(type="number", format="float")
_DATE_TIME = PrimitiveFragment(type="string", format="date-time")

_SCALARS: dict[ScalarType, Fragment] = {
    ScalarType.ID: _INTEGER,
    ScalarType.BINARY_ID: _STRING,
    ScalarType.INTEGER: _INTEGER,
    ScalarType.FLOAT: _FLOAT,
    ScalarType.DECIMAL: _FLOAT,
    ScalarType.BOOLEAN: PrimitiveFragment(type="boolean"),
    ScalarType.STRING: _STRING,
    ScalarType.MAP: MapFragment(),
    ScalarType.DATE: PrimitiveFragment(type="string", format="date"),
    ScalarType.TIME: _STRING,
    ScalarType.TIME_USEC: _STRING,
    ScalarType.NAIVE_DATETIME: _DATE_TIME,
    ScalarType.NAIVE_DATETIME_USEC: _DATE_TIME,
    ScalarType.UTC_DATETIME: _DATE_TIME,
    ScalarType.UTC_DATETIME_USEC: _DATE_TIME,
}


def type_name(field_type: Any) -> str:
    """Human-readable name of a field type for error messages."""

    if isinstance(field_type, type):
        return f"{field_type.__module__}.{field_type.__qualname__}"
    return repr(field_type)


def _hook_fragment(field_type: Any) -> Fragment:
    # Hooks must be callable on the type itself, i.e. classmethods or staticmethods.
    try:
        inspect.signature(field_type.to_json_schema).bind()
    except (TypeError, ValueError):
        raise UnsupportedTypeError(
            type_name(field_type),
            reason="to_json_schema() must be callable without arguments",
        ) from None

    schema = field_type.to_json_schema()
    if isinstance(schema, FRAGMENT_TYPES):
        return schema
    if not isinstance(schema, Mapping):
        raise UnsupportedTypeError(
            type_name(field_type),
            reason=f"to_json_schema() returned {type(schema).__name__}, expected a mapping",
        )
    return CustomFragment(body=dict(schema))


def fragment_for(field_type: Any) -> Fragment:
    """Return the schema fragment describing ``field_type``.

    Raises UnsupportedTypeError for types with neither a mapping nor a
    ``to_json_schema`` hook.
    """

    if isinstance(field_type, ScalarType):
        return _SCALARS[field_type]

    if isinstance(field_type, str):
        try:
            return _SCALARS[ScalarType(field_type)]
        except ValueError:
            raise UnsupportedTypeError(type_name(field_type)) from None

    if isinstance(field_type, ArrayOf):
        return ArrayFragment(items=fragment_for(field_type.inner))

    if isinstance(field_type, MapOf):
        return MapFragment(values=fragment_for(field_type.inner))

    if isinstance(field_type, EnumOf):
        return PrimitiveFragment(type="string", enum=list(field_type.values))

    if isinstance(field_type, CustomSchemaProvider):
        return _hook_fragment(field_type)

    raise UnsupportedTypeError(type_name(field_type))
