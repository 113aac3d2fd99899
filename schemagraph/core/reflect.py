"""Metadata provider reflecting pydantic models.

Nested models become embeds. A field annotated with a ``Relation`` marker,
e.g. ``Annotated[list[Post], HAS]`` or ``Annotated[User, BELONGS_TO]``,
becomes a relationship instead.
"""

from __future__ import annotations

import inspect
import types
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel

from schemagraph.core.metadata import Cardinality, Relation, RelationField, ScalarField
from schemagraph.core.types import ArrayOf, EnumOf, MapOf, ScalarType

_SIMPLE_TYPES: tuple[tuple[type, ScalarType], ...] = (
    # bool before int, datetime before date: subclass order matters.
    (bool, ScalarType.BOOLEAN),
    (int, ScalarType.INTEGER),
    (float, ScalarType.FLOAT),
    (Decimal, ScalarType.DECIMAL),
    (str, ScalarType.STRING),
    (uuid.UUID, ScalarType.BINARY_ID),
    (datetime, ScalarType.NAIVE_DATETIME),
    (date, ScalarType.DATE),
    (time, ScalarType.TIME),
)

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


def _unwrap_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_class(annotation: Any) -> bool:
    return isinstance(annotation, type) and get_origin(annotation) is None


def _is_model(annotation: Any) -> bool:
    return _is_class(annotation) and issubclass(annotation, BaseModel)


def _related_model(annotation: Any) -> tuple[Any, Cardinality] | None:
    """Return ``(model, cardinality)`` when the annotation points at a model."""

    annotation = _unwrap_optional(annotation)
    if _is_model(annotation):
        return annotation, Cardinality.ONE
    if get_origin(annotation) in _SEQUENCE_ORIGINS:
        args = [arg for arg in get_args(annotation) if arg is not Ellipsis]
        if len(args) == 1 and _is_model(_unwrap_optional(args[0])):
            return _unwrap_optional(args[0]), Cardinality.MANY
    return None


def semantic_type_for(annotation: Any) -> Any:
    """Translate a Python annotation into a semantic field type.

    Annotations without a translation are returned unchanged and left for
    the type mapper to resolve through a ``to_json_schema`` hook.
    """

    annotation = _unwrap_optional(annotation)

    if _is_class(annotation):
        if issubclass(annotation, Enum):
            return EnumOf(tuple(str(member.value) for member in annotation))
        if annotation is dict:
            return ScalarType.MAP
        for python_type, scalar in _SIMPLE_TYPES:
            if issubclass(annotation, python_type):
                return scalar
        return annotation

    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin is Literal and all(isinstance(arg, str) for arg in args):
        return EnumOf(tuple(args))
    if origin in _SEQUENCE_ORIGINS:
        items = [arg for arg in args if arg is not Ellipsis]
        if len(items) == 1:
            return ArrayOf(semantic_type_for(items[0]))
    if origin is dict:
        if len(args) == 2:
            return MapOf(semantic_type_for(args[1]))
        return ScalarType.MAP
    return annotation


class PydanticModelProvider:
    """Metadata and docstring provider over ``BaseModel`` subclasses."""

    def __init__(self, *, qualified_titles: bool = True) -> None:
        self.qualified_titles = qualified_titles

    def title_for(self, entity: type[BaseModel]) -> str:
        if self.qualified_titles:
            return f"{entity.__module__}.{entity.__qualname__}"
        return entity.__qualname__

    def _model_fields(self, entity: type[BaseModel]):
        if not getattr(entity, "__pydantic_complete__", True):
            entity.model_rebuild()
        return entity.model_fields.items()

    @staticmethod
    def _marker(info: Any) -> Relation | None:
        for item in info.metadata:
            if isinstance(item, Relation):
                return item
        return None

    def fields(self, entity: type[BaseModel]) -> list[ScalarField]:
        out: list[ScalarField] = []
        for name, info in self._model_fields(entity):
            if self._marker(info) is not None or _related_model(info.annotation) is not None:
                continue
            out.append(ScalarField(name, semantic_type_for(info.annotation)))
        return out

    def relationships(self, entity: type[BaseModel]) -> list[RelationField]:
        out: list[RelationField] = []
        for name, info in self._model_fields(entity):
            marker = self._marker(info)
            if marker is None:
                continue
            related = _related_model(info.annotation)
            if related is None:
                raise TypeError(f"Relationship field {entity.__qualname__}.{name} must point at a model")
            model, cardinality = related
            out.append(RelationField(name, model, cardinality, marker.owned_by_parent))
        return out

    def embeds(self, entity: type[BaseModel]) -> list[RelationField]:
        out: list[RelationField] = []
        for name, info in self._model_fields(entity):
            if self._marker(info) is not None:
                continue
            related = _related_model(info.annotation)
            if related is not None:
                model, cardinality = related
                out.append(RelationField(name, model, cardinality))
        return out

    def description_for(self, entity: type[BaseModel]) -> str | None:
        doc = entity.__dict__.get("__doc__")
        if not doc:
            return None
        return inspect.cleandoc(doc)
