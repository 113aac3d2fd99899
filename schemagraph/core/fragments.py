"""Schema fragment node definitions.

Each variant serializes itself to the exact JSON Schema shape via
``to_schema``; key order in the output follows field declaration order.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFS_KEY = "$defs"
REF_KEY = "$ref"


def ref_path(title: str) -> str:
    """Return the ``$defs`` reference path for an entity title."""

    return f"#/{DEFS_KEY}/{title}"


class PrimitiveFragment(BaseModel):
    """Scalar value with optional format or enum constraint."""

    model_config = ConfigDict(frozen=True)

    node: Literal["Primitive"] = "Primitive"
    type: str
    format: str | None = None
    enum: list[str] | None = None
    title: str | None = None

    def to_schema(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type}
        if self.format is not None:
            out["format"] = self.format
        if self.enum is not None:
            out["enum"] = list(self.enum)
        if self.title is not None:
            out["title"] = self.title
        return out


class ArrayFragment(BaseModel):
    """Array whose items are described by a nested fragment."""

    model_config = ConfigDict(frozen=True)

    node: Literal["Array"] = "Array"
    items: Fragment
    title: str | None = None

    def to_schema(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": "array", "items": self.items.to_schema()}
        if self.title is not None:
            out["title"] = self.title
        return out


class MapFragment(BaseModel):
    """Object with arbitrary keys; ``values`` of None means any value."""

    model_config = ConfigDict(frozen=True)

    node: Literal["Map"] = "Map"
    values: Fragment | None = None
    title: str | None = None

    def to_schema(self) -> dict[str, Any]:
        additional = self.values.to_schema() if self.values is not None else {}
        out: dict[str, Any] = {"type": "object", "additionalProperties": additional}
        if self.title is not None:
            out["title"] = self.title
        return out


class RefFragment(BaseModel):
    """Direct reference to a ``$defs`` entry."""

    model_config = ConfigDict(frozen=True)

    node: Literal["Ref"] = "Ref"
    ref: str
    title: str | None = None

    def to_schema(self) -> dict[str, Any]:
        out: dict[str, Any] = {REF_KEY: self.ref}
        if self.title is not None:
            out["title"] = self.title
        return out


class RefArrayFragment(BaseModel):
    """Array of references, titled after the related entity."""

    model_config = ConfigDict(frozen=True)

    node: Literal["RefArray"] = "RefArray"
    title: str
    ref: str

    def to_schema(self) -> dict[str, Any]:
        return {"title": self.title, "type": "array", "items": {REF_KEY: self.ref}}


class CustomFragment(BaseModel):
    """Schema supplied verbatim by a user type's ``to_json_schema`` hook."""

    model_config = ConfigDict(frozen=True)

    node: Literal["Custom"] = "Custom"
    body: dict[str, Any]
    title: str | None = None

    def to_schema(self) -> dict[str, Any]:
        out = dict(self.body)
        if self.title is not None:
            out.setdefault("title", self.title)
        return out


Fragment = Annotated[
    Union[
        PrimitiveFragment,
        ArrayFragment,
        MapFragment,
        RefFragment,
        RefArrayFragment,
        CustomFragment,
    ],
    Field(discriminator="node"),
]

FRAGMENT_TYPES = (
    PrimitiveFragment,
    ArrayFragment,
    MapFragment,
    RefFragment,
    RefArrayFragment,
    CustomFragment,
)

ArrayFragment.model_rebuild()
MapFragment.model_rebuild()


def with_title(fragment: Fragment, title: str) -> Fragment:
    """Return ``fragment`` carrying ``title`` unless it already has one."""

    if fragment.title is not None:
        return fragment
    return fragment.model_copy(update={"title": title})
