"""Explicit entity descriptor table keyed by title."""

from __future__ import annotations

import json
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from schemagraph.core.metadata import Cardinality, RelationField, ScalarField
from schemagraph.core.types import parse_field_type
from schemagraph.errors import DescriptorError, TitleCollisionError, UnknownEntityError


@dataclass(frozen=True, slots=True)
class EntitySpec:
    """Static description of one entity; relations name related titles."""

    title: str
    fields: tuple[ScalarField, ...] = ()
    relationships: tuple[RelationField, ...] = ()
    embeds: tuple[RelationField, ...] = ()
    description: str | None = None


class EntityRegistry:
    """Metadata and docstring provider backed by registered ``EntitySpec``s.

    Entities are identified by their title string.
    """

    def __init__(self, specs: Iterable[EntitySpec] = ()) -> None:
        self._specs: dict[str, EntitySpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: EntitySpec) -> None:
        existing = self._specs.get(spec.title)
        if existing is not None and existing != spec:
            raise TitleCollisionError(spec.title, first=existing, second=spec)
        self._specs[spec.title] = spec

    def spec(self, entity: Hashable) -> EntitySpec:
        try:
            return self._specs[entity]  # type: ignore[index]
        except KeyError:
            raise UnknownEntityError(entity) from None

    def titles(self) -> list[str]:
        return list(self._specs)

    def __contains__(self, entity: object) -> bool:
        return entity in self._specs

    def title_for(self, entity: Hashable) -> str:
        return self.spec(entity).title

    def fields(self, entity: Hashable) -> tuple[ScalarField, ...]:
        return self.spec(entity).fields

    def relationships(self, entity: Hashable) -> tuple[RelationField, ...]:
        return self.spec(entity).relationships

    def embeds(self, entity: Hashable) -> tuple[RelationField, ...]:
        return self.spec(entity).embeds

    def description_for(self, entity: Hashable) -> str | None:
        return self.spec(entity).description


class FieldDescriptor(BaseModel):
    """Scalar field entry of a descriptor file."""

    name: str = Field(min_length=1)
    type: Any

    @field_validator("type")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        return parse_field_type(value)


class RelationDescriptor(BaseModel):
    """Relationship or embed entry of a descriptor file."""

    name: str = Field(min_length=1)
    related: str = Field(min_length=1)
    cardinality: Literal["one", "many"] = "one"
    owned_by_parent: bool = False


class EntityDescriptor(BaseModel):
    """One entity of a descriptor file."""

    title: str = Field(min_length=1)
    description: str | None = None
    fields: list[FieldDescriptor] = Field(default_factory=list)
    relationships: list[RelationDescriptor] = Field(default_factory=list)
    embeds: list[RelationDescriptor] = Field(default_factory=list)


class DescriptorFile(BaseModel):
    """Top-level descriptor document."""

    entities: list[EntityDescriptor]


def _relation(descriptor: RelationDescriptor, *, embed: bool) -> RelationField:
    return RelationField(
        name=descriptor.name,
        related=descriptor.related,
        cardinality=Cardinality(descriptor.cardinality),
        owned_by_parent=False if embed else descriptor.owned_by_parent,
    )


def _spec(descriptor: EntityDescriptor) -> EntitySpec:
    return EntitySpec(
        title=descriptor.title,
        fields=tuple(ScalarField(item.name, item.type) for item in descriptor.fields),
        relationships=tuple(_relation(item, embed=False) for item in descriptor.relationships),
        embeds=tuple(_relation(item, embed=True) for item in descriptor.embeds),
        description=descriptor.description,
    )


def registry_from_dict(payload: dict) -> EntityRegistry:
    """Validate a descriptor payload and build a registry from it."""

    try:
        document = DescriptorFile.model_validate(payload)
    except ValidationError as exc:
        raise DescriptorError(f"Invalid entity descriptor: {exc}") from exc

    registry = EntityRegistry()
    for descriptor in document.entities:
        spec = _spec(descriptor)
        if spec.title in registry:
            raise TitleCollisionError(spec.title, first=registry.spec(spec.title), second=spec)
        registry.register(spec)

    known = set(registry.titles())
    for title in registry.titles():
        spec = registry.spec(title)
        for relation in spec.relationships + spec.embeds:
            if relation.owned_by_parent:
                continue
            if relation.related not in known:
                raise UnknownEntityError(relation.related)
    return registry


def load_registry(path: str) -> EntityRegistry:
    """Load an entity registry from a JSON descriptor file."""

    descriptor_path = Path(path)
    if not descriptor_path.exists():
        raise DescriptorError(f"Descriptor file not found: {descriptor_path}")
    try:
        payload = json.loads(descriptor_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DescriptorError(f"Invalid JSON in descriptor file: {descriptor_path} ({exc})") from exc
    if not isinstance(payload, dict):
        raise DescriptorError(f"Descriptor root must be an object: {descriptor_path}")
    return registry_from_dict(payload)
