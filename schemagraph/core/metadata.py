"""Entity metadata records and the provider protocols the builder consumes."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class Cardinality(str, Enum):
    """How many related entities a field holds."""

    ONE = "one"
    MANY = "many"


@dataclass(frozen=True, slots=True)
class ScalarField:
    """Named field carrying a semantic type."""

    name: str
    type: Any


@dataclass(frozen=True, slots=True)
class RelationField:
    """Field pointing at another entity, either as a relationship or an embed.

    ``owned_by_parent`` marks the back-reference side of a two-sided
    relationship (the child pointing at its owner).
    """

    name: str
    related: Hashable
    cardinality: Cardinality = Cardinality.ONE
    owned_by_parent: bool = False


@dataclass(frozen=True, slots=True)
class Relation:
    """Annotation marker turning a model field into a relationship."""

    owned_by_parent: bool = False


HAS = Relation()
BELONGS_TO = Relation(owned_by_parent=True)


class MetadataProvider(Protocol):
    """Source of field lists, relationships and titles for entities."""

    def title_for(self, entity: Hashable) -> str:
        """Return the stable, unique title of ``entity``."""

        raise NotImplementedError

    def fields(self, entity: Hashable) -> Sequence[ScalarField]:
        raise NotImplementedError

    def relationships(self, entity: Hashable) -> Sequence[RelationField]:
        raise NotImplementedError

    def embeds(self, entity: Hashable) -> Sequence[RelationField]:
        raise NotImplementedError


@runtime_checkable
class DocstringProvider(Protocol):
    """Optional human-readable description lookup."""

    def description_for(self, entity: Hashable) -> str | None:
        raise NotImplementedError


@runtime_checkable
class CustomSchemaProvider(Protocol):
    """Type that supplies its own schema through ``to_json_schema()``."""

    def to_json_schema(self) -> Any:
        raise NotImplementedError
