"""Breadth-first discovery of entity definitions reachable from a root."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any

from schemagraph.core.fragments import (
    Fragment,
    RefArrayFragment,
    RefFragment,
    ref_path,
    with_title,
)
from schemagraph.core.metadata import (
    Cardinality,
    DocstringProvider,
    MetadataProvider,
    RelationField,
)
from schemagraph.errors import TitleCollisionError
from schemagraph.schema.type_mapper import fragment_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityDefinition:
    """One object definition; every property is required."""

    title: str
    properties: dict[str, Fragment] = field(default_factory=dict)
    description: str = ""

    @property
    def required(self) -> list[str]:
        return list(self.properties)

    def to_schema(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "type": "object",
            "required": self.required,
            "properties": {name: frag.to_schema() for name, frag in self.properties.items()},
            "description": self.description,
        }


DefinitionTable = dict[str, EntityDefinition]


def table_to_dict(table: DefinitionTable) -> dict[str, dict[str, Any]]:
    """Serialize every definition of ``table`` into plain mappings."""

    return {title: definition.to_schema() for title, definition in table.items()}


class SchemaGraphBuilder:
    """Build entity definitions by breadth-first traversal.

    The traversal keeps a seen set of entity identities, so cyclic graphs
    terminate with exactly one definition per distinct entity.
    """

    def __init__(
        self,
        metadata: MetadataProvider,
        docs: DocstringProvider | None = None,
    ) -> None:
        self.metadata = metadata
        if docs is None and isinstance(metadata, DocstringProvider):
            docs = metadata
        self.docs = docs

    def definitions(self, root: Hashable) -> list[EntityDefinition]:
        """Return definitions in discovery order, starting with ``root``."""

        queue: deque[Hashable] = deque([root])
        seen: set[Hashable] = set()
        owners: dict[str, Hashable] = {}
        out: list[EntityDefinition] = []

        while queue:
            entity = queue.popleft()
            if entity in seen:
                continue
            seen.add(entity)

            definition, related = self._define(entity)
            owner = owners.setdefault(definition.title, entity)
            if owner != entity:
                raise TitleCollisionError(definition.title, first=owner, second=entity)
            out.append(definition)
            logger.debug("defined %s (%d properties)", definition.title, len(definition.properties))

            for other in related:
                if other not in seen and other not in queue:
                    queue.append(other)

        return out

    def build(self, root: Hashable) -> DefinitionTable:
        """Return the definition table keyed by title."""

        return {definition.title: definition for definition in self.definitions(root)}

    def _define(self, entity: Hashable) -> tuple[EntityDefinition, list[Hashable]]:
        properties: dict[str, Fragment] = {}
        related: list[Hashable] = []

        for scalar in self.metadata.fields(entity):
            properties[scalar.name] = with_title(fragment_for(scalar.type), scalar.name)

        for relation in self.metadata.relationships(entity):
            if relation.owned_by_parent:
                continue
            properties[relation.name] = self._reference(relation)
            related.append(relation.related)

        for embed in self.metadata.embeds(entity):
            properties[embed.name] = self._reference(embed)
            related.append(embed.related)

        description = ""
        if self.docs is not None:
            description = self.docs.description_for(entity) or ""

        definition = EntityDefinition(
            title=self.metadata.title_for(entity),
            properties=properties,
            description=description,
        )
        return definition, related

    def _reference(self, relation: RelationField) -> Fragment:
        title = self.metadata.title_for(relation.related)
        if relation.cardinality == Cardinality.MANY:
            return RefArrayFragment(title=title, ref=ref_path(title))
        return RefFragment(ref=ref_path(title))
