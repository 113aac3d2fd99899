"""Entity metadata, semantic types and schema fragments."""

from schemagraph.core.fragments import DEFS_KEY, Fragment, ref_path
from schemagraph.core.metadata import (
    BELONGS_TO,
    HAS,
    Cardinality,
    RelationField,
    Relation,
    ScalarField,
)
from schemagraph.core.registry import EntityRegistry, EntitySpec, load_registry
from schemagraph.core.types import ArrayOf, EnumOf, MapOf, ScalarType

__all__ = [
    "ArrayOf",
    "BELONGS_TO",
    "Cardinality",
    "DEFS_KEY",
    "EntityRegistry",
    "EntitySpec",
    "EnumOf",
    "Fragment",
    "HAS",
    "MapOf",
    "Relation",
    "RelationField",
    "ScalarField",
    "ScalarType",
    "load_registry",
    "ref_path",
]
