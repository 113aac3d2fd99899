"""Schema graph traversal and document assembly."""

from schemagraph.schema.assembler import DocumentAssembler, EncoderOptions, assemble, model_json_schema
from schemagraph.schema.graph_builder import DefinitionTable, EntityDefinition, SchemaGraphBuilder
from schemagraph.schema.references import find_refs
from schemagraph.schema.type_mapper import fragment_for

__all__ = [
    "DefinitionTable",
    "DocumentAssembler",
    "EncoderOptions",
    "EntityDefinition",
    "SchemaGraphBuilder",
    "assemble",
    "find_refs",
    "fragment_for",
    "model_json_schema",
]
