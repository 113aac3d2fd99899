"""Assemble the final JSON Schema document for a root entity."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

from schemagraph.core.fragments import DEFS_KEY, ref_path
from schemagraph.core.metadata import DocstringProvider, MetadataProvider
from schemagraph.core.reflect import PydanticModelProvider
from schemagraph.errors import SchemaEncodingError
from schemagraph.schema.graph_builder import SchemaGraphBuilder, table_to_dict
from schemagraph.schema.references import find_refs, value_equals

logger = logging.getLogger(__name__)

INDENT_ENV = "SCHEMAGRAPH_JSON_INDENT"


@dataclass(frozen=True)
class EncoderOptions:
    """JSON encoder settings."""

    indent: int | None = None
    ensure_ascii: bool = False

    @classmethod
    def from_env(cls) -> "EncoderOptions":
        raw = os.getenv(INDENT_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            indent = int(raw)
        except ValueError as exc:
            raise ValueError(f"{INDENT_ENV} must be an integer, got {raw!r}") from exc
        return cls(indent=indent)


def encode_document(document: dict[str, Any], options: EncoderOptions | None = None) -> str:
    """Serialize ``document`` to JSON text."""

    options = options or EncoderOptions()
    try:
        return json.dumps(document, indent=options.indent, ensure_ascii=options.ensure_ascii)
    except (TypeError, ValueError) as exc:
        raise SchemaEncodingError(f"Failed to encode schema document: {exc}") from exc


class DocumentAssembler:
    """Turn a root entity into a single JSON Schema document."""

    def __init__(
        self,
        metadata: MetadataProvider,
        docs: DocstringProvider | None = None,
        *,
        options: EncoderOptions | None = None,
    ) -> None:
        self.metadata = metadata
        self.builder = SchemaGraphBuilder(metadata, docs)
        self.options = options or EncoderOptions()

    def document(self, root: Hashable) -> dict[str, Any]:
        """Return the document as nested mappings, before encoding.

        The root definition is written at top level. It stays in ``$defs``
        only when the single reference to it is its own recursive ``$ref``.
        """

        defs = table_to_dict(self.builder.build(root))
        title = self.metadata.title_for(root)
        title_ref = ref_path(title)

        refs = find_refs(defs, value_equals(title_ref))
        if refs == [title_ref]:
            root_schema = defs[title]
            logger.debug("keeping self-referencing root %s in %s", title, DEFS_KEY)
        else:
            root_schema = defs.pop(title)

        document = dict(root_schema)
        if defs:
            document[DEFS_KEY] = defs
        return document

    def assemble(self, root: Hashable) -> str:
        """Return the encoded JSON Schema document for ``root``."""

        return encode_document(self.document(root), self.options)


def assemble(
    root: Hashable,
    metadata: MetadataProvider,
    docs: DocstringProvider | None = None,
    *,
    options: EncoderOptions | None = None,
) -> str:
    """Build and encode the JSON Schema document for ``root``."""

    return DocumentAssembler(metadata, docs, options=options).assemble(root)


def model_json_schema(
    model: type,
    *,
    qualified_titles: bool = True,
    options: EncoderOptions | None = None,
) -> str:
    """Return the encoded JSON Schema document for a pydantic model graph."""

    provider = PydanticModelProvider(qualified_titles=qualified_titles)
    return assemble(model, provider, options=options)
