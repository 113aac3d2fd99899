"""Convert graphs of typed entity definitions into JSON Schema documents."""

from schemagraph.schema.assembler import DocumentAssembler, EncoderOptions, assemble
from schemagraph.errors import (
    SchemaEncodingError,
    SchemaGraphError,
    TitleCollisionError,
    UnsupportedTypeError,
)

__all__ = [
    "DocumentAssembler",
    "EncoderOptions",
    "SchemaEncodingError",
    "SchemaGraphError",
    "TitleCollisionError",
    "UnsupportedTypeError",
    "assemble",
]
