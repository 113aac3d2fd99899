"""Error types raised while building and encoding schema documents."""

from __future__ import annotations


class SchemaGraphError(Exception):
    """Base class for schema graph failures."""


class UnsupportedTypeError(SchemaGraphError):
    """A field type has no mapping and no custom schema hook."""

    def __init__(self, type_name: str, *, reason: str | None = None) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.reason is not None:
            return f"Unsupported type: {self.type_name}, {self.reason}"
        return (
            f"Unsupported type: {self.type_name}, please implement a "
            "`to_json_schema()` hook on the type returning its JSON Schema"
        )


class TitleCollisionError(SchemaGraphError):
    """Two distinct entities resolved to the same title."""

    def __init__(self, title: str, *, first: object, second: object) -> None:
        self.title = title
        self.first = first
        self.second = second
        super().__init__(self.__str__())

    def __str__(self) -> str:
        return f"Title {self.title!r} is shared by {self.first!r} and {self.second!r}"


class UnknownEntityError(SchemaGraphError):
    """A referenced entity is not known to the metadata provider."""

    def __init__(self, entity: object) -> None:
        self.entity = entity
        super().__init__(f"Unknown entity: {entity!r}")


class DescriptorError(SchemaGraphError):
    """An entity descriptor file could not be read or validated."""


class SchemaEncodingError(SchemaGraphError):
    """The assembled document could not be serialized to JSON."""
