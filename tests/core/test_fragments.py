"""Tests for schema fragment serialization."""

from __future__ import annotations

from schemagraph.core.fragments import (
    ArrayFragment,
    CustomFragment,
    MapFragment,
    PrimitiveFragment,
    RefArrayFragment,
    RefFragment,
    ref_path,
    with_title,
)


def test_ref_path() -> None:
    assert ref_path("Person") == "#/$defs/Person"


def test_reference_fragments() -> None:
    assert RefFragment(ref=ref_path("Person")).to_schema() == {"$ref": "#/$defs/Person"}
    assert RefArrayFragment(title="Person", ref=ref_path("Person")).to_schema() == {
        "title": "Person",
        "type": "array",
        "items": {"$ref": "#/$defs/Person"},
    }


def test_open_and_typed_maps() -> None:
    assert MapFragment().to_schema() == {"type": "object", "additionalProperties": {}}
    typed = MapFragment(values=PrimitiveFragment(type="boolean"))
    assert typed.to_schema() == {"type": "object", "additionalProperties": {"type": "boolean"}}


def test_with_title_appends_title_last() -> None:
    fragment = with_title(ArrayFragment(items=PrimitiveFragment(type="string")), "tags")

    assert list(fragment.to_schema()) == ["type", "items", "title"]


def test_with_title_keeps_existing_title() -> None:
    fragment = with_title(CustomFragment(body={"type": "string", "title": "Money"}), "price")

    assert fragment.to_schema() == {"type": "string", "title": "Money"}


def test_with_title_adds_title_to_bare_reference() -> None:
    fragment = with_title(RefFragment(ref=ref_path("Person")), "owner")

    assert fragment.to_schema() == {"$ref": "#/$defs/Person", "title": "owner"}


def test_with_title_keeps_reference_array_title() -> None:
    refs = RefArrayFragment(title="Person", ref=ref_path("Person"))

    assert with_title(refs, "members") is refs


def test_fragments_are_immutable_values() -> None:
    first = PrimitiveFragment(type="string", format="date")
    second = PrimitiveFragment(type="string", format="date")

    assert first == second
    assert with_title(first, "day") != first
