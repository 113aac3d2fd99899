"""Shared entity registries for schema graph tests."""

from __future__ import annotations

import pytest

from schemagraph.core.metadata import Cardinality, RelationField, ScalarField
from schemagraph.core.registry import EntityRegistry, EntitySpec
from schemagraph.core.types import ArrayOf, ScalarType

PERSON = EntitySpec(
    title="Person",
    fields=(
        ScalarField("name", ScalarType.STRING),
        ScalarField("age", ScalarType.INTEGER),
    ),
)


@pytest.fixture
def person_registry() -> EntityRegistry:
    return EntityRegistry([PERSON])


@pytest.fixture
def team_registry() -> EntityRegistry:
    team = EntitySpec(
        title="Team",
        relationships=(RelationField("members", "Person", Cardinality.MANY),),
    )
    return EntityRegistry([team, PERSON])


@pytest.fixture
def tree_registry() -> EntityRegistry:
    node = EntitySpec(
        title="Node",
        relationships=(RelationField("children", "Node", Cardinality.MANY),),
    )
    return EntityRegistry([node])


@pytest.fixture
def blog_registry() -> EntityRegistry:
    author = EntitySpec(
        title="Author",
        fields=(ScalarField("name", ScalarType.STRING),),
        relationships=(RelationField("posts", "Post", Cardinality.MANY),),
        description="A person who writes posts.",
    )
    post = EntitySpec(
        title="Post",
        fields=(
            ScalarField("title", ScalarType.STRING),
            ScalarField("tags", ArrayOf(ScalarType.STRING)),
        ),
        relationships=(
            RelationField("author", "Author", Cardinality.ONE, owned_by_parent=True),
            RelationField("comments", "Comment", Cardinality.MANY),
        ),
        embeds=(RelationField("meta", "PostMeta"),),
    )
    comment = EntitySpec(
        title="Comment",
        fields=(ScalarField("body", ScalarType.STRING),),
        relationships=(RelationField("post", "Post", Cardinality.ONE, owned_by_parent=True),),
    )
    meta = EntitySpec(
        title="PostMeta",
        fields=(ScalarField("published_at", ScalarType.UTC_DATETIME),),
    )
    return EntityRegistry([author, post, comment, meta])


@pytest.fixture
def cycle_registry() -> EntityRegistry:
    a = EntitySpec(title="A", relationships=(RelationField("b", "B"),))
    b = EntitySpec(title="B", relationships=(RelationField("a", "A"),))
    return EntityRegistry([a, b])
