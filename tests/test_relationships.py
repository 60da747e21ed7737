"""Tests for the relationship declaration grammar."""

import pytest

from cypher_builder.query_builder.extractor import ExtractedEntity
from cypher_builder.query_builder.relationships import (
    Direction,
    LeftPartial,
    Rel,
    RelationshipDeclaration,
    RightPartial,
)
from tests.models import Knows


class TestOperators:
    def test_rightward(self):
        declaration = "fred" - Rel(Knows(Since=2010)) >> "george"
        assert declaration == RelationshipDeclaration(Direction.RIGHT, "fred", "george", Knows(Since=2010))

    def test_leftward(self):
        declaration = "fred" << Rel.typed("LIKES") - "george"
        assert declaration.direction is Direction.LEFT
        assert declaration.left_name == "fred"
        assert declaration.right_name == "george"

    def test_first_steps_are_partials(self):
        assert isinstance("fred" - Rel.typed("KNOWS"), RightPartial)
        assert isinstance(Rel.typed("LIKES") - "george", LeftPartial)

    def test_explicit_constructors_match_operators(self):
        payload = Rel.typed("KNOWS")
        assert RelationshipDeclaration.rightward("a", payload.payload, "b") == ("a" - payload >> "b")
        assert RelationshipDeclaration.leftward("a", payload.payload, "b") == ("a" << payload - "b")


class TestMismatchedPairs:
    def test_rightward_start_rejects_leftward_finish(self):
        partial = "fred" - Rel.typed("KNOWS")
        with pytest.raises(TypeError):
            partial - "george"
        with pytest.raises(TypeError):
            "george" << partial

    def test_leftward_start_rejects_rightward_finish(self):
        partial = Rel.typed("LIKES") - "george"
        with pytest.raises(TypeError):
            partial >> "fred"

    def test_endpoints_must_be_names(self):
        with pytest.raises(TypeError):
            1 - Rel.typed("KNOWS")
        with pytest.raises(TypeError):
            ("fred" - Rel.typed("KNOWS")) >> 2


class TestRender:
    def test_rightward_without_properties(self):
        assert ("fred" - Rel.typed("KNOWS") >> "george").render() == "(fred)-[:KNOWS]->(george)"

    def test_leftward_without_properties(self):
        assert ("fred" << Rel.typed("LIKES") - "george").render() == "(fred)<-[:LIKES]-(george)"

    def test_properties_from_model(self):
        declaration = "fred" - Rel(Knows(Since=2010)) >> "george"
        assert declaration.render() == "(fred)-[:Knows { Since: 2010 }]->(george)"

    def test_names_and_type_escaped(self):
        declaration = "my fred" << Rel.typed("IS FRIEND OF") - "g`eorge"
        assert declaration.render() == "(`my fred`)<-[:`IS FRIEND OF`]-(`g``eorge`)"

    def test_custom_extractor(self):
        declaration = "a" - Rel("ignored") >> "b"
        assert declaration.render(lambda _: ExtractedEntity.of("OWNS", share=0.5)) == "(a)-[:OWNS { share: 0.5 }]->(b)"
