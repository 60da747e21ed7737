"""Two-step grammar for declaring directed relationships.

Rightward, ``fred`` acts on ``george``::

    "fred" - Rel(Knows()) >> "george"     # (fred)-[:Knows]->(george)

Leftward, ``george`` acts on ``fred``::

    "fred" << Rel(Likes()) - "george"     # (fred)<-[:Likes]-(george)

The first step yields a partial relationship that cannot be rendered and
only accepts the operator that completes its own direction, so a dangling
or mixed-up declaration fails with ``TypeError`` at construction (and is
flagged by type checkers) instead of producing bad query text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from cypher_builder.query_builder.escaping import escape_identifier
from cypher_builder.query_builder.extractor import (
    ExtractedEntity,
    PropertyExtractor,
    extract_properties,
)
from cypher_builder.query_builder.properties import render_properties

P = TypeVar("P")


class Direction(str, Enum):
    """Which way the arrow of a relationship points."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class RelationshipDeclaration(Generic[P]):
    """A relationship between two named nodes, ready to render."""

    direction: Direction
    left_name: str
    right_name: str
    payload: P

    @classmethod
    def rightward(cls, left_name: str, payload: P, right_name: str) -> "RelationshipDeclaration[P]":
        """Declare ``(left)-[payload]->(right)`` without operators."""
        return cls(Direction.RIGHT, left_name, right_name, payload)

    @classmethod
    def leftward(cls, left_name: str, payload: P, right_name: str) -> "RelationshipDeclaration[P]":
        """Declare ``(left)<-[payload]-(right)`` without operators."""
        return cls(Direction.LEFT, left_name, right_name, payload)

    def render(self, extractor: PropertyExtractor = extract_properties) -> str:
        """Render the relationship pattern.

        Args:
            extractor: Source of the relationship type name and properties

        Returns:
            ``(l)-[:TYPE props]->(r)`` or ``(l)<-[:TYPE props]-(r)``
        """
        rel_type, properties = extractor(self.payload)
        left = escape_identifier(self.left_name)
        right = escape_identifier(self.right_name)
        body = f"[:{escape_identifier(rel_type)}{render_properties(properties)}]"
        if self.direction is Direction.LEFT:
            return f"({left})<-{body}-({right})"
        return f"({left})-{body}->({right})"


@dataclass(frozen=True, slots=True)
class RightPartial(Generic[P]):
    """``"left" - Rel(...)``, waiting for ``>> "right"``."""

    left_name: str
    payload: P

    def __rshift__(self, right_name: str) -> RelationshipDeclaration[P]:
        if not isinstance(right_name, str):
            return NotImplemented
        return RelationshipDeclaration(Direction.RIGHT, self.left_name, right_name, self.payload)


@dataclass(frozen=True, slots=True)
class LeftPartial(Generic[P]):
    """``Rel(...) - "right"``, waiting for ``"left" <<``."""

    right_name: str
    payload: P

    def __rlshift__(self, left_name: str) -> RelationshipDeclaration[P]:
        if not isinstance(left_name, str):
            return NotImplemented
        return RelationshipDeclaration(Direction.LEFT, left_name, self.right_name, self.payload)


@dataclass(frozen=True, slots=True)
class Rel(Generic[P]):
    """Relationship payload; its type name and properties come from the extractor."""

    payload: P

    @classmethod
    def typed(cls, type_name: str, **properties: Any) -> "Rel[ExtractedEntity]":
        """Payload with an explicit type name and keyword properties."""
        return cls(ExtractedEntity.of(type_name, **properties))

    def __rsub__(self, left_name: str) -> RightPartial[P]:
        if not isinstance(left_name, str):
            return NotImplemented
        return RightPartial(left_name, self.payload)

    def __sub__(self, right_name: str) -> LeftPartial[P]:
        if not isinstance(right_name, str):
            return NotImplemented
        return LeftPartial(right_name, self.payload)
