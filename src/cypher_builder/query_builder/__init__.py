"""Cypher query builder framework.

This package provides an immutable, fluent interface for building Cypher
query text with escaped identifiers and encoded literals.
"""

from .builder import CypherBuilder, build, cypher
from .escaping import escape_identifier, escape_string
from .expr import CypherExpr, empty, for_each, sequence, while_loop
from .extractor import ExtractedEntity, PropertyExtractor, extract_properties
from .literals import to_cypher_literal
from .properties import PropertyList, render_properties
from .relationships import Direction, LeftPartial, Rel, RelationshipDeclaration, RightPartial
from .state import ClauseType

__all__ = [
    "ClauseType",
    # Builder
    "CypherBuilder",
    "CypherExpr",
    "Direction",
    "ExtractedEntity",
    "LeftPartial",
    "PropertyExtractor",
    "PropertyList",
    # Relationships
    "Rel",
    "RelationshipDeclaration",
    "RightPartial",
    "build",
    "cypher",
    "empty",
    # Encoding
    "escape_identifier",
    "escape_string",
    "extract_properties",
    "for_each",
    "render_properties",
    "sequence",
    "to_cypher_literal",
    "while_loop",
]
