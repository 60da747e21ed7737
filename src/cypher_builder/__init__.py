"""Fluent Cypher query text builder."""

from cypher_builder.core import (
    ApplicationError,
    ClauseArgumentError,
    PropertyExtractionError,
    RelationshipShapeError,
)
from cypher_builder.query_builder import (
    ClauseType,
    CypherBuilder,
    CypherExpr,
    Direction,
    ExtractedEntity,
    Rel,
    RelationshipDeclaration,
    build,
    cypher,
    escape_identifier,
    extract_properties,
    render_properties,
    to_cypher_literal,
)

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "ClauseArgumentError",
    "ClauseType",
    "CypherBuilder",
    "CypherExpr",
    "Direction",
    "ExtractedEntity",
    "PropertyExtractionError",
    "Rel",
    "RelationshipDeclaration",
    "RelationshipShapeError",
    "build",
    "cypher",
    "escape_identifier",
    "extract_properties",
    "render_properties",
    "to_cypher_literal",
]
