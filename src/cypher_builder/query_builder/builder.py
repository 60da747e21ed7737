"""Fluent Cypher query builder.

This module provides the CypherBuilder class: an immutable, fluent interface
where every clause method returns a new builder one line longer than the
previous one.

Example:
    ```python
    query = (
        cypher.create("fred", Person(name="Fred", age=17))
        .create("george", Person(name="George", age=17))
        .relate("fred" - Rel.typed("KNOWS") >> "george")
        .build()
    )
    ```
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from cypher_builder.core.base import ClauseErrorDetails, DeclarationErrorDetails
from cypher_builder.core.config import settings
from cypher_builder.core.errors import (
    ClauseArgumentError,
    RelationshipShapeError,
    log_application_error,
)
from cypher_builder.core.logging import get_logger
from cypher_builder.query_builder import expr as combinators
from cypher_builder.query_builder.escaping import escape_identifier
from cypher_builder.query_builder.expr import CypherExpr, as_expr
from cypher_builder.query_builder.extractor import PropertyExtractor, extract_properties
from cypher_builder.query_builder.interfaces import SupportsExpr
from cypher_builder.query_builder.properties import render_properties
from cypher_builder.query_builder.relationships import (
    LeftPartial,
    RelationshipDeclaration,
    RightPartial,
)
from cypher_builder.query_builder.state import ClauseType

logger = get_logger(__name__)

T = TypeVar("T")


class CypherBuilder:
    """Immutable fluent builder for Cypher query text.

    Builders never change once created. Each clause method wraps the
    current expression and the new clause into a fresh builder, so a
    builder can be shared and extended along several branches. Nothing is
    written until ``build()``.
    """

    __slots__ = ("_expr", "_extractor")

    def __init__(
        self,
        expr: CypherExpr | None = None,
        extractor: PropertyExtractor = extract_properties,
    ) -> None:
        """Initialize a builder.

        Args:
            expr: Expression built so far (empty when omitted)
            extractor: Source of type names and properties for entities
        """
        self._expr = expr if expr is not None else CypherExpr.empty()
        self._extractor = extractor

    @property
    def expr(self) -> CypherExpr:
        """The expression built so far."""
        return self._expr

    @property
    def extractor(self) -> PropertyExtractor:
        """The property extractor used by create and relate clauses."""
        return self._extractor

    def with_extractor(self, extractor: PropertyExtractor) -> "CypherBuilder":
        """Return a builder using ``extractor`` for subsequent clauses."""
        return CypherBuilder(self._expr, extractor)

    def _extend(self, expr: CypherExpr) -> "CypherBuilder":
        return CypherBuilder(self._expr + expr, self._extractor)

    def _append(self, clause_type: ClauseType, text: str) -> "CypherBuilder":
        logger.debug("Appending clause", clause=clause_type.name)
        return self._extend(CypherExpr.clause(clause_type, text))

    def _node_clause(self, name: str, node_type: str, properties: Any) -> "CypherBuilder":
        text = f"CREATE ({escape_identifier(name)}:{escape_identifier(node_type)}{render_properties(properties)})"
        return self._append(ClauseType.CREATE, text)

    def raw(self, cypher_statement: str) -> "CypherBuilder":
        """Add a raw Cypher statement to the query without alteration.

        Args:
            cypher_statement: Statement text, emitted verbatim

        Returns:
            New builder with the statement appended
        """
        return self._append(ClauseType.RAW, cypher_statement)

    def create_empty(self, name: str, node_type: str) -> "CypherBuilder":
        """Create a node with a type but no properties.

        Args:
            name: Variable name for the node
            node_type: Node label

        Returns:
            New builder with ``CREATE (name:node_type)`` appended
        """
        return self._node_clause(name, node_type, ())

    def create_type(self, name: str, node_type: str, entity: Any) -> "CypherBuilder":
        """Create a node of the given label with the properties of ``entity``.

        The entity's own type name is ignored in favour of ``node_type``.

        Args:
            name: Variable name for the node
            node_type: Node label
            entity: Entity whose public fields become node properties

        Returns:
            New builder with the CREATE clause appended

        Raises:
            PropertyExtractionError: If the extractor cannot handle ``entity``
        """
        _, properties = self._extractor(entity)
        return self._node_clause(name, node_type, properties)

    def create(self, name: str, entity: Any) -> "CypherBuilder":
        """Create a node labelled and populated from ``entity``.

        Args:
            name: Variable name for the node
            entity: Entity supplying the label and properties

        Returns:
            New builder with the CREATE clause appended

        Example:
            ```python
            cypher.create("fred", Person(Name="Fred", Age=17)).build()
            # CREATE (fred:Person { Name: "Fred", Age: 17 })
            ```
        """
        node_type, properties = self._extractor(entity)
        return self._node_clause(name, node_type, properties)

    def match(self, pattern: str) -> "CypherBuilder":
        """Add a MATCH clause; ``pattern`` is emitted verbatim."""
        return self._append(ClauseType.MATCH, f"MATCH {pattern}")

    def optional_match(self, pattern: str) -> "CypherBuilder":
        """Add an OPTIONAL MATCH clause; ``pattern`` is emitted verbatim."""
        return self._append(ClauseType.OPTIONAL_MATCH, f"OPTIONAL MATCH {pattern}")

    def where(self, predicate: Callable[..., bool]) -> "CypherBuilder":
        """Add a WHERE clause for ``predicate``.

        Predicate translation is not supported: the clause body is the
        configured ``where_placeholder`` and ``predicate`` is ignored. Use
        ``where_raw`` to supply the condition text directly.
        """
        logger.warning(
            "Predicate translation is not supported; emitting placeholder",
            predicate=getattr(predicate, "__qualname__", repr(predicate)),
        )
        return self._append(ClauseType.WHERE, f"WHERE {settings.where_placeholder}")

    def where_raw(self, condition: str) -> "CypherBuilder":
        """Add a WHERE clause with ``condition`` emitted verbatim.

        Example:
            ```python
            cypher.match("(n:Person)").where_raw("n.Age > 18")
            ```
        """
        return self._append(ClauseType.WHERE, f"WHERE {condition}")

    def return_clause(self, *return_items: str) -> "CypherBuilder":
        """Add a RETURN clause.

        Args:
            *return_items: Items to return, emitted verbatim

        Returns:
            New builder with ``RETURN item1, item2`` appended

        Raises:
            ClauseArgumentError: If no items are given
        """
        if not return_items:
            error = ClauseArgumentError(
                "RETURN needs at least one item",
                details=ClauseErrorDetails(
                    source=__name__,
                    operation="return_clause",
                    clause=ClauseType.RETURN.name,
                ),
            )
            log_application_error(logger, error)
            raise error
        return self._append(ClauseType.RETURN, f"RETURN {', '.join(return_items)}")

    def _relationship_clause(
        self,
        clause_type: ClauseType,
        declaration: RelationshipDeclaration[Any],
        operation: str,
    ) -> "CypherBuilder":
        if not isinstance(declaration, RelationshipDeclaration):
            if isinstance(declaration, (LeftPartial, RightPartial)):
                message = "Relationship declaration is incomplete; finish it with '>> name' or 'name <<'"
            else:
                message = f"Expected a RelationshipDeclaration, got {type(declaration).__name__}"
            error = RelationshipShapeError(
                message,
                details=DeclarationErrorDetails(
                    source=__name__,
                    operation=operation,
                    received_type=type(declaration).__name__,
                ),
            )
            log_application_error(logger, error)
            raise error
        return self._append(clause_type, f"{clause_type.keyword} {declaration.render(self._extractor)}")

    def relate(self, declaration: RelationshipDeclaration[Any]) -> "CypherBuilder":
        """Create a relationship between two nodes named earlier in the query.

        Naming the created relationship is not supported; use ``raw`` for that.

        Args:
            declaration: Completed declaration, e.g. ``"a" - Rel(x) >> "b"``

        Returns:
            New builder with ``CREATE (a)-[:X]->(b)`` appended

        Raises:
            RelationshipShapeError: If ``declaration`` is not a completed declaration
        """
        return self._relationship_clause(ClauseType.CREATE, declaration, "relate")

    def relate_unique(self, declaration: RelationshipDeclaration[Any]) -> "CypherBuilder":
        """Like ``relate`` but emits ``CREATE UNIQUE``."""
        return self._relationship_clause(ClauseType.CREATE_UNIQUE, declaration, "relate_unique")

    def create_unique(self, cypher_statement: str) -> "CypherBuilder":
        """Add ``CREATE UNIQUE`` followed by ``cypher_statement`` verbatim."""
        return self._append(ClauseType.CREATE_UNIQUE, f"CREATE UNIQUE {cypher_statement}")

    def for_each(
        self,
        items: Iterable[T],
        body: Callable[[T], CypherExpr | SupportsExpr],
    ) -> "CypherBuilder":
        """Append ``body(item)`` for each item, evaluated when the query is built.

        Example:
            ```python
            cypher.for_each(people, lambda p: cypher.create(p.Name.lower(), p))
            ```
        """
        return self._extend(combinators.for_each(items, body))

    def while_loop(self, predicate: Callable[[], bool], body: CypherExpr | SupportsExpr) -> "CypherBuilder":
        """Append ``body`` while ``predicate()`` holds; the caller bounds the loop."""
        return self._extend(combinators.while_loop(predicate, body))

    def then(self, other: CypherExpr | SupportsExpr) -> "CypherBuilder":
        """Append another builder's (or expression's) clauses after these."""
        return self._extend(as_expr(other))

    def __add__(self, other: object) -> "CypherBuilder":
        if not isinstance(other, (CypherBuilder, CypherExpr)):
            return NotImplemented
        return self.then(other)

    def build(self, line_separator: str | None = None) -> str:
        """Build the query text.

        Args:
            line_separator: Text between clauses (defaults to the configured value)

        Returns:
            The assembled Cypher query
        """
        return self._expr.render(line_separator)

    def __repr__(self) -> str:
        return f"CypherBuilder(steps={len(self._expr.steps)})"


cypher = CypherBuilder()


def build(query: CypherBuilder | CypherExpr, line_separator: str | None = None) -> str:
    """Build a builder or expression into query text."""
    return as_expr(query).render(line_separator)
