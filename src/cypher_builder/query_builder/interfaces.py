"""Query builder interfaces.

This module defines the protocols the expression engine writes through and
accepts, decoupling expressions from the concrete buffer and builder classes.
"""

from typing import TYPE_CHECKING, Protocol

from cypher_builder.query_builder.state import ClauseType

if TYPE_CHECKING:
    from cypher_builder.query_builder.expr import CypherExpr


class QueryPartAppender(Protocol):
    """Protocol for the sink an expression writes into when rendered."""

    def start_clause(self, clause_type: ClauseType) -> None:
        """Begin a new clause, moving to a fresh line if anything was written.

        Args:
            clause_type: The type of clause being started
        """
        ...

    def append_query_part(self, part: str) -> None:
        """Append text to the current clause.

        Args:
            part: The query text to append
        """
        ...


class SupportsExpr(Protocol):
    """Protocol for objects that wrap a CypherExpr, such as builders."""

    @property
    def expr(self) -> "CypherExpr":
        """The expression this object describes."""
        ...
