"""Composable query expressions.

A ``CypherExpr`` describes "append some clause text to a buffer" without
doing it. Expressions combine with ``+`` (or ``then``/``sequence``) into
longer expressions, ``CypherExpr.empty()`` is the identity, and nothing is
written until ``render`` runs the whole chain once against a fresh buffer.
"""

import io
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeVar

from cypher_builder.core.base import ClauseErrorDetails
from cypher_builder.core.config import settings
from cypher_builder.core.errors import ClauseArgumentError, log_application_error
from cypher_builder.core.logging import get_logger
from cypher_builder.query_builder.interfaces import QueryPartAppender, SupportsExpr
from cypher_builder.query_builder.state import ClauseType

logger = get_logger(__name__)

T = TypeVar("T")

Step = Callable[[QueryPartAppender], None]


class QueryBuffer:
    """Line-structured text sink that expressions render into."""

    def __init__(self, line_separator: str = "\n") -> None:
        self._out = io.StringIO()
        self._line_separator = line_separator
        self.clauses: list[ClauseType] = []

    def start_clause(self, clause_type: ClauseType) -> None:
        if self._out.tell() > 0:
            self._out.write(self._line_separator)
        self.clauses.append(clause_type)

    def append_query_part(self, part: str) -> None:
        self._out.write(part)

    def getvalue(self) -> str:
        return self._out.getvalue()


@dataclass(frozen=True, slots=True)
class CypherExpr:
    """Immutable, ordered list of buffer-writing steps.

    Composition concatenates steps, so it is associative and the empty
    expression is a two-sided identity.
    """

    steps: tuple[Step, ...] = ()

    @classmethod
    def empty(cls) -> "CypherExpr":
        """Expression that appends nothing."""
        return _EMPTY

    @classmethod
    def clause(cls, clause_type: ClauseType, text: str) -> "CypherExpr":
        """Expression that appends ``text`` as one clause on its own line."""

        def write(buffer: QueryPartAppender) -> None:
            buffer.start_clause(clause_type)
            buffer.append_query_part(text)

        return cls((write,))

    def then(self, other: "CypherExpr") -> "CypherExpr":
        """Append ``other`` after this expression."""
        if not other.steps:
            return self
        if not self.steps:
            return other
        return CypherExpr(self.steps + other.steps)

    def __add__(self, other: object) -> "CypherExpr":
        if not isinstance(other, CypherExpr):
            return NotImplemented
        return self.then(other)

    def __bool__(self) -> bool:
        return bool(self.steps)

    def run(self, buffer: QueryPartAppender) -> None:
        """Write every step into ``buffer`` in order."""
        for step in self.steps:
            step(buffer)

    def render(self, line_separator: str | None = None) -> str:
        """Run the expression once against a fresh buffer.

        Args:
            line_separator: Text placed between clauses (defaults to the
                configured ``line_separator``)

        Returns:
            The assembled query text
        """
        buffer = QueryBuffer(line_separator if line_separator is not None else settings.line_separator)
        self.run(buffer)
        query = buffer.getvalue()
        logger.debug(
            "Rendered Cypher query",
            clauses=[clause.name for clause in buffer.clauses],
            query=query,
        )
        return query


_EMPTY = CypherExpr()


def as_expr(value: CypherExpr | SupportsExpr) -> CypherExpr:
    """Unwrap a builder (or anything with an ``expr`` attribute) into an expression."""
    if isinstance(value, CypherExpr):
        return value
    expr = getattr(value, "expr", None)
    if isinstance(expr, CypherExpr):
        return expr
    error = ClauseArgumentError(
        f"Expected a CypherExpr or builder, got {type(value).__name__}",
        details=ClauseErrorDetails(
            source=__name__,
            operation="as_expr",
            clause="composition",
            argument=type(value).__name__,
        ),
    )
    log_application_error(logger, error)
    raise error


def empty() -> CypherExpr:
    """Expression that appends nothing."""
    return _EMPTY


def sequence(*exprs: CypherExpr | SupportsExpr) -> CypherExpr:
    """Concatenate expressions left to right."""
    result = _EMPTY
    for expr in exprs:
        result = result.then(as_expr(expr))
    return result


def for_each(items: Iterable[T], body: Callable[[T], CypherExpr | SupportsExpr]) -> CypherExpr:
    """Expression that appends ``body(item)`` for every item, in order.

    ``items`` is copied when the expression is built, so one-shot iterators
    render the same clauses every time; ``body`` runs at render time.
    Passing an unbounded iterable never returns.

    Args:
        items: Finite iterable of items
        body: Function producing the expression for one item

    Returns:
        A single expression covering all items (no-op when ``items`` is empty)
    """
    snapshot = tuple(items)

    def write(buffer: QueryPartAppender) -> None:
        for item in snapshot:
            as_expr(body(item)).run(buffer)

    return CypherExpr((write,))


def while_loop(predicate: Callable[[], bool], body: CypherExpr | SupportsExpr) -> CypherExpr:
    """Expression that appends ``body`` for as long as ``predicate()`` holds.

    The predicate is checked before each iteration at render time. Bounding
    it is up to the caller: an always-true predicate never returns.
    """
    body_expr = as_expr(body)

    def write(buffer: QueryPartAppender) -> None:
        while predicate():
            body_expr.run(buffer)

    return CypherExpr((write,))
