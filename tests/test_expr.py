"""Tests for the expression combinators."""

import pytest

from cypher_builder.core.errors import ClauseArgumentError
from cypher_builder.query_builder.expr import (
    CypherExpr,
    QueryBuffer,
    empty,
    for_each,
    sequence,
    while_loop,
)
from cypher_builder.query_builder.state import ClauseType


def line(text: str) -> CypherExpr:
    return CypherExpr.clause(ClauseType.RAW, text)


A, B, C = line("A"), line("B"), line("C")


class TestMonoid:
    def test_empty_renders_nothing(self):
        assert empty().render() == ""
        assert CypherExpr.empty() is empty()

    def test_associativity(self):
        assert ((A + B) + C).render() == (A + (B + C)).render() == "A\nB\nC"

    def test_identity(self):
        assert (empty() + A).render() == A.render() == (A + empty()).render()

    def test_sequence_matches_addition(self):
        assert sequence(A, B, C).render() == (A + B + C).render()
        assert sequence().render() == ""

    def test_composition_does_not_mutate(self):
        combined = A.then(B)
        assert A.render() == "A"
        assert combined.render() == "A\nB"

    def test_adding_non_expression_fails(self):
        with pytest.raises(TypeError):
            A + "B"

    def test_sequence_rejects_foreign_objects(self):
        with pytest.raises(ClauseArgumentError):
            sequence(A, object())


class TestNewlineDiscipline:
    def test_no_leading_blank_line(self):
        assert (A + B).render() == "A\nB"

    def test_custom_separator(self):
        assert (A + B).render(line_separator="\r\n") == "A\r\nB"

    def test_empty_first_clause_adds_no_separator(self):
        assert (line("") + B).render() == "B"

    def test_buffer_records_clause_types(self):
        buffer = QueryBuffer()
        (A + CypherExpr.clause(ClauseType.MATCH, "MATCH (n)")).run(buffer)
        assert buffer.clauses == [ClauseType.RAW, ClauseType.MATCH]
        assert buffer.getvalue() == "A\nMATCH (n)"


class TestLoops:
    def test_for_each_in_order(self):
        expr = for_each(["x", "y", "z"], line)
        assert expr.render() == "x\ny\nz"

    def test_for_each_empty_is_noop(self):
        assert (A + for_each([], line) + B).render() == "A\nB"

    def test_for_each_deferred_until_render(self):
        calls = []

        def body(item):
            calls.append(item)
            return line(item)

        expr = for_each(["a"], body)
        assert calls == []
        expr.render()
        assert calls == ["a"]

    def test_for_each_over_generator_renders_every_time(self):
        expr = for_each((name for name in ["a", "b"]), line)
        assert expr.render() == "a\nb"
        assert expr.render() == "a\nb"

    def test_while_loop_checks_predicate_each_time(self):
        answers = iter([True, True, False])
        expr = while_loop(lambda: next(answers), line("again"))
        assert expr.render() == "again\nagain"

    def test_while_loop_false_predicate(self):
        assert while_loop(lambda: False, A).render() == ""
