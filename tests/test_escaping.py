"""Tests for identifier and string escaping."""

import pytest

from cypher_builder.query_builder.escaping import (
    escape_identifier,
    escape_string,
    is_bare_identifier,
    quote_string,
)


class TestEscapeIdentifier:
    """Bare identifiers pass through, everything else gets backticks."""

    @pytest.mark.parametrize("name", ["fred", "F", "Person", "a1", "snake_case_2", "KNOWS"])
    def test_bare_identifiers_unchanged(self, name):
        assert escape_identifier(name) == name

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a-b", "`a-b`"),
            ("123", "`123`"),
            ("", "``"),
            ("_private", "`_private`"),
            ("my node", "`my node`"),
            ("héllo", "`héllo`"),
        ],
    )
    def test_other_names_wrapped(self, name, expected):
        assert escape_identifier(name) == expected

    def test_backticks_doubled(self):
        assert escape_identifier("a`b") == "`a``b`"
        assert escape_identifier("``") == "``````"

    def test_trailing_newline_is_not_bare(self):
        assert not is_bare_identifier("fred\n")
        assert escape_identifier("fred\n") == "`fred\n`"


class TestEscapeString:
    """Every entry of the escape table is applied."""

    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("\t", "\\t"),
            ("\b", "\\b"),
            ("\r", "\\r"),
            ("\n", "\\n"),
            ("\f", "\\f"),
            ("'", "\\'"),
            ('"', '\\"'),
            ("\\", "\\\\"),
        ],
    )
    def test_single_characters(self, raw, escaped):
        assert escape_string(raw) == escaped

    def test_every_occurrence_escaped(self):
        assert escape_string('a"b"c\n\n') == 'a\\"b\\"c\\n\\n'

    def test_other_characters_pass_through(self):
        assert escape_string("plain ünïcödé ✓ `") == "plain ünïcödé ✓ `"

    def test_quote_string_wraps_in_double_quotes(self):
        assert quote_string("it's") == "\"it\\'s\""
        assert quote_string("") == '""'
