"""Rendering of property blocks like ``{ name: "Fred", age: 17 }``."""

from collections.abc import Sequence
from typing import Any

from cypher_builder.query_builder.escaping import escape_identifier
from cypher_builder.query_builder.literals import to_cypher_literal

PropertyList = Sequence[tuple[str, Any]]


def render_properties(properties: PropertyList) -> str:
    """Render an ordered property list as a Cypher property block.

    An empty list renders as the empty string, so templates append the
    block directly after a label or relationship type. Pairs are emitted in
    the order given; nothing is sorted or deduplicated.

    Args:
        properties: Sequence of (name, value) pairs

    Returns:
        ``""`` or `` { name1: literal1, name2: literal2 }``
    """
    if not properties:
        return ""
    pairs = ", ".join(f"{escape_identifier(name)}: {to_cypher_literal(value)}" for name, value in properties)
    return f" {{ {pairs} }}"
