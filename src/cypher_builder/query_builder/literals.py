"""Conversion of Python values into Cypher literal text."""

import base64
import math
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from cypher_builder.query_builder.escaping import quote_string

# Range of Cypher's native INTEGER type; larger values are emitted as strings
MIN_CYPHER_INTEGER = -(2**63)
MAX_CYPHER_INTEGER = 2**63 - 1


def _encode_datetime(value: datetime) -> str:
    if value.tzinfo is None or value.utcoffset() is None:
        # Naive timestamps are taken as local time, like an offset-less clock reading
        try:
            value = value.astimezone()
        except (OverflowError, ValueError):
            # Local offset pushes the value past datetime.min/max; emit it offset-less
            return quote_string(value.isoformat())
    return quote_string(value.isoformat())


def to_cypher_literal(value: Any) -> str:
    """Encode a Python value as Cypher literal text.

    This never raises: values of unrecognised types are rendered as the
    quoted, escaped result of ``str(value)``.

    Args:
        value: Value to encode

    Returns:
        Literal text ready to embed in a query

    Example:
        ```python
        to_cypher_literal(17)          # 17
        to_cypher_literal(True)        # true
        to_cypher_literal('say "hi"')  # "say \\"hi\\""
        ```
    """
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, int):
        if MIN_CYPHER_INTEGER <= value <= MAX_CYPHER_INTEGER:
            return str(value)
        return quote_string(str(value))

    if isinstance(value, float):
        if math.isfinite(value):
            return str(value)
        return quote_string(str(value))

    if isinstance(value, Decimal):
        if value.is_finite():
            return str(value)
        return quote_string(str(value))

    if isinstance(value, str):
        return quote_string(value)

    if isinstance(value, datetime):
        return _encode_datetime(value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        return quote_string(base64.b64encode(value).decode("ascii"))

    if isinstance(value, UUID):
        return quote_string(str(value))

    return quote_string(str(value))
