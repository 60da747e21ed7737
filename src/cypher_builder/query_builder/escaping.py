"""String and identifier escaping for Cypher text.

Every name and every string literal that reaches query text goes through
one of these functions, so the output never contains raw unescaped input.
"""

import re

_STRING_ESCAPES: dict[str, str] = {
    "\t": "\\t",
    "\b": "\\b",
    "\r": "\\r",
    "\n": "\\n",
    "\f": "\\f",
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
}

_ESCAPE_TABLE = str.maketrans(_STRING_ESCAPES)

_BARE_IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9_]*")


def escape_string(text: str) -> str:
    """Escape the characters Cypher string literals cannot hold raw.

    Tab, backspace, carriage return, line feed, form feed, both quote
    characters and backslash are replaced by their backslash escapes.
    Everything else, non-ASCII included, passes through unchanged.

    Args:
        text: Raw text

    Returns:
        Escaped text, without surrounding quotes
    """
    return text.translate(_ESCAPE_TABLE)


def quote_string(text: str) -> str:
    """Escape ``text`` and wrap it in double quotes."""
    return f'"{escape_string(text)}"'


def is_bare_identifier(name: str) -> bool:
    """Check whether ``name`` can appear in a query without backticks."""
    return _BARE_IDENTIFIER.fullmatch(name) is not None


def escape_identifier(name: str) -> str:
    """Escape a variable, label, relationship type or property name.

    Names made of one ASCII letter followed by ASCII letters, digits or
    underscores are returned as-is. Anything else, including the empty
    string, is wrapped in backticks with inner backticks doubled.

    Args:
        name: Identifier to escape

    Returns:
        A token Cypher reads back as exactly ``name``

    Example:
        ```python
        escape_identifier("fred")  # fred
        escape_identifier("a`b")   # `a``b`
        ```
    """
    if is_bare_identifier(name):
        return name
    return "`" + name.replace("`", "``") + "`"
