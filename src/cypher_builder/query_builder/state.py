"""Clause kinds emitted by the Cypher builder."""

from enum import Enum, auto


class ClauseType(Enum):
    """Enum for Cypher clause types."""

    # Passed through unchanged
    RAW = auto()

    # Reading
    MATCH = auto()
    OPTIONAL_MATCH = auto()
    WHERE = auto()
    RETURN = auto()

    # Writing
    CREATE = auto()
    CREATE_UNIQUE = auto()

    @property
    def keyword(self) -> str:
        """Cypher keyword that opens this clause ("" for raw text)."""
        return _KEYWORDS[self]


_KEYWORDS: dict[ClauseType, str] = {
    ClauseType.RAW: "",
    ClauseType.MATCH: "MATCH",
    ClauseType.OPTIONAL_MATCH: "OPTIONAL MATCH",
    ClauseType.WHERE: "WHERE",
    ClauseType.RETURN: "RETURN",
    ClauseType.CREATE: "CREATE",
    ClauseType.CREATE_UNIQUE: "CREATE UNIQUE",
}
