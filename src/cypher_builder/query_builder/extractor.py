"""Extraction of a type name and ordered properties from entities.

Clause operations never look inside entities themselves; they ask a
``PropertyExtractor`` for an ``ExtractedEntity``. The default extractor
understands pydantic models, dataclasses, named tuples and plain objects.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, NamedTuple, Protocol

from pydantic import BaseModel

from cypher_builder.core.base import ExtractionErrorDetails
from cypher_builder.core.errors import PropertyExtractionError, log_application_error
from cypher_builder.core.logging import get_logger
from cypher_builder.query_builder.properties import PropertyList

logger = get_logger(__name__)


class ExtractedEntity(NamedTuple):
    """Type name plus ordered properties of an entity."""

    type_name: str
    properties: PropertyList = ()

    @classmethod
    def of(cls, type_name: str, **properties: Any) -> "ExtractedEntity":
        """Build an entity from keyword properties, keeping their order."""
        return cls(type_name, tuple(properties.items()))


class PropertyExtractor(Protocol):
    """Protocol for turning an arbitrary entity into an ExtractedEntity."""

    def __call__(self, entity: Any) -> ExtractedEntity: ...


def _type_name(entity: Any) -> str:
    label = getattr(type(entity), "__cypher_label__", None)
    if isinstance(label, str):
        return label
    return type(entity).__name__


def _public(pairs: Any) -> tuple[tuple[str, Any], ...]:
    return tuple((name, value) for name, value in pairs if not name.startswith("_"))


def extract_properties(entity: Any) -> ExtractedEntity:
    """Extract the type name and public fields of ``entity``.

    Fields come out in declaration order (instance attribute insertion
    order for plain objects). Names starting with an underscore are skipped.
    A class attribute ``__cypher_label__`` overrides the type name.

    Args:
        entity: Entity to inspect

    Returns:
        The entity's type name and property list

    Raises:
        PropertyExtractionError: If the entity has no recognisable fields
    """
    if isinstance(entity, ExtractedEntity):
        return entity

    if isinstance(entity, BaseModel):
        names = type(entity).model_fields
        return ExtractedEntity(_type_name(entity), _public((name, getattr(entity, name)) for name in names))

    if dataclasses.is_dataclass(entity) and not isinstance(entity, type):
        fields = dataclasses.fields(entity)
        return ExtractedEntity(_type_name(entity), _public((f.name, getattr(entity, f.name)) for f in fields))

    if isinstance(entity, tuple) and hasattr(entity, "_fields"):
        return ExtractedEntity(_type_name(entity), _public(zip(entity._fields, entity, strict=True)))

    if not isinstance(entity, (type, Mapping, str, bytes)) and hasattr(entity, "__dict__"):
        return ExtractedEntity(_type_name(entity), _public(vars(entity).items()))

    entity_type = f"{type(entity).__module__}.{type(entity).__qualname__}"
    error = PropertyExtractionError(
        f"Cannot extract properties from {entity_type}; "
        "pass a model, dataclass, named tuple or ExtractedEntity",
        details=ExtractionErrorDetails(
            source=__name__,
            operation="extract_properties",
            entity_type=entity_type,
        ),
    )
    log_application_error(logger, error)
    raise error
