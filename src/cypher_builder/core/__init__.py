from .base import ApplicationError, ErrorCode, ErrorLevel
from .config import CypherBuilderSettings, settings
from .errors import (
    ClauseArgumentError,
    PropertyExtractionError,
    RelationshipShapeError,
)
