"""Specific error types for the Cypher builder."""

from typing import Any

from .base import (
    ApplicationError,
    ClauseErrorDetails,
    DeclarationErrorDetails,
    ErrorCode,
    ErrorLevel,
    ExtractionErrorDetails,
)


class PropertyExtractionError(ApplicationError):
    """An entity's type name and properties could not be extracted."""

    def __init__(self, message: str, details: ExtractionErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.EXTRACTION_FAILED,
            level=ErrorLevel.ERROR,
            details=details or ExtractionErrorDetails(
                source="extractor",
                operation="extract_properties",
                entity_type="unknown"
            )
        )


class RelationshipShapeError(ApplicationError):
    """Something other than a completed relationship declaration reached a relate clause."""

    def __init__(self, message: str, details: DeclarationErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_DECLARATION,
            level=ErrorLevel.ERROR,
            details=details or DeclarationErrorDetails(
                source="builder",
                operation="relate",
                received_type="unknown"
            )
        )


class ClauseArgumentError(ApplicationError):
    """A clause was given arguments it cannot render."""

    def __init__(self, message: str, details: ClauseErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_INPUT,
            level=ErrorLevel.WARNING,
            details=details
        )


def log_application_error(logger: Any, error: ApplicationError) -> None:
    """Log ``error`` at the logging level matching its ErrorLevel.

    Args:
        logger: Structured logger to write to
        error: Error about to be raised
    """
    logger.log(
        error.level.to_logging_level(),
        error.message,
        error_code=error.code.value,
        **error.details.model_dump(exclude={"timestamp"}),
    )
