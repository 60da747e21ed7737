"""Centralized logging setup with Logfire integration.

Library modules log through the standard library ``logging`` tree, which
stays silent (``NullHandler``) until an application calls
``setup_logging()``. Logfire is configured via environment variables
(``LOGFIRE_TOKEN``, ``LOGFIRE_SERVICE_NAME``, ...).
"""

import logging
import sys

import logfire
import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder
from structlog.types import EventDict, Processor, WrappedLogger

from cypher_builder.core.config import CypherBuilderSettings, settings


def add_query_context(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add builder-specific context to log events.

    Args:
        _logger: The wrapped logger instance
        _method_name: The name of the logging method
        event_dict: The event dictionary

    Returns:
        The event dictionary with added context
    """
    if "error" in event_dict:
        event_dict["error_type"] = type(event_dict["error"]).__name__

    # Keep rendered queries on one line in console output
    query = event_dict.get("query")
    if isinstance(query, str) and "\n" in query:
        event_dict["query"] = query.replace("\n", " | ")

    return event_dict


def setup_logging(config: CypherBuilderSettings | None = None) -> None:
    """Set up logging with Logfire and structlog integration.

    Args:
        config: Settings to read the level and color options from
            (defaults to the module-level settings)
    """
    config = config or settings
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    processors: list[Processor] = [
        # Merge context from contextvars
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        CallsiteParameterAdder(
            parameters=[
                CallsiteParameter.FILENAME,
                CallsiteParameter.LINENO,
                CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_query_context,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        # MUST come before final renderer
        logfire.StructlogProcessor(),
        structlog.dev.ConsoleRenderer(colors=config.log_colors),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # Use PrintLogger to avoid double logging with standard library
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    # Route standard library logs through the same processors
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=config.log_colors),
        # Library loggers pass their key-value pairs as `extra`
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *processors[:-2]],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the standard library logger ``name``.

    Events below the stdlib logger's effective level are dropped before any
    processing; the rest are handed to ``logging`` with their key-value pairs
    as ``extra``, so they only appear where the application installed handlers.

    Args:
        name: The name of the logger (usually __name__)

    Returns:
        A structlog logger wrapping ``logging.getLogger(name)``
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
    )
