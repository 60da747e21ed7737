"""Structured logging module.

This module provides utilities for structured logging using structlog and logfire.
"""

import logging

from .setup import get_logger, setup_logging

# Silent until the application configures logging
logging.getLogger("cypher_builder").addHandler(logging.NullHandler())

__all__ = [
    "get_logger",
    "setup_logging",
]
