"""Structured logging for apimeta.

Provides configurable logging with JSON format support and file rotation.
Records emitted while a configuration path is extracted carry that path.
"""

from apimeta.logging.config import configure_logging
from apimeta.logging.context import (
    SourceContextFilter,
    get_source_context,
    source_context,
)
from apimeta.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "SourceContextFilter",
    "configure_logging",
    "get_source_context",
    "source_context",
]
