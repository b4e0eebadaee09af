"""Logging configuration for apimeta.

``configure_logging`` replaces the root logger's handlers with a log file
and/or stderr handler built from a LoggingConfig.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from apimeta.logging.context import SourceContextFilter
from apimeta.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from apimeta.config.models import LoggingConfig

# Log files rotate at 10MB, keeping five old files
ROTATE_MAX_BYTES = 10 * 1024 * 1024
ROTATE_BACKUP_COUNT = 5

TEXT_FORMAT = "%(asctime)s - %(source_tag)s%(name)s - %(levelname)s - %(message)s"


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.casefold() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")


def _open_log_file(path: Path) -> logging.Handler | None:
    """Return a rotating handler for ``path``, or None if it cannot be opened."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=ROTATE_MAX_BYTES,
            backupCount=ROTATE_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from ``config``.

    Records go to the log file when one is configured and can be opened,
    and to stderr otherwise or when ``include_stderr`` is set. Every
    handler tags records with the configuration path being extracted.
    """
    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_log_file(Path(config.file).expanduser())
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = _build_formatter(config.format)
    source_filter = SourceContextFilter()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(source_filter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(config.level.upper())
    for handler in handlers:
        root_logger.addHandler(handler)
