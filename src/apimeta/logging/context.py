"""Source context for structured logging.

Tracks the configuration path currently being extracted using contextvars,
so log records emitted by format adapters can be traced back to a file.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_source_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "source_path", default=None
)


@contextmanager
def source_context(path: Path | str) -> Generator[None, None, None]:
    """Context manager marking ``path`` as the source being extracted.

    The previous value is restored on exit, so contexts nest.

    Example:
        with source_context("config/resources.yaml"):
            logger.debug("Parsing")  # record.source_path is set
    """
    token = _source_path.set(str(path))
    try:
        yield
    finally:
        _source_path.reset(token)


def get_source_context() -> str | None:
    """Return the path currently being extracted, or None."""
    return _source_path.get()


class SourceContextFilter(logging.Filter):
    """Logging filter that injects the source path into log records.

    Adds ``source_path`` for JSON output and a compact ``source_tag``
    like ``[resources.yaml] `` for text output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        source_path = get_source_context()
        record.source_path = source_path
        if source_path:
            record.source_tag = f"[{Path(source_path).name}] "
        else:
            record.source_tag = ""
        return True  # Never filter out records
