"""Environment variable reader with dependency injection support.

This module provides the EnvReader class for reading and parsing environment
variables. It accepts an optional env mapping so tests do not have to touch
os.environ.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvReader:
    """Environment variable reader with type conversion.

    Example:
        # Production usage (reads from os.environ)
        reader = EnvReader()
        level = reader.get_str("APIMETA_LOG_LEVEL")

        # Testing usage (inject custom env)
        reader = EnvReader(env={"APIMETA_PATHS": "a.yaml:b.xml"})
        paths = reader.get_path_list("APIMETA_PATHS")
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the environment reader.

        Args:
            env: Optional mapping to use instead of os.environ.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string from environment variable, or default if not set."""
        value = self._env.get(var)
        if value is None:
            return default
        return value

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Get a boolean from environment variable.

        "true", "1", "yes" and "on" (case-insensitive) are true; every
        other non-empty value is false.
        """
        value = self._env.get(var)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")

    def get_path(self, var: str, default: Path | None = None) -> Path | None:
        """Get a path (tilde expanded) from environment variable."""
        value = self._env.get(var)
        if not value:
            return default
        return Path(value).expanduser()

    def get_path_list(
        self, var: str, separator: str = ":", default: list[Path] | None = None
    ) -> list[Path]:
        """Get a list of paths from environment variable.

        Parses a separator-delimited string into a list of Path objects.
        Each path is expanded (tilde expansion); empty parts are dropped.

        Args:
            var: Environment variable name.
            separator: Delimiter between paths. Defaults to ":".
            default: Default value if not set. Defaults to empty list.

        Returns:
            List of Path objects.
        """
        value = self._env.get(var)
        if value is None:
            return default if default is not None else []

        paths: list[Path] = []
        for part in value.split(separator):
            part = part.strip()
            if part:
                paths.append(Path(part).expanduser())
        return paths
