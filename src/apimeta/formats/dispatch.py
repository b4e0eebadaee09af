"""Routing of configuration paths to format adapters."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from apimeta.exceptions import InvalidResourceError
from apimeta.extractor import PathExtractor, Resolver
from apimeta.logging.context import source_context
from apimeta.metadata import ResourceMetadata

logger = logging.getLogger(__name__)


class FormatDispatcher:
    """PathExtractor that picks a format adapter by file suffix.

    Directories are expanded recursively to the files with a supported
    suffix, in sorted order. Hidden files and directories are skipped.
    """

    def __init__(self, adapters: Mapping[str, PathExtractor]) -> None:
        """Initialize the dispatcher.

        Args:
            adapters: File suffix (e.g. ".yaml") to adapter.
        """
        self._adapters = {suffix.lower(): adapter for suffix, adapter in adapters.items()}

    @property
    def suffixes(self) -> tuple[str, ...]:
        return tuple(sorted(self._adapters))

    def extract_path(self, path: str, resolve: Resolver) -> list[ResourceMetadata]:
        target = Path(path)
        if target.is_dir():
            resources: list[ResourceMetadata] = []
            for file_path in self.collect_files(target):
                with source_context(file_path):
                    resources.extend(self._extract_file(file_path, resolve))
            return resources

        if not target.exists():
            raise InvalidResourceError(path, "no such file or directory")
        return self._extract_file(target, resolve)

    def collect_files(self, directory: Path) -> list[Path]:
        """Return the supported files below ``directory``, sorted."""
        files = []
        for candidate in sorted(directory.rglob("*")):
            relative = candidate.relative_to(directory)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if candidate.is_file() and candidate.suffix.lower() in self._adapters:
                files.append(candidate)
        logger.debug("Found %d configuration file(s) in %s", len(files), directory)
        return files

    def _extract_file(self, path: Path, resolve: Resolver) -> list[ResourceMetadata]:
        adapter = self._adapters.get(path.suffix.lower())
        if adapter is None:
            raise InvalidResourceError(
                str(path),
                f"unsupported format '{path.suffix}', "
                f"expected one of: {', '.join(self.suffixes)}",
            )
        return list(adapter.extract_path(str(path), resolve))
