"""Resource extraction orchestration.

``ResourceExtractor`` walks a fixed list of configuration paths once,
delegating each path to a ``PathExtractor`` (one per configuration
format), and memoizes the resulting resource metadata for the lifetime of
the instance.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from apimeta.exceptions import MetadataError
from apimeta.logging.context import source_context
from apimeta.metadata import ResourceMetadata
from apimeta.parameters import ParameterSource
from apimeta.resolver import Resolution, resolve_placeholders

logger = logging.getLogger(__name__)

Resolver = Callable[[Any], Any]


@runtime_checkable
class PathExtractor(Protocol):
    """Capability that turns one configuration path into resources."""

    def extract_path(
        self, path: str, resolve: Resolver
    ) -> Iterable[ResourceMetadata]:
        """Extract resource metadata from ``path``.

        Args:
            path: Location of the configuration (file or directory).
            resolve: Callback replacing placeholders in a raw value. Must be
                called on every raw value that may contain placeholders.

        Implementations must not call back into the ResourceExtractor that
        is extracting them; such a call raises MetadataError.

        Returns:
            Resources in document order.

        Raises:
            InvalidResourceError: If the content is malformed.
            OSError: If the content cannot be read.
        """
        ...


class ResourceExtractor:
    """Extracts and caches resource metadata from configuration paths.

    The cache is filled on the first successful ``get_resources()`` call
    and never invalidated. A failed extraction leaves it empty, so the
    next call starts over.

    Example:
        extractor = ResourceExtractor(
            ["config/resources.yaml"],
            build_default_dispatcher(),
            parameters=MappingParameterSource({"per_page": 30}),
        )
        for resource in extractor.get_resources():
            print(resource.resource_class)
    """

    def __init__(
        self,
        paths: Sequence[str],
        path_extractor: PathExtractor,
        parameters: ParameterSource | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            paths: Configuration paths, extracted in order.
            path_extractor: Format adapter used for every path.
            parameters: Source for placeholder values. None disables
                placeholder resolution.
        """
        self._paths = tuple(str(path) for path in paths)
        self._path_extractor = path_extractor
        self._parameters = parameters
        self._resources: tuple[ResourceMetadata, ...] | None = None
        self._collected_parameters: Mapping[str, Any] = MappingProxyType({})
        self._lock = threading.RLock()
        self._extracting = False

    @property
    def paths(self) -> tuple[str, ...]:
        return self._paths

    @property
    def parameters(self) -> ParameterSource | None:
        return self._parameters

    @property
    def collected_parameters(self) -> Mapping[str, Any]:
        """Parameters substituted while extracting, empty until extracted."""
        return self._collected_parameters

    def resolve(self, value: Any) -> Resolution:
        """Resolve placeholders in ``value`` against this extractor's parameters.

        Does not touch ``collected_parameters``.
        """
        return resolve_placeholders(value, self._parameters)

    def get_resources(self) -> tuple[ResourceMetadata, ...]:
        """Return the resources of every configured path.

        Returns:
            Resources in path order, then document order.

        Raises:
            MetadataError: If a path cannot be extracted or resolved.
            OSError: If a path cannot be read.
        """
        # Fast path once populated
        resources = self._resources
        if resources is not None:
            return resources

        with self._lock:
            if self._resources is not None:
                return self._resources
            # Only the extracting thread can get here while the flag is set
            if self._extracting:
                raise MetadataError(
                    "get_resources() was called by a path extractor while "
                    "resources were being extracted"
                )
            self._extracting = True
            try:
                self._extract()
            finally:
                self._extracting = False

        logger.info(
            "Extracted %d resource(s) from %d path(s)",
            len(self._resources),
            len(self._paths),
        )
        return self._resources

    def _extract(self) -> None:
        accumulator: list[ResourceMetadata] = []
        collected: dict[str, Any] = {}

        def resolve(value: Any) -> Any:
            resolution = resolve_placeholders(value, self._parameters)
            collected.update(resolution.parameters)
            return resolution.value

        for path in self._paths:
            with source_context(path):
                logger.debug("Extracting resources from %s", path)
                accumulator.extend(self._path_extractor.extract_path(path, resolve))

        # Committed together, only once every path succeeded
        self._collected_parameters = MappingProxyType(collected)
        self._resources = tuple(accumulator)
