"""Resource metadata factories."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from apimeta.exceptions import ResourceClassNotFoundError
from apimeta.extractor import ResourceExtractor
from apimeta.metadata import ResourceMetadata


@runtime_checkable
class ResourceMetadataFactory(Protocol):
    """Creates the metadata of a resource class."""

    def create(self, resource_class: str) -> ResourceMetadata:
        """Return metadata for ``resource_class``.

        Raises:
            ResourceClassNotFoundError: If the class is not a resource.
        """
        ...


class ExtractorResourceMetadataFactory:
    """Factory reading metadata from a ResourceExtractor.

    When a class is defined more than once, the last definition wins. An
    optional parent factory supplies classes this extractor does not know
    and fills the fields a local definition leaves unset.
    """

    def __init__(
        self,
        extractor: ResourceExtractor,
        parent: ResourceMetadataFactory | None = None,
    ) -> None:
        self._extractor = extractor
        self._parent = parent

    def create(self, resource_class: str) -> ResourceMetadata:
        local = self._find(resource_class)

        if local is None:
            if self._parent is None:
                raise ResourceClassNotFoundError(resource_class)
            return self._parent.create(resource_class)

        if self._parent is None:
            return local

        try:
            inherited = self._parent.create(resource_class)
        except ResourceClassNotFoundError:
            return local
        return local.with_defaults(inherited)

    def resource_classes(self) -> list[str]:
        """Return the extracted resource classes in first-seen order."""
        return list(
            dict.fromkeys(
                resource.resource_class for resource in self._extractor.get_resources()
            )
        )

    def _find(self, resource_class: str) -> ResourceMetadata | None:
        found = None
        for resource in self._extractor.get_resources():
            if resource.resource_class == resource_class:
                found = resource
        return found
