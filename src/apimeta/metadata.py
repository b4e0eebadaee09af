"""Resource metadata value objects.

These are produced by extraction and stored unmodified in the extractor's
cache. ``None`` on an optional field means "not configured by this source",
which lets a decorating factory fill it from another one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class PropertyMetadata:
    """Metadata of a single resource property."""

    description: str | None = None
    readable: bool | None = None
    writable: bool | None = None
    readable_link: bool | None = None
    writable_link: bool | None = None
    required: bool | None = None
    identifier: bool | None = None
    iri: str | None = None
    attributes: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ResourceMetadata:
    """Metadata describing one API resource.

    Attributes:
        resource_class: Dotted identifier of the class exposed as a resource.
        short_name: Short name used in routes and documentation.
        description: Human readable description.
        iri: IRI of the resource type (e.g. a schema.org type).
        item_operations: Operation name to operation settings.
        collection_operations: Operation name to operation settings.
        subresource_operations: Operation name to operation settings.
        graphql: GraphQL operation name to operation settings.
        attributes: Free-form resource attributes.
        properties: Property name to PropertyMetadata.
    """

    resource_class: str
    short_name: str | None = None
    description: str | None = None
    iri: str | None = None
    item_operations: Mapping[str, Any] | None = None
    collection_operations: Mapping[str, Any] | None = None
    subresource_operations: Mapping[str, Any] | None = None
    graphql: Mapping[str, Any] | None = None
    attributes: Mapping[str, Any] | None = None
    properties: Mapping[str, PropertyMetadata] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def with_defaults(self, other: ResourceMetadata) -> ResourceMetadata:
        """Return a copy whose unset fields are taken from ``other``.

        Properties are merged by name; a property defined here wins.
        """
        overrides: dict[str, Any] = {}
        for f in fields(self):
            if f.name in ("resource_class", "properties"):
                continue
            if getattr(self, f.name) is None:
                overrides[f.name] = getattr(other, f.name)

        if other.properties:
            merged = dict(other.properties)
            merged.update(self.properties)
            overrides["properties"] = MappingProxyType(merged)

        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON-serializable representation."""
        return {
            "resource_class": self.resource_class,
            "short_name": self.short_name,
            "description": self.description,
            "iri": self.iri,
            "item_operations": _thaw(self.item_operations),
            "collection_operations": _thaw(self.collection_operations),
            "subresource_operations": _thaw(self.subresource_operations),
            "graphql": _thaw(self.graphql),
            "attributes": _thaw(self.attributes),
            "properties": {
                name: {f.name: _thaw(getattr(prop, f.name)) for f in fields(prop)}
                for name, prop in self.properties.items()
            },
        }


def freeze(value: Any) -> Any:
    """Recursively wrap mappings in read-only proxies and lists in tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value
