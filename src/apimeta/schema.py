"""Validation of raw resource definitions.

Format adapters turn their documents into plain mappings (one per
resource), resolve placeholders in them, and hand them to
``build_resource`` which validates them with Pydantic and produces the
frozen ``ResourceMetadata`` value.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from apimeta.exceptions import InvalidResourceError
from apimeta.metadata import PropertyMetadata, ResourceMetadata, freeze

OPERATION_FIELDS = (
    "item_operations",
    "collection_operations",
    "subresource_operations",
    "graphql",
)


class PropertyModel(BaseModel):
    """Pydantic model for a property definition."""

    model_config = ConfigDict(extra="forbid")

    description: str | None = None
    readable: bool | None = None
    writable: bool | None = None
    readable_link: bool | None = None
    writable_link: bool | None = None
    required: bool | None = None
    identifier: bool | None = None
    iri: str | None = None
    attributes: dict[str, Any] | None = None


class ResourceModel(BaseModel):
    """Pydantic model for a resource definition."""

    model_config = ConfigDict(extra="forbid")

    short_name: str | None = None
    description: str | None = None
    iri: str | None = None
    item_operations: dict[str, Any] | None = None
    collection_operations: dict[str, Any] | None = None
    subresource_operations: dict[str, Any] | None = None
    graphql: dict[str, Any] | None = None
    attributes: dict[str, Any] | None = None
    properties: dict[str, PropertyModel | None] | None = None

    @field_validator(*OPERATION_FIELDS, mode="before")
    @classmethod
    def normalize_operations(cls, v: Any) -> Any:
        """Accept a list of operation names as shorthand for empty settings."""
        if isinstance(v, (list, tuple)):
            operations: dict[str, Any] = {}
            for item in v:
                if not isinstance(item, str):
                    raise ValueError(
                        f"Operation names must be strings, got {type(item).__name__}"
                    )
                operations[item] = {}
            return operations
        return v

    @field_validator(*OPERATION_FIELDS)
    @classmethod
    def validate_operation_settings(
        cls, v: dict[str, Any] | None
    ) -> dict[str, Any] | None:
        """Replace null operation settings with an empty mapping."""
        if v is None:
            return v
        normalized: dict[str, Any] = {}
        for name, settings in v.items():
            if settings is None:
                settings = {}
            if not isinstance(settings, dict):
                raise ValueError(
                    f"Settings of operation '{name}' must be a mapping, "
                    f"got {type(settings).__name__}"
                )
            normalized[name] = settings
        return normalized


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def _build_property(model: PropertyModel) -> PropertyMetadata:
    return PropertyMetadata(
        **{key: freeze(value) for key, value in model.model_dump().items()}
    )


def build_resource(
    resource_class: str, data: dict[str, Any] | None, path: str
) -> ResourceMetadata:
    """Validate a resolved resource definition and build its metadata.

    Args:
        resource_class: Identifier of the resource class.
        data: The resource definition, or None for an empty one.
        path: Source the definition came from, for error messages.

    Returns:
        Frozen ResourceMetadata.

    Raises:
        InvalidResourceError: If the definition is malformed.
    """
    if not resource_class:
        raise InvalidResourceError(path, "resource class must not be empty")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidResourceError(
            path,
            f'resource "{resource_class}" must be a mapping, '
            f"got {type(data).__name__}",
        )

    try:
        model = ResourceModel.model_validate(data)
    except ValidationError as e:
        raise InvalidResourceError(
            path,
            f'invalid resource "{resource_class}": {_format_validation_error(e)}',
        ) from e

    properties = {
        name: _build_property(prop if prop is not None else PropertyModel())
        for name, prop in (model.properties or {}).items()
    }

    return ResourceMetadata(
        resource_class=resource_class,
        short_name=model.short_name,
        description=model.description,
        iri=model.iri,
        item_operations=freeze(model.item_operations),
        collection_operations=freeze(model.collection_operations),
        subresource_operations=freeze(model.subresource_operations),
        graphql=freeze(model.graphql),
        attributes=freeze(model.attributes),
        properties=MappingProxyType(properties),
    )
