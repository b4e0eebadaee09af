"""YAML resource configuration."""

from __future__ import annotations

import logging
from typing import Any

import yaml

from apimeta.exceptions import InvalidResourceError
from apimeta.extractor import Resolver
from apimeta.metadata import ResourceMetadata
from apimeta.schema import build_resource

logger = logging.getLogger(__name__)


class YamlPathExtractor:
    """Extract resources from a YAML document.

    The document maps resource classes to their definitions, either at the
    top level or under a ``resources`` key::

        resources:
          app.entity.Book:
            short_name: Book
            attributes:
              pagination_items_per_page: "%per_page%"
          app.entity.Author: ~
    """

    suffixes = (".yaml", ".yml")

    def extract_path(self, path: str, resolve: Resolver) -> list[ResourceMetadata]:
        try:
            with open(path, encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidResourceError(path, f"Invalid YAML: {e}") from e

        resources = self._resource_definitions(document, path)
        logger.debug("Found %d resource definition(s)", len(resources))

        return [
            build_resource(resolve(resource_class), resolve(definition), path)
            for resource_class, definition in resources.items()
        ]

    def _resource_definitions(self, document: Any, path: str) -> dict[str, Any]:
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise InvalidResourceError(
                path, f"expected a mapping of resources, got {type(document).__name__}"
            )

        resources = document.get("resources", document)
        if resources is None:
            return {}
        if not isinstance(resources, dict):
            raise InvalidResourceError(
                path,
                f'"resources" must be a mapping, got {type(resources).__name__}',
            )

        for resource_class in resources:
            if not isinstance(resource_class, str):
                raise InvalidResourceError(
                    path, f"resource class must be a string, got {resource_class!r}"
                )
        return resources
