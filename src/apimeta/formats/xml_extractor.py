"""XML resource configuration."""

from __future__ import annotations

import logging
from typing import Any

from lxml import etree

from apimeta.exceptions import InvalidResourceError
from apimeta.extractor import Resolver
from apimeta.metadata import ResourceMetadata
from apimeta.schema import OPERATION_FIELDS, build_resource

logger = logging.getLogger(__name__)


class XmlPathExtractor:
    """Extract resources from an XML document.

    Example document::

        <resources>
          <resource class="app.entity.Book" short_name="Book">
            <item_operations>
              <operation name="get">
                <attribute name="method">GET</attribute>
              </operation>
            </item_operations>
            <attribute name="pagination_items_per_page">%per_page%</attribute>
            <property name="title" required="true"/>
          </resource>
        </resources>

    Values are kept as strings; booleans such as ``required="true"`` are
    converted during validation.
    """

    suffixes = (".xml",)

    def extract_path(self, path: str, resolve: Resolver) -> list[ResourceMetadata]:
        parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            load_dtd=False,
            remove_comments=True,
            remove_pis=True,
        )
        try:
            root = etree.parse(path, parser).getroot()
        except etree.XMLSyntaxError as e:
            raise InvalidResourceError(path, f"Invalid XML: {e}") from e

        if root.tag != "resources":
            raise InvalidResourceError(
                path, f"root element must be <resources>, got <{root.tag}>"
            )

        resources: list[ResourceMetadata] = []
        for element in root.iterchildren(tag=etree.Element):
            if element.tag != "resource":
                raise InvalidResourceError(
                    path, f"unexpected element <{element.tag}> in <resources>"
                )
            resource_class = element.get("class")
            if not resource_class:
                raise InvalidResourceError(
                    path, f'<resource> on line {element.sourceline} has no "class"'
                )
            definition = self._resource_definition(element, path)
            resources.append(
                build_resource(resolve(resource_class), resolve(definition), path)
            )

        logger.debug("Found %d resource definition(s)", len(resources))
        return resources

    def _resource_definition(self, element: Any, path: str) -> dict[str, Any]:
        definition: dict[str, Any] = {
            key: value for key, value in element.attrib.items() if key != "class"
        }

        for child in element.iterchildren(tag=etree.Element):
            if child.tag in OPERATION_FIELDS:
                definition[child.tag] = self._operations(child, path)
            elif child.tag == "attribute":
                attributes = definition.setdefault("attributes", {})
                attributes[self._name(child, path)] = self._attribute_value(child, path)
            elif child.tag == "property":
                properties = definition.setdefault("properties", {})
                properties[self._name(child, path)] = self._property(child, path)
            else:
                raise InvalidResourceError(
                    path,
                    f"unexpected element <{child.tag}> on line {child.sourceline}",
                )

        return definition

    def _operations(self, element: Any, path: str) -> dict[str, Any]:
        operations: dict[str, Any] = {}
        for child in element.iterchildren(tag=etree.Element):
            if child.tag != "operation":
                raise InvalidResourceError(
                    path,
                    f"unexpected element <{child.tag}> in <{element.tag}> "
                    f"on line {child.sourceline}",
                )
            operations[self._name(child, path)] = self._attributes(child, path)
        return operations

    def _property(self, element: Any, path: str) -> dict[str, Any]:
        prop: dict[str, Any] = {
            key: value for key, value in element.attrib.items() if key != "name"
        }
        attributes = self._attributes(element, path)
        if attributes:
            prop["attributes"] = attributes
        return prop

    def _attributes(self, element: Any, path: str) -> dict[str, Any]:
        attributes: dict[str, Any] = {}
        for child in element.iterchildren(tag=etree.Element):
            if child.tag != "attribute":
                raise InvalidResourceError(
                    path,
                    f"unexpected element <{child.tag}> in <{element.tag}> "
                    f"on line {child.sourceline}",
                )
            attributes[self._name(child, path)] = self._attribute_value(child, path)
        return attributes

    def _attribute_value(self, element: Any, path: str) -> Any:
        """Return text for a leaf, a mapping for named children, else a list."""
        children = list(element.iterchildren(tag=etree.Element))
        if not children:
            return (element.text or "").strip()

        if any(child.tag != "attribute" for child in children):
            raise InvalidResourceError(
                path, f"<attribute> on line {element.sourceline} has non-attribute children"
            )

        named = [child.get("name") is not None for child in children]
        if all(named):
            return {
                child.get("name"): self._attribute_value(child, path)
                for child in children
            }
        if not any(named):
            return [self._attribute_value(child, path) for child in children]
        raise InvalidResourceError(
            path,
            f"<attribute> on line {element.sourceline} mixes named and unnamed children",
        )

    def _name(self, element: Any, path: str) -> str:
        name = element.get("name")
        if not name:
            raise InvalidResourceError(
                path, f'<{element.tag}> on line {element.sourceline} has no "name"'
            )
        return name
