"""Tests for resource definition validation."""

from __future__ import annotations

import pytest

from apimeta.exceptions import InvalidResourceError
from apimeta.metadata import PropertyMetadata
from apimeta.schema import build_resource


class TestBuildResource:
    """Tests for build_resource."""

    def test_empty_definition(self) -> None:
        """None builds a resource with only its class set."""
        resource = build_resource("app.Book", None, "books.yaml")
        assert resource.resource_class == "app.Book"
        assert resource.short_name is None
        assert resource.item_operations is None
        assert resource.properties == {}

    def test_full_definition(self) -> None:
        """All supported fields are carried over."""
        resource = build_resource(
            "app.Book",
            {
                "short_name": "Book",
                "description": "A book",
                "iri": "https://schema.org/Book",
                "item_operations": {"get": {"method": "GET"}},
                "collection_operations": {"get": None},
                "subresource_operations": {},
                "graphql": {"query": {}},
                "attributes": {"tags": ["a", "b"]},
                "properties": {"title": {"required": True}, "id": None},
            },
            "books.yaml",
        )

        assert resource.short_name == "Book"
        assert resource.item_operations == {"get": {"method": "GET"}}
        assert resource.collection_operations == {"get": {}}
        assert resource.subresource_operations == {}
        assert resource.graphql == {"query": {}}
        assert resource.attributes == {"tags": ("a", "b")}
        assert resource.properties["title"] == PropertyMetadata(required=True)
        assert resource.properties["id"] == PropertyMetadata()

    def test_operation_list_shorthand(self) -> None:
        """A list of names means operations with default settings."""
        resource = build_resource(
            "app.Book", {"collection_operations": ["get", "post"]}, "books.yaml"
        )
        assert resource.collection_operations == {"get": {}, "post": {}}

    def test_boolean_strings_are_converted(self) -> None:
        """Property flags accept the string forms used by XML."""
        resource = build_resource(
            "app.Book",
            {"properties": {"title": {"readable": "true", "writable": "0"}}},
            "books.xml",
        )
        assert resource.properties["title"].readable is True
        assert resource.properties["title"].writable is False

    def test_result_is_read_only(self) -> None:
        """Nested mappings cannot be modified."""
        resource = build_resource(
            "app.Book", {"attributes": {"a": {"b": 1}}}, "books.yaml"
        )
        with pytest.raises(TypeError):
            resource.attributes["a"]["b"] = 2

    def test_unknown_field(self) -> None:
        """Unknown keys are rejected with the path and class in the message."""
        with pytest.raises(InvalidResourceError) as exc_info:
            build_resource("app.Book", {"shortName": "Book"}, "books.yaml")
        message = str(exc_info.value)
        assert message.startswith("books.yaml: ")
        assert 'invalid resource "app.Book"' in message
        assert "shortName" in message

    def test_wrong_type(self) -> None:
        """A non-mapping definition is rejected."""
        with pytest.raises(InvalidResourceError, match="must be a mapping"):
            build_resource("app.Book", ["not", "a", "mapping"], "books.yaml")

    def test_invalid_operation_settings(self) -> None:
        """Operation settings must be mappings."""
        with pytest.raises(InvalidResourceError, match="Settings of operation 'get'"):
            build_resource("app.Book", {"item_operations": {"get": "GET"}}, "x.yaml")

    def test_invalid_operation_names(self) -> None:
        """Listed operation names must be strings."""
        with pytest.raises(InvalidResourceError, match="Operation names"):
            build_resource("app.Book", {"item_operations": [1]}, "x.yaml")

    def test_empty_resource_class(self) -> None:
        """The resource class must be set."""
        with pytest.raises(InvalidResourceError, match="must not be empty"):
            build_resource("", {}, "x.yaml")
