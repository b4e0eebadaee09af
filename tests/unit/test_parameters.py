"""Tests for parameter source adapters."""

from __future__ import annotations

import pytest

from apimeta.exceptions import ParameterNotFoundError
from apimeta.parameters import (
    ContainerParameterSource,
    MappingParameterSource,
    ParameterSource,
    ServiceLocatorParameterSource,
    as_parameter_source,
)
from apimeta.resolver import resolve_placeholders


class FakeContainer:
    """Configuration container keeping parameters apart from services."""

    def __init__(self, parameters: dict, services: dict | None = None) -> None:
        self.parameters = parameters
        self.services = services or {}

    def get_parameter(self, name: str):
        return self.parameters[name]

    def get(self, name: str):
        return self.services[name]


class FakeLocator:
    """Service locator with a single get() accessor."""

    def __init__(self, entries: dict) -> None:
        self.entries = entries

    def get(self, name: str):
        if name not in self.entries:
            raise KeyError(name)
        return self.entries[name]


class TestMappingParameterSource:
    """Tests for MappingParameterSource."""

    def test_returns_value(self) -> None:
        """Should return the mapped value."""
        assert MappingParameterSource({"a": 1}).get("a") == 1

    def test_missing_raises(self) -> None:
        """Should raise ParameterNotFoundError for unknown names."""
        with pytest.raises(ParameterNotFoundError) as exc_info:
            MappingParameterSource({}).get("a")
        assert exc_info.value.name == "a"
        assert exc_info.value.__cause__ is None

    def test_satisfies_protocol(self) -> None:
        """Should be recognized as a ParameterSource."""
        assert isinstance(MappingParameterSource({}), ParameterSource)


class TestContainerParameterSource:
    """Tests for ContainerParameterSource."""

    def test_reads_parameters_not_services(self) -> None:
        """Should use get_parameter, not get."""
        container = FakeContainer({"name": "param"}, {"name": "service"})
        assert ContainerParameterSource(container).get("name") == "param"

    def test_missing_raises(self) -> None:
        """Should translate KeyError into ParameterNotFoundError."""
        with pytest.raises(ParameterNotFoundError):
            ContainerParameterSource(FakeContainer({})).get("missing")


class TestServiceLocatorParameterSource:
    """Tests for ServiceLocatorParameterSource."""

    def test_returns_value(self) -> None:
        """Should use the locator's get."""
        assert ServiceLocatorParameterSource(FakeLocator({"a": "b"})).get("a") == "b"

    def test_missing_raises(self) -> None:
        """Should translate KeyError into ParameterNotFoundError."""
        with pytest.raises(ParameterNotFoundError):
            ServiceLocatorParameterSource(FakeLocator({})).get("a")


class TestAsParameterSource:
    """Tests for as_parameter_source."""

    def test_none(self) -> None:
        """None stays None."""
        assert as_parameter_source(None) is None

    def test_adapter_returned_as_is(self) -> None:
        """Adapters are not wrapped again."""
        adapter = MappingParameterSource({})
        assert as_parameter_source(adapter) is adapter

    def test_prefers_configuration_container(self) -> None:
        """Objects with get_parameter are read as containers."""
        container = FakeContainer({"a": "param"}, {"a": "service"})
        adapted = as_parameter_source(container)
        assert isinstance(adapted, ContainerParameterSource)
        assert adapted.get("a") == "param"

    def test_mapping(self) -> None:
        """Mappings are wrapped in MappingParameterSource."""
        assert isinstance(as_parameter_source({"a": 1}), MappingParameterSource)

    def test_service_locator(self) -> None:
        """Other objects with get() are read as service locators."""
        adapted = as_parameter_source(FakeLocator({}))
        assert isinstance(adapted, ServiceLocatorParameterSource)

    def test_rejects_unsupported_objects(self) -> None:
        """Objects without a lookup method are rejected."""
        with pytest.raises(TypeError, match="parameter source"):
            as_parameter_source(42)

    def test_container_placeholders_resolve(self) -> None:
        """Placeholders resolve through the container's parameters."""
        source = as_parameter_source(FakeContainer({"host": "example.org"}))
        assert resolve_placeholders("https://%host%", source).value == (
            "https://example.org"
        )
