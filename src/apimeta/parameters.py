"""Parameter sources used to resolve ``%name%`` placeholders.

The resolver only knows the ``ParameterSource`` protocol. Each flavor of
backing store (a plain mapping, a configuration container, a service
locator) gets an adapter that normalizes its lookup to ``get(name)`` and
its "missing" signal to ``ParameterNotFoundError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from apimeta.exceptions import ParameterNotFoundError


@runtime_checkable
class ParameterSource(Protocol):
    """Read-only lookup of parameter values by name."""

    def get(self, name: str) -> Any:
        """Return the value of ``name``.

        Raises:
            ParameterNotFoundError: If no parameter has that name.
        """
        ...


class MappingParameterSource:
    """Parameter source backed by a plain mapping."""

    def __init__(self, parameters: Mapping[str, Any]) -> None:
        self._parameters = parameters

    def get(self, name: str) -> Any:
        try:
            return self._parameters[name]
        except KeyError:
            raise ParameterNotFoundError(name) from None

    def __repr__(self) -> str:
        return f"MappingParameterSource({sorted(self._parameters)!r})"


class ContainerParameterSource:
    """Parameter source backed by a configuration container.

    Configuration containers keep parameters apart from services and
    expose them through ``get_parameter(name)``.
    """

    def __init__(self, container: Any) -> None:
        self._container = container

    def get(self, name: str) -> Any:
        try:
            return self._container.get_parameter(name)
        except KeyError:
            raise ParameterNotFoundError(name) from None


class ServiceLocatorParameterSource:
    """Parameter source backed by a generic ``get(name)`` locator."""

    def __init__(self, locator: Any) -> None:
        self._locator = locator

    def get(self, name: str) -> Any:
        try:
            return self._locator.get(name)
        except KeyError:
            raise ParameterNotFoundError(name) from None


_ADAPTERS = (
    MappingParameterSource,
    ContainerParameterSource,
    ServiceLocatorParameterSource,
)


def as_parameter_source(obj: Any) -> ParameterSource | None:
    """Wrap ``obj`` in the adapter matching its lookup style.

    Configuration containers are preferred over plain mappings and
    service locators, so an object offering both ``get_parameter`` and
    ``get`` is read through ``get_parameter``.

    Args:
        obj: None, an adapter, a container, a mapping or a locator.

    Returns:
        A ParameterSource, or None when ``obj`` is None.

    Raises:
        TypeError: If ``obj`` offers no supported lookup method.
    """
    if obj is None:
        return None
    if isinstance(obj, _ADAPTERS):
        return obj
    if callable(getattr(obj, "get_parameter", None)):
        return ContainerParameterSource(obj)
    if isinstance(obj, Mapping):
        return MappingParameterSource(obj)
    if callable(getattr(obj, "get", None)):
        return ServiceLocatorParameterSource(obj)
    raise TypeError(
        f"Cannot use {type(obj).__name__} as a parameter source: "
        "expected a mapping or an object with get_parameter() or get()"
    )
