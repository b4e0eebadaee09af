"""Placeholder resolution for raw configuration values.

Strings may embed ``%name%`` placeholders that are replaced with parameter
values. ``%%`` is an escaped literal percent sign. Mappings and sequences
are resolved recursively; only their leaf strings change.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from apimeta.exceptions import (
    ForbiddenDynamicReferenceError,
    InvalidParameterTypeError,
)

if TYPE_CHECKING:
    from apimeta.parameters import ParameterSource

# Either an escaped percent sign or a %name% token (no % or whitespace in name)
PLACEHOLDER_PATTERN = re.compile(r"%%|%([^%\s]+)%")

# Runtime environment references, e.g. %env(DATABASE_URL)%
ENV_REFERENCE_PATTERN = re.compile(r"^env\(\w+\)$")

ESCAPED_PERCENT = "%%"


@dataclass(frozen=True)
class Resolution:
    """Result of resolving a raw value.

    Attributes:
        value: The value with every placeholder substituted.
        parameters: Name to value of every parameter that was substituted.
    """

    value: Any
    parameters: Mapping[str, str | int | float] = field(default_factory=dict)


def _is_scalar_parameter(value: Any) -> bool:
    # bool is an int subclass but is not a valid substitution
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def _resolve_string(
    value: str, source: ParameterSource, collected: dict[str, Any]
) -> str:
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name is None:
            return ESCAPED_PERCENT

        if ENV_REFERENCE_PATTERN.match(name):
            raise ForbiddenDynamicReferenceError(name)

        resolved = source.get(name)
        if not _is_scalar_parameter(resolved):
            raise InvalidParameterTypeError(name, value, type(resolved).__name__)

        collected[name] = resolved
        return str(resolved)

    escaped = PLACEHOLDER_PATTERN.sub(replace, value)
    return escaped.replace(ESCAPED_PERCENT, "%")


def _resolve(value: Any, source: ParameterSource, collected: dict[str, Any]) -> Any:
    if isinstance(value, dict):
        return {key: _resolve(item, source, collected) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        items = [_resolve(item, source, collected) for item in value]
        # Named tuples take their fields positionally
        if hasattr(value, "_fields"):
            return type(value)(*items)
        return type(value)(items)
    if not isinstance(value, str):
        return value
    return _resolve_string(value, source, collected)


def resolve_placeholders(value: Any, source: ParameterSource | None) -> Resolution:
    """Replace ``%name%`` placeholders in ``value`` with parameter values.

    Args:
        value: A scalar, or a dict/list/tuple nesting scalars.
        source: Where parameter values come from. With no source the value
            is returned unchanged.

    Returns:
        Resolution holding the resolved value (same shape as ``value``)
        and the parameters that were substituted.

    Raises:
        ParameterNotFoundError: A placeholder names a missing parameter.
        InvalidParameterTypeError: A parameter is not a string or number.
        ForbiddenDynamicReferenceError: A placeholder uses ``env(NAME)``.
    """
    if source is None:
        return Resolution(value)

    collected: dict[str, Any] = {}
    resolved = _resolve(value, source, collected)
    return Resolution(resolved, collected)
