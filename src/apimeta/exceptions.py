"""Exceptions raised while extracting resource metadata.

Every error here is fail-fast: nothing is recovered or logged at the
extraction layer, callers decide how to present them.
"""


class MetadataError(Exception):
    """Base class for metadata extraction errors."""


class ParameterError(MetadataError):
    """Base class for placeholder resolution errors."""


class ParameterNotFoundError(ParameterError):
    """Raised when a placeholder references a parameter that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'You have requested a non-existent parameter "{name}".')


class InvalidParameterTypeError(ParameterError):
    """Raised when a parameter resolves to something other than a string or number.

    Only strings and numbers can be embedded in a configuration string;
    mappings, lists, booleans and None cannot.
    """

    def __init__(self, name: str, value: str, type_name: str) -> None:
        """Initialize the error.

        Args:
            name: Name of the parameter referenced by the placeholder.
            value: The raw configuration string being resolved.
            type_name: Type name of the value the parameter resolved to.
        """
        self.name = name
        self.value = value
        self.type_name = type_name
        super().__init__(
            f'The container parameter "{name}", used in the resource '
            f'configuration value "{value}", must be a string or numeric, '
            f"but it is of type {type_name}."
        )


class ForbiddenDynamicReferenceError(ParameterError):
    """Raised when a placeholder uses the runtime environment syntax.

    ``%env(NAME)%`` references are resolved at runtime by a container and
    are not allowed in resource configuration, even when the parameter
    source could answer them.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Using "%{name}%" is not allowed in resource configuration.'
        )


class InvalidResourceError(MetadataError):
    """Raised when a configuration source cannot be turned into resources."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class ResourceClassNotFoundError(MetadataError):
    """Raised when no metadata exists for a resource class."""

    def __init__(self, resource_class: str) -> None:
        self.resource_class = resource_class
        super().__init__(f'Resource "{resource_class}" not found.')
