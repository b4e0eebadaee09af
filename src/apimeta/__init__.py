"""apimeta - API resource metadata extraction.

Reads resource metadata from YAML/XML configuration and resolves
``%name%`` placeholders against a parameter source.
"""

from apimeta.exceptions import (
    ForbiddenDynamicReferenceError,
    InvalidParameterTypeError,
    InvalidResourceError,
    MetadataError,
    ParameterError,
    ParameterNotFoundError,
    ResourceClassNotFoundError,
)
from apimeta.extractor import PathExtractor, ResourceExtractor
from apimeta.factory import ExtractorResourceMetadataFactory, ResourceMetadataFactory
from apimeta.formats import build_default_dispatcher
from apimeta.metadata import PropertyMetadata, ResourceMetadata
from apimeta.parameters import (
    ContainerParameterSource,
    MappingParameterSource,
    ParameterSource,
    ServiceLocatorParameterSource,
    as_parameter_source,
)
from apimeta.resolver import Resolution, resolve_placeholders

__version__ = "0.1.0"

__all__ = [
    # Extraction
    "PathExtractor",
    "ResourceExtractor",
    "ExtractorResourceMetadataFactory",
    "ResourceMetadataFactory",
    "PropertyMetadata",
    "ResourceMetadata",
    "build_default_dispatcher",
    # Parameters
    "ContainerParameterSource",
    "MappingParameterSource",
    "ParameterSource",
    "ServiceLocatorParameterSource",
    "as_parameter_source",
    "Resolution",
    "resolve_placeholders",
    # Errors
    "ForbiddenDynamicReferenceError",
    "InvalidParameterTypeError",
    "InvalidResourceError",
    "MetadataError",
    "ParameterError",
    "ParameterNotFoundError",
    "ResourceClassNotFoundError",
]
