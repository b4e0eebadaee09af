"""Format adapters for resource configuration files."""

from apimeta.formats.dispatch import FormatDispatcher
from apimeta.formats.xml_extractor import XmlPathExtractor
from apimeta.formats.yaml_extractor import YamlPathExtractor


def build_default_dispatcher() -> FormatDispatcher:
    """Return a dispatcher handling YAML and XML files."""
    adapters = {}
    for adapter in (YamlPathExtractor(), XmlPathExtractor()):
        for suffix in adapter.suffixes:
            adapters[suffix] = adapter
    return FormatDispatcher(adapters)


__all__ = [
    "FormatDispatcher",
    "XmlPathExtractor",
    "YamlPathExtractor",
    "build_default_dispatcher",
]
