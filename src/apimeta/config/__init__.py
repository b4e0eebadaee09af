"""Configuration management for apimeta.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (APIMETA_*)
3. Config file (./apimeta.toml)
4. Default values (lowest priority)
"""

from apimeta.config.env import EnvReader
from apimeta.config.loader import (
    ConfigError,
    get_config,
    get_default_config_path,
    load_config_file,
    parse_parameter_overrides,
)
from apimeta.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from apimeta.config.models import ApimetaConfig, LoggingConfig, MetadataConfig

__all__ = [
    # Models
    "ApimetaConfig",
    "LoggingConfig",
    "MetadataConfig",
    # Loader
    "ConfigError",
    "EnvReader",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    "parse_parameter_overrides",
    # Logging
    "build_logging_config",
    "configure_logging_from_cli",
]
