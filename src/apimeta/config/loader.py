"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (APIMETA_*)
3. Config file (./apimeta.toml)
4. Default values

Environment variables:
- APIMETA_CONFIG_PATH: Path to config file (overrides default location)
- APIMETA_PATHS: Colon-separated metadata paths
- APIMETA_LOG_LEVEL: Log level (debug, info, warning, error)
- APIMETA_LOG_FORMAT: Log format (text, json)
- APIMETA_LOG_FILE: Log file path
- APIMETA_LOG_STDERR: Also log to stderr when a log file is set

Placeholder parameters only come from the config file and the CLI.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from apimeta.config.env import EnvReader
from apimeta.config.models import ApimetaConfig, LoggingConfig, MetadataConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("apimeta.toml")


class ConfigError(Exception):
    """Configuration file or override is invalid."""


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by APIMETA_CONFIG_PATH environment variable.
    """
    reader = env_reader or EnvReader()
    return reader.get_path("APIMETA_CONFIG_PATH", DEFAULT_CONFIG_FILE)


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file. If None, uses default location.
        strict: If True, raise ConfigError on parse failures.
                If False (default), return empty dict on errors.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist
        and strict is False.

    Raises:
        ConfigError: When strict=True and the file is missing, unreadable
            or not valid TOML.
    """
    if path is None:
        path = get_default_config_path()

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        if strict:
            raise ConfigError(f"Config file {path} does not exist") from e
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        if strict:
            raise ConfigError(f"Cannot load config file {path}: {e}") from e
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}


def parse_parameter_overrides(items: Iterable[str]) -> dict[str, Any]:
    """Parse ``KEY=VALUE`` parameter overrides.

    Values are read as YAML scalars, so ``per_page=30`` yields the integer
    30. Values that do not parse to a string, number or boolean (mappings,
    lists, dates, null) are kept as the raw string.

    Raises:
        ConfigError: If an item has no ``=`` or an empty key.
    """
    parameters: dict[str, Any] = {}
    for item in items:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigError(f"Invalid parameter '{item}': expected KEY=VALUE")
        try:
            value = yaml.safe_load(raw) if raw else ""
        except yaml.YAMLError:
            value = raw
        if not isinstance(value, (str, int, float, bool)):
            value = raw
        parameters[key] = value
    return parameters


def _section(file_config: Mapping[str, Any], name: str) -> dict[str, Any]:
    section = file_config.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _file_paths(metadata: Mapping[str, Any], base_dir: Path) -> list[Path]:
    raw_paths = metadata.get("paths", [])
    if not isinstance(raw_paths, list) or not all(
        isinstance(p, str) for p in raw_paths
    ):
        raise ConfigError("[metadata] paths must be a list of strings")

    # Relative paths are relative to the config file
    paths: list[Path] = []
    for raw in raw_paths:
        path = Path(raw).expanduser()
        paths.append(path if path.is_absolute() else base_dir / path)
    return paths


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    paths: list[Path] | None = None,
    parameters: Mapping[str, Any] | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> ApimetaConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides APIMETA_CONFIG_PATH).
        paths: CLI metadata paths; replace file and env paths when given.
        parameters: CLI parameters; override file parameters key by key.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise ConfigError on config file parse failures.

    Returns:
        ApimetaConfig with merged configuration.

    Raises:
        ConfigError: When the configuration is invalid.
    """
    reader = env_reader or EnvReader()
    if config_path is None:
        config_path = get_default_config_path(reader)

    file_config = load_config_file(config_path, strict=strict)
    base_dir = config_path.parent

    # Metadata paths: file < env < cli
    metadata_paths = _file_paths(_section(file_config, "metadata"), base_dir)
    env_paths = reader.get_path_list("APIMETA_PATHS")
    if env_paths:
        metadata_paths = env_paths
    if paths:
        metadata_paths = list(paths)

    merged_parameters = dict(_section(file_config, "parameters"))
    if parameters:
        merged_parameters.update(parameters)

    # Logging: file < env (CLI overrides go through build_logging_config)
    file_logging = _section(file_config, "logging")
    logging_values: dict[str, Any] = {
        key: value for key, value in file_logging.items() if key != "file"
    }
    if file_logging.get("file"):
        logging_values["file"] = Path(file_logging["file"]).expanduser()

    env_level = reader.get_str("APIMETA_LOG_LEVEL")
    if env_level:
        logging_values["level"] = env_level
    env_format = reader.get_str("APIMETA_LOG_FORMAT")
    if env_format:
        logging_values["format"] = env_format
    env_file = reader.get_path("APIMETA_LOG_FILE")
    if env_file is not None:
        logging_values["file"] = env_file
    env_stderr = reader.get_bool("APIMETA_LOG_STDERR")
    if env_stderr is not None:
        logging_values["include_stderr"] = env_stderr

    try:
        logging_config = LoggingConfig(**logging_values)
    except (AttributeError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid [logging] configuration: {e}") from e

    return ApimetaConfig(
        metadata=MetadataConfig(paths=metadata_paths),
        parameters=merged_parameters,
        logging=logging_config,
    )
