"""Configuration data models for apimeta."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class MetadataConfig:
    """Where resource metadata is read from."""

    # Files or directories, extracted in order
    paths: list[Path] = field(default_factory=list)


@dataclass
class ApimetaConfig:
    """Top-level configuration."""

    metadata: MetadataConfig = field(default_factory=MetadataConfig)

    # Values for %name% placeholders
    parameters: dict[str, Any] = field(default_factory=dict)

    logging: LoggingConfig = field(default_factory=LoggingConfig)
