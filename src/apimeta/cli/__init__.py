"""CLI module for apimeta."""

import logging
from pathlib import Path

import click

from apimeta.cli.exit_codes import ExitCode
from apimeta.config import ConfigError, configure_logging_from_cli, get_config

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(
    ctx: click.Context,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from the loaded config and CLI options (once)."""
    global _logging_configured
    if _logging_configured:
        return

    configure_logging_from_cli(
        ctx.obj["config"].logging,
        level=log_level,
        file=log_file,
        format="json" if log_json else None,
    )
    _logging_configured = True


@click.group()
@click.version_option(package_name="apimeta")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ./apimeta.toml or $APIMETA_CONFIG_PATH).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """apimeta - Extract API resource metadata from configuration files."""
    ctx.ensure_object(dict)

    # An explicit --config must be readable
    try:
        ctx.obj["config"] = get_config(config_path, strict=config_path is not None)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR)

    _configure_logging(ctx, log_level, log_file, log_json)
    logger.debug("Using metadata paths: %s", ctx.obj["config"].metadata.paths)


def _register_commands():
    from apimeta.cli.resources import (
        resolve_command,
        resources_command,
        show_command,
    )

    main.add_command(resources_command)
    main.add_command(show_command)
    main.add_command(resolve_command)


_register_commands()
