"""CLI commands for extracting and inspecting resource metadata."""

from __future__ import annotations

import json
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
import yaml

from apimeta.cli.exit_codes import ExitCode
from apimeta.config import ApimetaConfig, ConfigError, parse_parameter_overrides
from apimeta.exceptions import (
    InvalidResourceError,
    ParameterError,
    ResourceClassNotFoundError,
)
from apimeta.extractor import ResourceExtractor
from apimeta.factory import ExtractorResourceMetadataFactory
from apimeta.formats import build_default_dispatcher
from apimeta.metadata import ResourceMetadata
from apimeta.parameters import MappingParameterSource
from apimeta.resolver import resolve_placeholders


_ERROR_EXIT_CODES: tuple[tuple[type[Exception], ExitCode], ...] = (
    (ConfigError, ExitCode.CONFIG_ERROR),
    (ParameterError, ExitCode.PARAMETER_ERROR),
    (InvalidResourceError, ExitCode.INVALID_RESOURCE),
    (ResourceClassNotFoundError, ExitCode.RESOURCE_NOT_FOUND),
    (OSError, ExitCode.GENERAL_ERROR),
)
_HANDLED_ERRORS = tuple(exc for exc, _ in _ERROR_EXIT_CODES)


@contextmanager
def _exit_on_error(json_output: bool) -> Generator[None, None, None]:
    """Report known errors and exit with the matching code."""
    try:
        yield
    except _HANDLED_ERRORS as e:
        code = next(code for exc, code in _ERROR_EXIT_CODES if isinstance(e, exc))
        if json_output:
            click.echo(json.dumps({"error": str(e), "exit_code": int(code)}))
        else:
            click.echo(f"Error: {e}", err=True)
        raise SystemExit(code)


def _parameters(config: ApimetaConfig, params: tuple[str, ...]) -> dict[str, Any]:
    parameters = dict(config.parameters)
    parameters.update(parse_parameter_overrides(params))
    return parameters


def _build_extractor(
    config: ApimetaConfig, paths: tuple[Path, ...], params: tuple[str, ...]
) -> ResourceExtractor:
    metadata_paths = list(paths) or config.metadata.paths
    if not metadata_paths:
        raise ConfigError(
            "No metadata paths given. Pass PATHS or set [metadata] paths "
            "in apimeta.toml."
        )
    return ResourceExtractor(
        [str(path) for path in metadata_paths],
        build_default_dispatcher(),
        parameters=MappingParameterSource(_parameters(config, params)),
    )


def _format_resource(resource: ResourceMetadata) -> list[str]:
    lines = [resource.resource_class]
    for label in ("short_name", "description", "iri"):
        value = getattr(resource, label)
        if value is not None:
            lines.append(f"  {label}: {value}")
    for label in (
        "item_operations",
        "collection_operations",
        "subresource_operations",
        "graphql",
    ):
        operations = getattr(resource, label)
        if operations is not None:
            lines.append(f"  {label}: {', '.join(operations) or '(none)'}")
    if resource.properties:
        lines.append(f"  properties: {', '.join(resource.properties)}")
    return lines


_paths_argument = click.argument(
    "paths", nargs=-1, type=click.Path(path_type=Path)
)
_param_option = click.option(
    "--param",
    "params",
    multiple=True,
    metavar="KEY=VALUE",
    help="Placeholder parameter (repeatable, overrides [parameters]).",
)
_json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)


@click.command("resources")
@_paths_argument
@_param_option
@_json_option
@click.pass_context
def resources_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    params: tuple[str, ...],
    json_output: bool,
) -> None:
    """List the resources defined in PATHS.

    PATHS are YAML/XML files or directories; they default to the
    [metadata] paths of the config file.

    Examples:

        apimeta resources config/resources

        apimeta resources resources.yaml --param per_page=30 --json
    """
    with _exit_on_error(json_output):
        extractor = _build_extractor(ctx.obj["config"], paths, params)
        resources = extractor.get_resources()

    if json_output:
        click.echo(
            json.dumps(
                {
                    "resources": [resource.to_dict() for resource in resources],
                    "parameters": dict(extractor.collected_parameters),
                },
                indent=2,
            )
        )
        return

    if not resources:
        click.echo("No resources found.")
        return

    for resource in resources:
        for line in _format_resource(resource):
            click.echo(line)
    click.echo(f"\n{len(resources)} resource(s)")


@click.command("show")
@click.argument("resource_class")
@_paths_argument
@_param_option
@_json_option
@click.pass_context
def show_command(
    ctx: click.Context,
    resource_class: str,
    paths: tuple[Path, ...],
    params: tuple[str, ...],
    json_output: bool,
) -> None:
    """Show the metadata of RESOURCE_CLASS.

    Examples:

        apimeta show app.entity.Book config/resources
    """
    with _exit_on_error(json_output):
        extractor = _build_extractor(ctx.obj["config"], paths, params)
        resource = ExtractorResourceMetadataFactory(extractor).create(resource_class)

    if json_output:
        click.echo(json.dumps(resource.to_dict(), indent=2))
    else:
        click.echo(yaml.safe_dump(resource.to_dict(), sort_keys=False).rstrip())


@click.command("resolve")
@click.argument("value")
@_param_option
@_json_option
@click.pass_context
def resolve_command(
    ctx: click.Context,
    value: str,
    params: tuple[str, ...],
    json_output: bool,
) -> None:
    """Resolve %name% placeholders in VALUE.

    Parameters come from the config file's [parameters] table and --param.

    Examples:

        apimeta resolve "%base_url%/books" --param base_url=https://example.org
    """
    with _exit_on_error(json_output):
        source = MappingParameterSource(_parameters(ctx.obj["config"], params))
        resolution = resolve_placeholders(value, source)

    if json_output:
        click.echo(
            json.dumps(
                {"value": resolution.value, "parameters": dict(resolution.parameters)},
                indent=2,
            )
        )
        return

    click.echo(resolution.value)
    for name, resolved in resolution.parameters.items():
        click.echo(f"  {name} = {resolved!r}")
