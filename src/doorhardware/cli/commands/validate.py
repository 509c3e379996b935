"""Validate command for checking door hardware configuration files.

This module provides the `validate` command that checks a JSON configuration
file for schema errors and placement rule failures, and reports clearance
conflicts between valid placements as warnings.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from doorhardware.application import PlaceHardwareCommand
from doorhardware.application.config import ConfigError, load_config
from doorhardware.infrastructure import JsonExporter, ValidationReportFormatter


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate a door hardware configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown keys, bad values)
    - Placement rule failures (hinge count, lock range, leaf thickness, ...)
    - Clearance conflicts between placed hardware (reported as warnings)

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        doorhw validate front-door.json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    command = PlaceHardwareCommand()
    result = command.validate(config)
    conflicts = command.execute(config).conflicts if result.is_valid else ()

    if output_format == "json":
        typer.echo(JsonExporter().export_validation(result, conflicts))
    else:
        typer.echo(ValidationReportFormatter().format(result, conflicts))

    if not result.is_valid:
        raise typer.Exit(code=1)
    raise typer.Exit(code=2 if conflicts else 0)


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
