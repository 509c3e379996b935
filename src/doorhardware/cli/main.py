"""Typer CLI for door hardware placement."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from doorhardware.application import PlaceHardwareCommand
from doorhardware.application.config import ConfigError, load_config
from doorhardware.cli.commands import display_load_error, validate_command
from doorhardware.infrastructure import JsonExporter, PlacementReportFormatter

app = typer.Typer(
    name="doorhw",
    help="Compute hinge, lock, handle and bolt placements for door leaves.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def place(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Place hardware on the door described by a configuration file.

    Exit codes:
        0 - Hardware placed (clearance conflicts are reported, not fatal)
        1 - Configuration or placement validation errors

    Example:
        doorhw place front-door.json --format json
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

    result = PlaceHardwareCommand().execute(config)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        text = JsonExporter().export(result)
    else:
        text = PlacementReportFormatter().format(result)

    if output_file is not None:
        output_file.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Wrote placements to {output_file}")
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
