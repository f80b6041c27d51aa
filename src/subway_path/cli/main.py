"""CLI main entry point for line path maintenance."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..config import Settings
from ..core import Line, LineFileError, PathIntegrityError, PathResult, Station
from .formatters import format_result, format_station_table, format_stations_json
from .line_file import LineDocument, load_line_file, save_line_file

console = Console()
error_console = Console(stderr=True)

INTEGRITY_EXIT_CODE = 2

file_option = click.option(
    "--file",
    "-f",
    "line_file",
    type=click.Path(dir_okay=False),
    help="Line file (defaults to SUBWAY_PATH_LINE_FILE)",
)


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Subway Path - Keep the stations of a transit line in order."""
    try:
        settings = Settings()
    except ValidationError as e:
        error_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        sys.exit(1)
    logging.basicConfig(level=settings.log_level)
    ctx.obj = settings


def _resolve_file(settings: Settings, line_file: str | None) -> Path:
    file_path = line_file or settings.line_file
    if not file_path:
        error_console.print(
            "[red]Error:[/red] No line file given. Use --file or set SUBWAY_PATH_LINE_FILE"
        )
        sys.exit(1)
    return Path(file_path)


def _open_line(
    settings: Settings, line_file: str | None
) -> tuple[LineDocument, Line]:
    """Load a line whose successful changes are written back to its file."""
    file_path = _resolve_file(settings, line_file)
    try:
        document = load_line_file(file_path)

        def persist(line: Line, result: PathResult) -> None:
            save_line_file(file_path, document.with_line(line))

        return document, document.to_line(on_change=persist)
    except LineFileError as e:
        _fail_file(e)


def _lookup(document: LineDocument, station_id: str) -> Station:
    try:
        return document.lookup(station_id)
    except LineFileError as e:
        _fail_file(e)


def _fail_file(e: LineFileError) -> None:
    error_console.print(f"[red]Error:[/red] {escape(str(e))}")
    sys.exit(1)


def _report(line: Line, result: PathResult) -> None:
    if not result.ok:
        error_console.print(f"[yellow]Rejected:[/yellow] {escape(str(result.error))}")
        sys.exit(1)
    format_result(result)
    format_station_table(line)


def _fail_integrity(e: PathIntegrityError) -> None:
    error_console.print(f"[red]Line is corrupted:[/red] {escape(str(e))}")
    sys.exit(INTEGRITY_EXIT_CODE)


@cli.command()
@file_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_obj
def stations(settings: Settings, line_file: str | None, output_format: str) -> None:
    """Show the stations of a line in travel order.

    Examples:
        subway-path stations -f line2.json
        subway-path stations -f line2.json --format json
    """
    _, line = _open_line(settings, line_file)
    try:
        if output_format == "json":
            click.echo(format_stations_json(line))
        else:
            format_station_table(line)
    except PathIntegrityError as e:
        _fail_integrity(e)


@cli.command()
@click.argument("upstream_id")
@click.argument("downstream_id")
@click.argument("distance", type=click.IntRange(min=1))
@file_option
@click.pass_obj
def add(
    settings: Settings,
    upstream_id: str,
    downstream_id: str,
    distance: int,
    line_file: str | None,
) -> None:
    """Add a segment between two stations of the line file.

    A segment sharing its upstream or downstream station with an existing
    segment splits that segment.

    Examples:
        subway-path add 1 4 2 -f line2.json
    """
    document, line = _open_line(settings, line_file)
    upstream = _lookup(document, upstream_id)
    downstream = _lookup(document, downstream_id)
    try:
        _report(line, line.add_segment(upstream, downstream, distance))
    except ValidationError as e:
        error_console.print(f"[red]Invalid segment:[/red] {escape(str(e))}")
        sys.exit(1)
    except LineFileError as e:
        _fail_file(e)
    except PathIntegrityError as e:
        _fail_integrity(e)


@cli.command()
@click.argument("station_id")
@file_option
@click.pass_obj
def remove(settings: Settings, station_id: str, line_file: str | None) -> None:
    """Remove a station from the line, merging the segments around it.

    Examples:
        subway-path remove 4 -f line2.json
    """
    document, line = _open_line(settings, line_file)
    station = _lookup(document, station_id)
    try:
        _report(line, line.remove_station(station))
    except LineFileError as e:
        _fail_file(e)
    except PathIntegrityError as e:
        _fail_integrity(e)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
@click.pass_obj
def show_config(settings: Settings) -> None:
    """Show current configuration."""
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• Line file: {settings.line_file or 'Not configured'}")
    console.print(f"• Log level: {settings.log_level}")


if __name__ == "__main__":
    cli()
