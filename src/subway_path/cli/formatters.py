"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.table import Table

from ..core.line import Line
from ..core.path import PathResult

console = Console()


def format_station_table(line: Line) -> None:
    """Display the stations of a line as a rich table."""
    segments = line.path.ordered_segments()
    if not segments:
        console.print(f"Line {line} has no stations.")
        return

    table = Table(
        title=f"Line: {line}", show_header=True, header_style="bold magenta"
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Station", style="cyan", no_wrap=True)
    table.add_column("ID", style="blue")
    table.add_column("To next", style="green", justify="right")
    table.add_column("From start", style="yellow", justify="right")

    travelled = 0
    stations = line.path.ordered_stations()
    for idx, station in enumerate(stations):
        to_next = str(segments[idx].distance) if idx < len(segments) else "-"
        table.add_row(
            str(idx + 1), station.name or "-", str(station.id), to_next, str(travelled)
        )
        if idx < len(segments):
            travelled += segments[idx].distance

    console.print(table)
    console.print(f"[bold]Total distance:[/bold] {line.path.total_distance()}")


def format_stations_json(line: Line) -> str:
    """Format the stations of a line as JSON."""
    data = {
        "line": line.ref.model_dump(),
        "stations": [station.model_dump() for station in line.stations()],
        "total_distance": line.path.total_distance(),
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_result(result: PathResult) -> None:
    """Display the segments a successful mutation added and removed."""
    for segment in result.removed:
        console.print(f"[red]- {segment}[/red]")
    for segment in result.added:
        console.print(f"[green]+ {segment}[/green]")
