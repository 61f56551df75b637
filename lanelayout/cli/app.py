"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..adapters.yaml_layout_source import YamlLayoutSource
from ..config import get_default_config_path
from ..domain.exceptions import LaneLayoutError
from ..domain.lane_configuration import LaneConfiguration
from ..domain.pin_fall_type import PinFallType
from ..domain.result import Result
from ..services.lane_layout import LaneLayoutService

app = typer.Typer(
    name="lanelayout",
    help="Validate bowling center lane layouts and list their lane pairs",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to layout file. Defaults to ./lanes.yaml")
]


def _configure_logging(source: YamlLayoutSource, verbose: bool) -> None:
    """Set up logging from the layout file defaults or the --verbose flag."""
    level = logging.DEBUG if verbose else source.config.defaults.get_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True
    )


def _load_source(config_file: Optional[Path]) -> YamlLayoutSource:
    config_path = config_file or get_default_config_path()
    try:
        return YamlLayoutSource.from_path(config_path)
    except LaneLayoutError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _render_configuration(name: str, configuration: LaneConfiguration) -> None:
    table = Table(
        title=f"{name}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Pin Fall Type", style="bold yellow")
    table.add_column("Pairs", justify="right")

    for lane_range in configuration.ranges:
        table.add_row(
            str(lane_range.start_lane),
            str(lane_range.end_lane),
            lane_range.pin_fall_type.display_name,
            str(lane_range.pair_count)
        )

    console.print(table)
    console.print(
        f"[green]✓ {name}: {configuration.total_pair_count} lane pair(s), "
        f"{configuration.total_lane_count} lanes[/green]\n"
    )


def _render_failure(name: str, result: Result[LaneConfiguration]) -> None:
    error = result.error
    console.print(f"[bold red]✗ {name}:[/bold red] {error.description}")
    console.print(f"  [dim]{error.code}[/dim]")
    for key, value in error.metadata.items():
        console.print(f"  [dim]{key}: {value}[/dim]")
    console.print()


@app.command()
def validate(
    center: Annotated[Optional[str], typer.Argument(help="Center name. Without it every center is validated.")] = None,
    config_file: ConfigOption = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Validate lane layouts from a layout file.

    Examples:

        lanelayout validate
        lanelayout validate "Lucky Strike Lanes" --config lanes.yaml
    """
    source = _load_source(config_file)
    _configure_logging(source, verbose)
    service = LaneLayoutService(source=source)

    try:
        if center is not None:
            results = {center: service.load_center(center)}
        else:
            results = service.validate_all()
    except LaneLayoutError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not results:
        console.print("[yellow]No centers defined in the layout file.[/yellow]")
        return

    console.print()
    failed = 0
    for name, result in results.items():
        if result.is_error:
            failed += 1
            _render_failure(name, result)
        else:
            _render_configuration(name, result.value)

    if failed:
        console.print(f"[bold red]{failed} of {len(results)} center(s) invalid.[/bold red]")
        raise typer.Exit(1)


@app.command()
def pairs(
    center: Annotated[str, typer.Argument(help="Center name.")],
    config_file: ConfigOption = None,
):
    """
    List every lane pair of a center.
    """
    source = _load_source(config_file)
    _configure_logging(source, verbose=False)
    service = LaneLayoutService(source=source)

    try:
        result = service.load_center(center)
    except LaneLayoutError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if result.is_error:
        _render_failure(center, result)
        raise typer.Exit(1)

    configuration = result.value
    table = Table(
        title=f"Lane pairs - {center}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Pair", style="bold yellow")
    table.add_column("Pin Fall Type", style="dim")

    for lane_range in configuration.ranges:
        for odd_lane, even_lane in lane_range.lane_pairs():
            table.add_row(f"{odd_lane}-{even_lane}", lane_range.pin_fall_type.display_name)

    console.print()
    console.print(table)
    console.print()


@app.command()
def pin_fall_types():
    """
    List the known pin fall types.
    """
    table = Table(
        title="Pin Fall Types",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Code", style="bold yellow")
    table.add_column("Name")

    for pin_fall_type in PinFallType.list():
        table.add_row(pin_fall_type.value, pin_fall_type.display_name)

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]lanelayout[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
