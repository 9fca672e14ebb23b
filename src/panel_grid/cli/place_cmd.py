"""panel-grid place: Find where a new item would go on a screen."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from panel_grid.exceptions import PanelGridError, ScreenNotFoundError

console = Console()


def place(
    config_file: Annotated[Path, typer.Argument(help="Dashboard configuration (YAML or JSON)")],
    screen: Annotated[str, typer.Option("--screen", "-s", help="Screen id or slug")],
    width: Annotated[int, typer.Option("--width", "-w", min=1, help="Item width in cells")] = 2,
    height: Annotated[int, typer.Option("--height", "-h", min=1, help="Item height in cells")] = 2,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format: text or json")] = "text",
) -> None:
    """Print the first free position for a new item of the given size."""
    try:
        from panel_grid.config import get_settings
        from panel_grid.grid.positioning import find_optimal_position
        from panel_grid.grid.serializer import ConfigSerializer

        config = ConfigSerializer.read_file(config_file)
        target = config.find_screen(screen)
        if target is None:
            raise ScreenNotFoundError(screen)

        if target.grid is not None:
            items, resolution = target.grid.items, target.grid.resolution
        else:
            items, resolution = [], get_settings().default_resolution

        if width > resolution.columns:
            console.print(
                f"[red]Item width {width} exceeds the screen's {resolution.columns} columns[/red]"
            )
            raise typer.Exit(1)

        pos = find_optimal_position(items, width, height, resolution)

        if fmt == "json":
            console.print_json(json.dumps({"x": pos.x, "y": pos.y}))
            return

        console.print(f"[green]x={pos.x} y={pos.y}[/green]")
        if pos.y + height > resolution.rows:
            console.print(f"[yellow]Below the visible {resolution.rows} rows; the screen will scroll.[/yellow]")

    except PanelGridError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
