"""panel-grid check: Validate screen layouts and optionally draw them."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from panel_grid.exceptions import PanelGridError, ScreenNotFoundError
from panel_grid.grid.definition import ScreenGrid

console = Console()


def check(
    config_file: Annotated[Path, typer.Argument(help="Dashboard configuration (YAML or JSON)")],
    screen: Annotated[str | None, typer.Option("--screen", "-s", help="Only check this screen")] = None,
    show: Annotated[bool, typer.Option("--show", help="Draw each screen's grid")] = False,
) -> None:
    """Check screens for overlapping or out-of-bounds items."""
    try:
        from panel_grid.grid.serializer import ConfigSerializer
        from panel_grid.grid.validator import validate_layout

        config = ConfigSerializer.read_file(config_file)

        if screen:
            target = config.find_screen(screen)
            if target is None:
                raise ScreenNotFoundError(screen)
            screens = [target]
        else:
            screens = list(config.iter_screens())

        failed = False
        for s in screens:
            if s.grid is None:
                console.print(f"[dim]{s.slug or s.id}: no grid[/dim]")
                continue

            result = validate_layout(s.grid.items, s.grid.resolution)
            status = "[green]ok[/green]" if result.valid else "[red]invalid[/red]"
            console.print(f"[bold]{s.slug or s.id}[/bold] ({len(s.grid.items)} items): {status}")
            for err in result.errors:
                console.print(f"  [red]✗[/red] {err}")
            for warn in result.warnings:
                console.print(f"  [yellow]![/yellow] {warn}")
            failed = failed or not result.valid

            if show:
                console.print(_grid_table(s.name, s.grid))

        if failed:
            raise typer.Exit(1)

    except PanelGridError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _grid_table(title: str, grid: ScreenGrid) -> Table:
    """Render a screen grid with each cell labelled by the item covering it."""

    bottom = max((item.y + item.height for item in grid.items), default=0)
    rows = max(grid.resolution.rows, bottom)
    cells: dict[tuple[int, int], str] = {}
    for item in grid.items:
        for dy in range(item.height):
            for dx in range(item.width):
                key = (item.x + dx, item.y + dy)
                cells[key] = "##" if key in cells else item.id[:6]

    table = Table(title=title, show_header=False, show_lines=True)
    for _ in range(grid.resolution.columns):
        table.add_column(justify="center", min_width=6)
    for y in range(rows):
        style = "dim" if y >= grid.resolution.rows else None
        table.add_row(*(cells.get((x, y), "·") for x in range(grid.resolution.columns)), style=style)
    return table
