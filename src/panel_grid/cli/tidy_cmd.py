"""panel-grid tidy: Repack a screen's items to close gaps."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from panel_grid.exceptions import PanelGridError, ScreenNotFoundError

console = Console()


def tidy(
    config_file: Annotated[Path, typer.Argument(help="Dashboard configuration (YAML or JSON)")],
    screen: Annotated[str, typer.Option("--screen", "-s", help="Screen id or slug")],
    packer: Annotated[str | None, typer.Option("--packer", "-p", help="greedy or compact")] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write result to this file")] = None,
    fmt: Annotated[str | None, typer.Option("--format", "-f", help="Stdout format: yaml or json")] = None,
) -> None:
    """Repack one screen and print or write the updated configuration."""
    try:
        from panel_grid.config import get_settings
        from panel_grid.grid.manager import LayoutManager
        from panel_grid.grid.serializer import ConfigSerializer

        config = ConfigSerializer.read_file(config_file)
        target = config.find_screen(screen)
        if target is None:
            raise ScreenNotFoundError(screen)

        packer = packer or get_settings().default_packer
        updated = config.replace_screen(LayoutManager.tidy(target, packer=packer))

        if output:
            ConfigSerializer.write_file(updated, output)
            console.print(f"[green]Tidied screen '{screen}' written to {output}[/green]")
            return

        out_fmt = fmt or ConfigSerializer.format_for(config_file)
        typer.echo(ConfigSerializer.dump(updated, out_fmt))

    except PanelGridError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
