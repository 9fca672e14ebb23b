"""Main CLI application for panel-grid."""

from __future__ import annotations

import logging

import typer

from panel_grid import __version__

app = typer.Typer(
    name="panel-grid",
    help="Place and repack widgets on dashboard screen grids.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"panel-grid {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version.", callback=version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log placement decisions."),
) -> None:
    """panel-grid: grid layout tools for dashboard configurations."""
    from panel_grid.config import get_settings
    from panel_grid.exceptions import ConfigurationError

    try:
        level = "DEBUG" if verbose else get_settings().log_level
    except ConfigurationError as e:
        typer.echo(f"Invalid settings: {e}", err=True)
        raise typer.Exit(1) from e
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


from panel_grid.cli.check_cmd import check  # noqa: E402
from panel_grid.cli.place_cmd import place  # noqa: E402
from panel_grid.cli.tidy_cmd import tidy  # noqa: E402

app.command("check")(check)
app.command("place")(place)
app.command("tidy")(tidy)


def main() -> None:
    """Entry point for the CLI."""
    app()
