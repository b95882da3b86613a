"""lifeconv CLI: Typer-based entry point.

Commands
--------
convert     Convert a pattern file between Plaintext and RLE.
detect      Print the detected format of a pattern file.
show        Render a pattern file in the terminal.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from lifeconv import __version__
from lifeconv.config.settings import get_settings
from lifeconv.errors import LifeConvError

app = typer.Typer(
    name="lifeconv",
    help="Conway's Game of Life file format converter",
    add_completion=False,
)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-28s  %(levelname)-7s  %(message)s",
    )


def _fail(exc: Exception) -> typer.Exit:
    from lifeconv.interfaces.terminal_ui import print_error

    print_error(str(exc))
    return typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lifeconv {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Conway's Game of Life file format converter."""


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def convert(
    input_path: Path = typer.Option(..., "--input", "-i", help="Input file path."),
    output_path: Path = typer.Option(..., "--output", "-o", help="Output file path."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing output file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Convert between Plaintext and RLE (the direction is auto-detected)."""
    _setup_logging(verbose)
    from lifeconv.converter import convert_file

    force = force or get_settings().force_overwrite
    if output_path.exists() and not force:
        typer.echo(f"Output file {output_path} already exists.")
        typer.echo("Use --force to overwrite or specify a different output path.")
        return

    typer.echo(f"Converting file: {input_path}")
    try:
        convert_file(input_path, output_path, force=force)
    except (LifeConvError, OSError) as exc:
        raise _fail(exc) from exc
    typer.echo(f"Conversion complete. Output written to: {output_path}")


@app.command()
def detect(
    path: Path = typer.Argument(..., help="Pattern file to inspect."),
) -> None:
    """Print the format of a pattern file."""
    _setup_logging()
    from lifeconv.formats import detect_format

    try:
        fmt = detect_format(path.read_text(encoding="utf-8"))
    except (LifeConvError, OSError) as exc:
        raise _fail(exc) from exc
    typer.echo(fmt.label)


@app.command()
def show(
    path: Path = typer.Argument(..., help="Pattern file to render."),
) -> None:
    """Render a pattern file in the terminal."""
    _setup_logging()
    from lifeconv.converter import read_pattern
    from lifeconv.interfaces.terminal_ui import grid_panel, make_console

    try:
        fmt, grid = read_pattern(path)
    except (LifeConvError, OSError) as exc:
        raise _fail(exc) from exc
    make_console().print(grid_panel(grid, title=f"{path.name} ({fmt.label})"))


def main() -> int:
    """Entry point for the ``lifeconv`` console script."""
    app()
    return 0
