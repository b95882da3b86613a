"""Rich terminal rendering for Life patterns.

Used by ``lifeconv show`` to preview a pattern before converting it.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from lifeconv.grid import Grid

# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

LIFECONV_THEME = Theme(
    {
        "lifeconv.alive": "bold green",
        "lifeconv.dead": "dim white",
        "lifeconv.border": "bright_cyan",
        "lifeconv.error": "bold red",
    }
)

ALIVE_GLYPH = "\u2588\u2588"  # full blocks
DEAD_GLYPH = "\u00b7 "


def make_console(
    record: bool = False, width: int | None = None, stderr: bool = False,
) -> Console:
    """Create a console carrying the lifeconv theme."""
    return Console(theme=LIFECONV_THEME, record=record, width=width, stderr=stderr)


def print_error(message: str, console: Console | None = None) -> None:
    """Print an ``Error:`` line in the error style, unwrapped and unmarked-up."""
    console = console or make_console(stderr=True)
    console.print(
        f"Error: {message}",
        style="lifeconv.error",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def grid_text(grid: Grid) -> Text:
    """Render the cells of *grid* as styled text, one line per row."""
    text = Text()
    for index, row in enumerate(grid.rows()):
        if index:
            text.append("\n")
        for alive in row:
            if alive:
                text.append(ALIVE_GLYPH, style="lifeconv.alive")
            else:
                text.append(DEAD_GLYPH, style="lifeconv.dead")
    return text


def grid_panel(grid: Grid, title: str = "") -> Panel:
    """Wrap :func:`grid_text` in a panel captioned with size and population."""
    return Panel(
        grid_text(grid),
        title=title or None,
        subtitle=f"{grid.width} x {grid.height}, {grid.population} alive",
        border_style="lifeconv.border",
        expand=False,
    )
