"""Plaintext codec: one text line per row, ``O`` alive and ``.`` dead.

Lines starting with ``!`` are comments.  Rows shorter than the widest one
are implicitly padded with dead cells.
"""

from __future__ import annotations

import logging
from typing import TextIO

from lifeconv.errors import ParsingError
from lifeconv.formats.base import content_lines
from lifeconv.grid import Grid

logger = logging.getLogger(__name__)

COMMENT = "!"
ALIVE = "O"
DEAD = "."


def parse(text: str) -> Grid:
    """Parse Plaintext *text* into a :class:`Grid`."""
    lines = content_lines(text, COMMENT)
    if not lines:
        raise ParsingError("No valid content found")

    width = max(sum(1 for c in line if c in (ALIVE, DEAD)) for line in lines)
    if width == 0:
        raise ParsingError("No valid cells found")

    grid = Grid(width=width, height=len(lines))
    for line in lines:
        # Characters other than O and . are skipped without advancing.
        row = [c == ALIVE for c in line if c in (ALIVE, DEAD)]
        row.extend([False] * (width - len(row)))
        grid.cells.extend(row)

    logger.debug("Parsed Plaintext pattern %dx%d", grid.width, grid.height)
    return grid


def write(grid: Grid, sink: TextIO) -> None:
    """Write *grid* to *sink*, one line per row."""
    for row in grid.rows():
        sink.write("".join(ALIVE if alive else DEAD for alive in row))
        sink.write("\n")
    logger.debug("Wrote Plaintext pattern %dx%d", grid.width, grid.height)
