"""Pattern file formats.

Routes parse and write calls to the codec matching a :class:`Format`, and
re-exports format detection so callers need a single import.
"""

from __future__ import annotations

import io
from typing import TextIO

from lifeconv.formats import plaintext, rle
from lifeconv.formats.base import Format
from lifeconv.formats.detect import detect_format
from lifeconv.grid import Grid


def parse(text: str, fmt: Format) -> Grid:
    """Parse *text* with the codec for *fmt*."""
    if fmt is Format.RLE:
        return rle.parse(text)
    return plaintext.parse(text)


def write(grid: Grid, sink: TextIO, fmt: Format) -> None:
    """Serialise *grid* into *sink* with the codec for *fmt*.

    Errors raised by *sink* propagate unchanged; whatever was already
    written stays in the sink.
    """
    if fmt is Format.RLE:
        rle.write(grid, sink)
    else:
        plaintext.write(grid, sink)


def loads(text: str, fmt: Format | None = None) -> Grid:
    """Parse *text*, detecting its format when *fmt* is not given."""
    return parse(text, fmt or detect_format(text))


def dumps(grid: Grid, fmt: Format) -> str:
    """Serialise *grid* to a string."""
    buffer = io.StringIO()
    write(grid, buffer, fmt)
    return buffer.getvalue()


__all__ = ["Format", "detect_format", "dumps", "loads", "parse", "write"]
