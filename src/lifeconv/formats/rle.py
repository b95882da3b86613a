"""Run Length Encoded (RLE) codec.

An RLE file looks like::

    #N Glider
    x = 3, y = 3, rule = B3/S23
    bo$2bo$3o!

Lines starting with ``#`` are comments.  The first content line is the
header declaring the pattern's width and height; the body is a stream of
``[count]o`` (alive) and ``[count]b`` (dead) runs, ``[count]$`` row
terminators, and a final ``!``.  Trailing dead cells of a row and trailing
blank rows may be omitted.
"""

from __future__ import annotations

import logging
import re
from typing import Final, Iterator, TextIO

from lifeconv.config.settings import get_settings
from lifeconv.errors import ParsingError, WritingError
from lifeconv.formats.base import content_lines
from lifeconv.grid import Grid

logger = logging.getLogger(__name__)

HEADER_RE: Final = re.compile(r"^\s*x\s*=\s*(\d+)\s*,\s*y\s*=\s*(\d+)")

COMMENT = "#"
ALIVE = "o"
DEAD = "b"
END_ROW = "$"
END = "!"
DIGITS = frozenset("0123456789")
MAX_COUNT = 2**64 - 1


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------


def is_valid_header(line: str) -> bool:
    """Return ``True`` if *line* starts with an ``x = W, y = H`` header."""
    return HEADER_RE.match(line) is not None


def extract_dimensions(header: str) -> tuple[int, int]:
    """Return ``(width, height)`` declared by an RLE header line."""
    match = HEADER_RE.match(header)
    if match is None:
        raise ParsingError("Couldn't extract dimensions")

    width, height = int(match.group(1)), int(match.group(2))
    if width == 0 or height == 0:
        raise ParsingError("Dimensions cannot be zero")
    return width, height


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def parse_count(digits: str) -> int:
    """Convert a run count, rejecting values beyond 64 bits."""
    count = int(digits)
    if count > MAX_COUNT:
        raise ValueError("number too large to fit in 64 bits")
    return count


class RleDecoder:
    """State machine turning an RLE body into grid rows.

    Two buffers carry the state between characters: ``digits`` accumulates
    the pending run count and ``row`` holds the cells of the row being
    built.  Rows never grow past the declared width, and no more rows are
    committed than the declared height.

    Parameters
    ----------
    width, height:
        Dimensions from the header.
    """

    def __init__(self, width: int, height: int) -> None:
        self.grid = Grid(width=width, height=height)
        self.digits = ""
        self.row: list[bool] = []

    @property
    def rows_left(self) -> int:
        return self.grid.height - len(self.grid.cells) // self.grid.width

    def feed(self, data: str) -> None:
        """Consume a chunk of the body (without the terminating ``!``)."""
        for char in data:
            if char in DIGITS:
                self.digits += char
            elif char in "oObB":
                count = self._take_count(strict=False)
                self._extend_row(char in "oO", count)
            elif char == END_ROW:
                count = self._take_count(strict=True)
                self._end_rows(count)
            # Whitespace and unknown characters are ignored.

    def finish(self) -> Grid:
        """Flush the last row, pad missing rows dead and return the grid."""
        if self.row and self.rows_left > 0:
            self._commit_row()
        self.row = []

        missing = self.grid.width * self.grid.height - len(self.grid.cells)
        self.grid.cells.extend([False] * missing)
        return self.grid

    def _take_count(self, strict: bool) -> int:
        """Resolve and clear the digit buffer; an empty buffer means 1.

        An unparseable buffer is an error before ``$`` (*strict*) and falls
        back to 1 before a cell run.
        """
        digits, self.digits = self.digits, ""
        if not digits:
            return 1
        try:
            return parse_count(digits)
        except ValueError as exc:
            if strict:
                raise ParsingError(f"Invalid count before $: {exc}") from exc
            return 1

    def _extend_row(self, alive: bool, count: int) -> None:
        room = max(self.grid.width - len(self.row), 0)
        self.row.extend([alive] * min(count, room))

    def _end_rows(self, count: int) -> None:
        # Only the first row can carry content; the rest come out blank.
        for _ in range(min(count, self.rows_left)):
            self._commit_row()
        if count:
            self.row = []

    def _commit_row(self) -> None:
        self.row.extend([False] * (self.grid.width - len(self.row)))
        self.grid.cells.extend(self.row)
        self.row = []


def parse(text: str) -> Grid:
    """Parse RLE *text* into a :class:`Grid`."""
    lines = content_lines(text, COMMENT)
    if not lines:
        raise ParsingError("No valid content found")

    width, height = extract_dimensions(lines[0])

    body, _, _ = "".join(lines[1:]).partition(END)
    decoder = RleDecoder(width, height)
    decoder.feed(body)
    grid = decoder.finish()

    logger.debug("Parsed RLE pattern %dx%d", grid.width, grid.height)
    return grid


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class _WrappingWriter:
    """Emit tokens to a sink, breaking the line before it would overflow."""

    def __init__(self, sink: TextIO, line_width: int) -> None:
        self._sink = sink
        self._line_width = line_width
        self.column = 0

    def emit(self, token: str) -> None:
        # An oversized token overflows its own line; no blank line is emitted.
        if self.column and self.column + len(token) > self._line_width:
            self._sink.write("\n")
            self.column = 0
        self._sink.write(token)
        self.column += len(token)


def runs(row: list[bool]) -> Iterator[tuple[bool, int]]:
    """Yield ``(alive, length)`` for each maximal run of equal cells."""
    current: bool | None = None
    count = 0
    for alive in row:
        if alive == current:
            count += 1
            continue
        if current is not None:
            yield current, count
        current, count = alive, 1
    if current is not None:
        yield current, count


def run_token(alive: bool, count: int) -> str:
    """Encode one run, e.g. ``3o``; a count of 1 is left implicit."""
    symbol = ALIVE if alive else DEAD
    return f"{count}{symbol}" if count > 1 else symbol


def write(
    grid: Grid,
    sink: TextIO,
    *,
    line_width: int | None = None,
    rule: str | None = None,
) -> None:
    """Write *grid* to *sink* as RLE.

    Every run is written out, including trailing dead runs, and each row
    ends with ``$`` except the last, which ends with ``!``.  Body lines are
    wrapped at *line_width* characters (the configured width by default).
    """
    codec = get_settings().codec
    if line_width is None:
        line_width = codec.rle_line_width
    if line_width < 1:
        raise WritingError(f"Line width must be positive, got {line_width}")
    if rule is None:
        rule = codec.rle_rule

    sink.write(f"x = {grid.width}, y = {grid.height}, rule = {rule}\n")

    out = _WrappingWriter(sink, line_width)
    last_row = grid.height - 1
    for index, row in enumerate(grid.rows()):
        for alive, count in runs(row):
            out.emit(run_token(alive, count))
        out.emit(END_ROW if index < last_row else END)

    logger.debug("Wrote RLE pattern %dx%d", grid.width, grid.height)
