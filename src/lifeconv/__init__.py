"""lifeconv: convert Conway's Game of Life patterns between Plaintext and RLE.

The public API detects a text blob's format, parses it into a :class:`Grid`
and writes a grid back out in either format.
"""

from __future__ import annotations

from lifeconv.errors import (
    FormatDetectionError,
    LifeConvError,
    ParsingError,
    WritingError,
)
from lifeconv.formats import Format, detect_format, dumps, loads, parse, write
from lifeconv.grid import Grid

__version__ = "0.1.0"

__all__ = [
    "Format",
    "FormatDetectionError",
    "Grid",
    "LifeConvError",
    "ParsingError",
    "WritingError",
    "__version__",
    "detect_format",
    "dumps",
    "loads",
    "parse",
    "write",
]
