"""File conversion between Plaintext and RLE.

Thin orchestration over :mod:`lifeconv.formats`: detect the source format,
parse it, and write the pattern in the other format.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lifeconv.formats import Format, detect_format, dumps, parse, write
from lifeconv.grid import Grid

logger = logging.getLogger(__name__)


def target_format(fmt: Format) -> Format:
    """Return the format a pattern in *fmt* is converted to."""
    return Format.PLAINTEXT if fmt is Format.RLE else Format.RLE


def convert_text(text: str, target: Format | None = None) -> tuple[Format, str]:
    """Convert *text* and return ``(source_format, output_text)``.

    *target* defaults to the opposite of the detected format.
    """
    source = detect_format(text)
    grid = parse(text, source)
    return source, dumps(grid, target or target_format(source))


def read_pattern(path: Path) -> tuple[Format, Grid]:
    """Load the pattern stored at *path*."""
    text = path.read_text(encoding="utf-8")
    fmt = detect_format(text)
    return fmt, parse(text, fmt)


def convert_file(input_path: Path, output_path: Path, force: bool = False) -> Format:
    """Convert *input_path* into the other format at *output_path*.

    Returns the detected source format.  An existing output file is only
    replaced when *force* is set.  If writing fails part way, the partial
    output is left in place.
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file does not exist: {input_path}")
    if output_path.exists() and not force:
        raise FileExistsError(f"Output file already exists: {output_path}")

    source, grid = read_pattern(input_path)
    target = target_format(source)
    logger.info(
        "Converting %s (%s, %dx%d) to %s",
        input_path, source.label, grid.width, grid.height, target.label,
    )

    with output_path.open("w", encoding="utf-8") as sink:
        write(grid, sink, target)

    logger.info("Wrote %s", output_path)
    return source
