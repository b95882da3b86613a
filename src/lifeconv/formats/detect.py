"""Format detection: decide whether a text blob is RLE or Plaintext."""

from __future__ import annotations

import logging

from lifeconv.errors import FormatDetectionError
from lifeconv.formats.base import Format, split_lines
from lifeconv.formats.rle import is_valid_header

logger = logging.getLogger(__name__)


def detect_format(text: str) -> Format:
    """Classify *text* by its first content line.

    Blank lines and ``#`` comments are skipped.  The first remaining line
    decides: an RLE header means :attr:`Format.RLE`, anything else is
    :attr:`Format.PLAINTEXT`.  Plaintext ``!`` comments are deliberately not
    skipped here, so a Plaintext file opening with ``!Name: ...`` is
    classified by that line.
    """
    for line in split_lines(text):
        trimmed = line.lstrip()
        if not trimmed or trimmed.startswith("#"):
            continue
        fmt = Format.RLE if is_valid_header(trimmed) else Format.PLAINTEXT
        logger.debug("Detected %s from line %r", fmt.label, trimmed[:40])
        return fmt

    raise FormatDetectionError("Could not detect file format")
