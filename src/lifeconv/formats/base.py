"""Shared pieces of the pattern codecs."""

from __future__ import annotations

from enum import Enum


class Format(str, Enum):
    """Textual encodings a pattern can be stored in."""

    PLAINTEXT = "plaintext"
    RLE = "rle"

    @property
    def label(self) -> str:
        return "RLE" if self is Format.RLE else "Plaintext"


def split_lines(text: str) -> list[str]:
    r"""Split *text* on ``\n`` only, dropping a trailing ``\r`` from each line.

    Form feeds, vertical tabs and Unicode line separators stay inside
    their line.
    """
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def content_lines(text: str, comment: str) -> list[str]:
    """Return the trimmed lines of *text* that are neither blank nor comments.

    A comment is any line whose first non-blank character is *comment*.
    """
    lines: list[str] = []
    for raw in split_lines(text):
        line = raw.strip()
        if not line or line.startswith(comment):
            continue
        lines.append(line)
    return lines
