"""Uniform in-memory representation of a Life pattern.

A ``Grid`` is a fixed-size rectangle of live/dead cells stored row-major in a
flat list.  Codecs create an empty grid, append cells while parsing and then
hand it over as read-only input to a writer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

import numpy as np


@dataclass
class Grid:
    """A ``width`` x ``height`` matrix of booleans (``True`` = alive)."""

    width: int
    height: int
    cells: list[bool] = field(default_factory=list)
    """Row-major cell states; index = ``row * width + col``."""

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[bool]]) -> Grid:
        """Build a complete grid from nested rows, padding short rows dead."""
        materialised = [[bool(c) for c in row] for row in rows]
        width = max((len(row) for row in materialised), default=0)
        grid = cls(width=width, height=len(materialised))
        for row in materialised:
            grid.cells.extend(row)
            grid.cells.extend([False] * (width - len(row)))
        return grid

    @classmethod
    def from_array(cls, array: np.ndarray) -> Grid:
        """Build a grid from a 2D array; non-zero entries are alive."""
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim} dimensions")
        height, width = array.shape
        grid = cls(width=int(width), height=int(height))
        grid.cells.extend(array.astype(bool).ravel().tolist())
        return grid

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> bool | None:
        """Return the cell state, or ``None`` when out of bounds."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            return None
        idx = row * self.width + col
        if idx >= len(self.cells):
            return None
        return self.cells[idx]

    def cell(self, row: int, col: int) -> bool:
        """Like :meth:`get`, but absent cells read as dead."""
        return bool(self.get(row, col))

    def rows(self) -> Iterator[list[bool]]:
        """Yield each row as a list, treating missing cells as dead."""
        for row in range(self.height):
            yield [self.cell(row, col) for col in range(self.width)]

    @property
    def is_complete(self) -> bool:
        return len(self.cells) == self.width * self.height

    @property
    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self.to_array()))

    def to_array(self) -> np.ndarray:
        """Return a ``(height, width)`` boolean array of the pattern."""
        return np.array(list(self.rows()), dtype=bool).reshape(self.height, self.width)
