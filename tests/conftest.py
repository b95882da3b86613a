"""Shared test fixtures for lifeconv.

Provides a few well-known patterns in both encodings so individual test
modules stay focused.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lifeconv.grid import Grid

GLIDER_RLE = "#N Glider\n#O Richard K. Guy\nx = 3, y = 3, rule = B3/S23\nbo$2bo$3o!\n"
GLIDER_PLAINTEXT = "!Name: Glider\n!\n.O.\n..O\nOOO\n"


@pytest.fixture()
def glider() -> Grid:
    """The 3x3 glider."""
    return Grid.from_rows([
        [False, True, False],
        [False, False, True],
        [True, True, True],
    ])


@pytest.fixture()
def checkerboard() -> Grid:
    """A 100x3 grid alternating alive/dead cells, long enough to wrap."""
    return Grid.from_rows(
        [(col + row) % 2 == 0 for col in range(100)] for row in range(3)
    )


@pytest.fixture()
def glider_rle_file(tmp_path: Path) -> Path:
    path = tmp_path / "glider.rle"
    path.write_text(GLIDER_RLE, encoding="utf-8")
    return path


@pytest.fixture()
def glider_cells_file(tmp_path: Path) -> Path:
    path = tmp_path / "glider.cells"
    path.write_text(GLIDER_PLAINTEXT, encoding="utf-8")
    return path
