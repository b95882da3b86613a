"""Tests for the Plaintext codec."""

from __future__ import annotations

import io

import pytest

from lifeconv.errors import ParsingError
from lifeconv.formats import plaintext
from lifeconv.grid import Grid
from tests.conftest import GLIDER_PLAINTEXT


class TestParse:
    def test_cross_pattern(self) -> None:
        grid = plaintext.parse("O.O\n.O.\nO.O\n")
        assert (grid.width, grid.height) == (3, 3)
        alive = {(r, c) for r in range(3) for c in range(3) if grid.get(r, c)}
        assert alive == {(0, 0), (0, 2), (1, 1), (2, 0), (2, 2)}
        assert grid.is_complete

    def test_comments_are_skipped(self, glider: Grid) -> None:
        assert plaintext.parse(GLIDER_PLAINTEXT) == glider

    def test_indented_comment_is_skipped(self) -> None:
        grid = plaintext.parse("  !comment\n  O.\n")
        assert (grid.width, grid.height) == (2, 1)
        assert grid.cells == [True, False]

    def test_short_rows_are_padded(self) -> None:
        grid = plaintext.parse("O\n...O\nOO\n")
        assert (grid.width, grid.height) == (4, 3)
        assert list(grid.rows()) == [
            [True, False, False, False],
            [False, False, False, True],
            [True, True, False, False],
        ]

    def test_other_characters_are_skipped(self) -> None:
        grid = plaintext.parse("O x O\n.*.\n")
        assert grid.width == 2
        assert list(grid.rows()) == [[True, True], [False, False]]

    def test_blank_lines_between_rows_are_dropped(self) -> None:
        grid = plaintext.parse("O.\n\n.O\n")
        assert grid.height == 2

    def test_no_content(self) -> None:
        with pytest.raises(ParsingError, match="No valid content found"):
            plaintext.parse("!Name: nothing\n\n")

    def test_no_cells(self) -> None:
        with pytest.raises(ParsingError, match="No valid cells found"):
            plaintext.parse("abc\nxyz\n")


class TestWrite:
    def test_cross_pattern_reproduces_text(self) -> None:
        text = "O.O\n.O.\nO.O\n"
        sink = io.StringIO()
        plaintext.write(plaintext.parse(text), sink)
        assert sink.getvalue() == text

    def test_missing_cells_are_dead(self) -> None:
        sink = io.StringIO()
        plaintext.write(Grid(width=2, height=2, cells=[True]), sink)
        assert sink.getvalue() == "O.\n..\n"

    def test_long_rows_are_not_wrapped(self) -> None:
        grid = Grid.from_rows([[True] * 200])
        sink = io.StringIO()
        plaintext.write(grid, sink)
        assert sink.getvalue() == "O" * 200 + "\n"

    def test_round_trip(self, glider: Grid) -> None:
        sink = io.StringIO()
        plaintext.write(glider, sink)
        assert plaintext.parse(sink.getvalue()) == glider


class TestLineBreaks:
    def test_form_feed_stays_inside_its_row(self) -> None:
        grid = plaintext.parse("O.\x0cO.\n")
        assert (grid.width, grid.height) == (4, 1)
        assert grid.cells == [True, False, True, False]

    def test_crlf_line_endings(self) -> None:
        grid = plaintext.parse("!comment\r\nO.O\r\n.O.\r\n")
        assert (grid.width, grid.height) == (3, 2)
