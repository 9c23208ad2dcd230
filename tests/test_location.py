"""Tests for offset → line/column conversion."""

import pytest

from hilo.location import SourceLocation


class TestFromOffset:
    @pytest.mark.parametrize(
        ("offset", "lineno", "col"),
        [
            (0, 1, 1),
            (2, 1, 3),
            (3, 2, 1),
            (5, 2, 3),
            (6, 3, 1),
        ],
    )
    def test_positions(self, offset: int, lineno: int, col: int) -> None:
        loc = SourceLocation.from_offset("ab\ncd\n", offset)
        assert (loc.lineno, loc.col_offset, loc.offset) == (lineno, col, offset)

    def test_clamped_past_end(self) -> None:
        loc = SourceLocation.from_offset("abc", 10)
        assert loc.offset == 3
        assert loc.col_offset == 4

    def test_str(self) -> None:
        assert str(SourceLocation(lineno=3, col_offset=7)) == "3:7"
        loc = SourceLocation.from_offset("x\ny", 2, source_file="notes.md")
        assert str(loc) == "notes.md:2:1"
