from __future__ import annotations

import pytest

from othello import Board, CoordinatesOutOfRangeError, board_to_ascii, readable_coordinates


def test_board_to_ascii():
    separator = "  +---+---+---+---+---+---+---+---+\n"
    empty = "|   " * 8 + "|\n"
    expected = "    A   B   C   D   E   F   G   H\n"
    for row in range(1, 9):
        expected += separator
        if row == 4:
            expected += "4 |   |   |   | O | X |   |   |   |\n"
        elif row == 5:
            expected += "5 |   |   |   | X | O |   |   |   |\n"
        else:
            expected += f"{row} " + empty
    expected += separator
    assert board_to_ascii(Board.new_start()) == expected


def test_readable_coordinates():
    assert readable_coordinates(0, 0) == "A1"
    assert readable_coordinates(4, 5) == "E6"
    assert readable_coordinates(7, 7) == "H8"
    with pytest.raises(CoordinatesOutOfRangeError):
        readable_coordinates(8, 0)
