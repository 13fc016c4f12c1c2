from __future__ import annotations

from typing import Optional

from .board import Board, Player, check_coordinates
from .config import BOARD_SIZE

ROW_SEPARATOR = "  " + "+---" * BOARD_SIZE + "+\n"
LETTERS = "    " + "   ".join(chr(ord("A") + x) for x in range(BOARD_SIZE)) + "\n"


def board_to_ascii(board: Board) -> str:
    """Build a framed ascii representation of a board, columns A-H and rows 1-8."""
    lines = [LETTERS]
    for y in range(BOARD_SIZE):
        lines.append(ROW_SEPARATOR)
        cells = "".join(_cell_to_ascii(board.get_piece(x, y)) for x in range(BOARD_SIZE))
        lines.append(f"{y + 1} {cells}|\n")
    lines.append(ROW_SEPARATOR)
    return "".join(lines)


def _cell_to_ascii(piece: Optional[Player]) -> str:
    if piece is Player.BLACK:
        return "| X "
    if piece is Player.WHITE:
        return "| O "
    return "|   "


def readable_coordinates(x: int, y: int) -> str:
    """(4, 5) -> 'E6'"""
    check_coordinates(x, y)
    return f"{chr(ord('A') + x)}{y + 1}"
