from __future__ import annotations

import pytest

from othello import Board, Player


@pytest.fixture
def forced_pass_board() -> Board:
    """Black to move; whatever Black plays, White is left without a move."""
    board = Board.empty()
    board.set_piece(0, 0, Player.BLACK)
    board.set_piece(1, 0, Player.WHITE)
    board.set_piece(0, 2, Player.BLACK)
    board.set_piece(1, 2, Player.WHITE)
    return board


@pytest.fixture
def full_black_board() -> Board:
    board = Board.empty()
    for x in range(8):
        for y in range(8):
            board.set_piece(x, y, Player.BLACK)
    return board


@pytest.fixture
def half_half_board() -> Board:
    board = Board.empty()
    for x in range(8):
        for y in range(8):
            board.set_piece(x, y, Player.BLACK if x % 2 == 0 else Player.WHITE)
    return board
