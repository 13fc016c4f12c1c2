"""Othello engine package providing rules, game workflow, evaluation and AI search.

Modules:
- board: Player, the 8x8 Board and the capture algorithm
- status: GameStatus, piece counts and mobility for a board
- game: turn-taking workflow with forced passes
- evaluator: Heuristic evaluation function for positions
- ai: Minimax and alpha-beta virtual players
- ascii_board: text rendering helpers
"""

from .ai import AlphaBeta, Minimax, VirtualPlayer
from .ascii_board import board_to_ascii, readable_coordinates
from .board import Board, Player
from .errors import (
    CoordinatesOutOfRangeError,
    GameOverError,
    IllegalMoveError,
    OthelloError,
    WrongTurnError,
)
from .evaluator import Evaluator
from .game import Game
from .status import GameStatus

__all__ = [
    "AlphaBeta",
    "Board",
    "CoordinatesOutOfRangeError",
    "Evaluator",
    "Game",
    "GameOverError",
    "GameStatus",
    "IllegalMoveError",
    "Minimax",
    "OthelloError",
    "Player",
    "VirtualPlayer",
    "WrongTurnError",
    "board_to_ascii",
    "readable_coordinates",
]
