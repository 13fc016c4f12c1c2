from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .board import Board, Player
from .config import BOARD_SIZE


@dataclass(frozen=True)
class GameStatus:
    """Piece counts and mobility of both players for one board.

    Shared by the game workflow and the search evaluator. Always rebuilt from
    a board, never updated.
    """

    black_pieces: int = 0
    white_pieces: int = 0
    black_can_move: bool = False
    white_can_move: bool = False

    @classmethod
    def evaluate_board(cls, board: Board) -> "GameStatus":
        black_pieces, white_pieces = board.count_pieces()
        black_can_move = False
        white_can_move = False
        # Nobody can move on a full board
        if black_pieces + white_pieces != BOARD_SIZE * BOARD_SIZE:
            black_can_move = board.can_player_move(Player.BLACK)
            white_can_move = board.can_player_move(Player.WHITE)

        return cls(
            black_pieces=black_pieces,
            white_pieces=white_pieces,
            black_can_move=black_can_move,
            white_can_move=white_can_move,
        )

    def pieces_count(self, player: Player) -> int:
        return self.black_pieces if player is Player.BLACK else self.white_pieces

    def can_player_move(self, player: Player) -> bool:
        return self.black_can_move if player is Player.BLACK else self.white_can_move

    def game_over(self) -> bool:
        return not self.black_can_move and not self.white_can_move

    def winner(self) -> Optional[Player]:
        if not self.game_over() or self.black_pieces == self.white_pieces:
            return None
        return Player.BLACK if self.black_pieces > self.white_pieces else Player.WHITE
