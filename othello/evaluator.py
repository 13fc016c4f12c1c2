from __future__ import annotations

from .board import Board, Player
from .config import BOARD_SIZE
from .status import GameStatus


class Evaluator:
    """Static evaluation for Othello positions.

    Positive scores favor Black, negative scores favor White.
    """

    # Game over with a winner
    SCORE_MAX = 100000
    SCORE_DRAW = 0
    # Bonus when the opponent can't move next turn
    SCORE_OPPONENT_BLOCKED = 4

    # Scores by piece position
    SCORE_INSIDE = 1
    SCORE_BORDER = 4
    SCORE_CORNER = 8

    @classmethod
    def evaluate(cls, board: Board, last_player: Player) -> int:
        """Evaluate ``board`` right after ``last_player`` moved."""
        status = GameStatus.evaluate_board(board)
        if status.game_over():
            winner = status.winner()
            if winner is None:
                return cls.SCORE_DRAW
            return cls.sign_for_player(winner, cls.SCORE_MAX)

        score = 0
        for x, y, piece in board:
            if piece is None:
                continue
            score += cls.sign_for_player(piece, cls._position_score(x, y))

        if not status.can_player_move(last_player.opponent()):
            score += cls.sign_for_player(last_player, cls.SCORE_OPPONENT_BLOCKED)

        return score

    @staticmethod
    def sign_for_player(player: Player, evaluation: int) -> int:
        """Negate ``evaluation`` for White."""
        return evaluation if player is Player.BLACK else -evaluation

    @classmethod
    def _position_score(cls, x: int, y: int) -> int:
        on_x_edge = x in (0, BOARD_SIZE - 1)
        on_y_edge = y in (0, BOARD_SIZE - 1)
        if on_x_edge and on_y_edge:
            return cls.SCORE_CORNER
        if on_x_edge or on_y_edge:
            return cls.SCORE_BORDER
        return cls.SCORE_INSIDE
