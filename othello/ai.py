from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Player, grid
from .config import MIN_DEPTH
from .evaluator import Evaluator

logger = logging.getLogger(__name__)

SEARCH_INFINITY = 10**9


@dataclass
class BestMove:
    x: int
    y: int
    evaluation: int

    def normalized_evaluation(self, player: Player) -> int:
        """Evaluation where greater is better for ``player``."""
        return Evaluator.sign_for_player(player, self.evaluation)

    @staticmethod
    def best_for_player(
        player: Player, move_a: Optional["BestMove"], move_b: Optional["BestMove"]
    ) -> Optional["BestMove"]:
        """Pick the better move for ``player``; ``move_a`` wins ties."""
        if move_a is None:
            return move_b
        if move_b is None:
            return move_a
        if move_a.normalized_evaluation(player) >= move_b.normalized_evaluation(player):
            return move_a
        return move_b


def next_player(board: Board, player: Player) -> Optional[Player]:
    """Who moves after ``player`` on ``board``, None if nobody can."""
    if board.can_player_move(player.opponent()):
        return player.opponent()
    if board.can_player_move(player):
        return player
    return None


class VirtualPlayer(ABC):
    """Common interface of move-finding algorithms."""

    def __init__(self, depth: int) -> None:
        if depth < MIN_DEPTH:
            raise ValueError(f"Search depth must be at least {MIN_DEPTH}, got {depth}")
        self.depth = depth
        self._move_count = 0

    def move_count(self) -> int:
        """Total count of moves explored since creation."""
        return self._move_count

    def compute_move(self, board: Board, me: Player) -> Optional[Tuple[int, int]]:
        """Return the best move for ``me`` on ``board``, None if ``me`` can't move."""
        start_count = self._move_count
        best_move = self._search_root(board, me)
        logger.debug(
            "%s depth %d: best move %s for %s, %d moves explored",
            type(self).__name__,
            self.depth,
            best_move,
            me,
            self._move_count - start_count,
        )
        if best_move is None:
            return None
        return best_move.x, best_move.y

    @abstractmethod
    def _search_root(self, board: Board, me: Player) -> Optional[BestMove]:
        ...


class Minimax(VirtualPlayer):
    """Exhaustive minimax search."""

    def _search_root(self, board: Board, me: Player) -> Optional[BestMove]:
        return self._minimax(board, me, 1)

    def _minimax(self, board: Board, player: Player, depth: int) -> Optional[BestMove]:
        best_move: Optional[BestMove] = None
        for x, y in grid():
            board_after_move = board.play(player, x, y)
            if board_after_move is None:
                continue
            self._move_count += 1

            following = None if depth == self.depth else next_player(board_after_move, player)
            if following is None:
                # Max depth or blocked game
                evaluation = Evaluator.evaluate(board_after_move, player)
            else:
                inner = self._minimax(board_after_move, following, depth + 1)
                if inner is None:
                    raise RuntimeError("Search reached a position without any move.")
                evaluation = inner.evaluation

            best_move = BestMove.best_for_player(player, best_move, BestMove(x, y, evaluation))

        return best_move


class AlphaBeta(VirtualPlayer):
    """Minimax with alpha-beta pruning.

    Finds the same move as :class:`Minimax` while exploring fewer moves.
    The window handed to children is tightened from the running best after
    each recursively searched sibling, but cutoffs compare against the bounds
    the node was called with. Statically evaluated moves never cut.
    """

    def _search_root(self, board: Board, me: Player) -> Optional[BestMove]:
        return self._alphabeta(board, me, 1, -SEARCH_INFINITY, SEARCH_INFINITY)

    def _alphabeta(
        self,
        board: Board,
        player: Player,
        depth: int,
        alpha: int,
        beta: int,
    ) -> Optional[BestMove]:
        best_move: Optional[BestMove] = None
        current_alpha = alpha
        current_beta = beta
        for x, y in grid():
            board_after_move = board.play(player, x, y)
            if board_after_move is None:
                continue
            self._move_count += 1

            following = None if depth == self.depth else next_player(board_after_move, player)
            if following is None:
                # Max depth or blocked game
                evaluation = Evaluator.evaluate(board_after_move, player)
                best_move = BestMove.best_for_player(player, best_move, BestMove(x, y, evaluation))
                continue

            inner = self._alphabeta(
                board_after_move, following, depth + 1, current_alpha, current_beta
            )
            if inner is None:
                raise RuntimeError("Search reached a position without any move.")
            best_move = BestMove.best_for_player(
                player, best_move, BestMove(x, y, inner.evaluation)
            )

            best_evaluation = best_move.evaluation
            if player is Player.BLACK:
                if best_evaluation >= beta:
                    # beta cut
                    return best_move
                current_alpha = max(current_alpha, best_evaluation)
            else:
                if best_evaluation <= alpha:
                    # alpha cut
                    return best_move
                current_beta = min(current_beta, best_evaluation)

        return best_move
