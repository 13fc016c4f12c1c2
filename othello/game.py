from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .ascii_board import board_to_ascii, readable_coordinates
from .board import Board, Player, check_coordinates
from .config import BOARD_SIZE
from .errors import GameOverError, IllegalMoveError, WrongTurnError
from .status import GameStatus

logger = logging.getLogger(__name__)


class Game:
    """Manages an Othello game workflow.

    This class owns the mutable game state: the current board, whose turn it
    is, and whether the last move left the opponent without a move. A player
    who can't move loses the turn; the game ends when nobody can move.
    """

    def __init__(self, board: Optional[Board] = None, player: Player = Player.BLACK) -> None:
        self._start(board, player)

    def reset(self, board: Optional[Board] = None, player: Player = Player.BLACK) -> None:
        self._start(board, player)

    def _start(self, board: Optional[Board], player: Player) -> None:
        self.board = board.copy() if board is not None else Board.new_start()
        self.status = GameStatus.evaluate_board(self.board)
        self.last_move: Optional[Tuple[Player, int, int]] = None
        self._opponent_is_blocked = False
        if self.status.game_over():
            self._player: Optional[Player] = None
        elif self.status.can_player_move(player):
            self._player = player
        else:
            self._player = player.opponent()

    def play(self, player: Player, x: int, y: int) -> None:
        """Apply a move. Raises an OthelloError and keeps the state on failure."""
        if self._player is None:
            raise GameOverError("None of the players can move, the game is over.")
        if player is not self._player:
            raise WrongTurnError(f"It's the turn of {self._player}, not {player}.")
        check_coordinates(x, y)

        new_board = self.board.play(player, x, y)
        if new_board is None:
            raise IllegalMoveError(f"Illegal move: {readable_coordinates(x, y)}")

        self.board = new_board
        self.last_move = (player, x, y)
        self.status = GameStatus.evaluate_board(self.board)
        logger.debug("%s played %s", player, readable_coordinates(x, y))
        self._update_player(player)

    def _update_player(self, player: Player) -> None:
        if self.status.game_over():
            self._player = None
            logger.debug("Game over, winner: %s", self.status.winner())
            return

        # The game isn't over, so if the opponent is stuck the player can move.
        if self.status.can_player_move(player.opponent()):
            self._player = player.opponent()
            self._opponent_is_blocked = False
        else:
            self._opponent_is_blocked = True
            logger.debug("%s can't move, %s plays again", player.opponent(), player)

    def player(self) -> Optional[Player]:
        return self._player

    def opponent_is_blocked(self) -> bool:
        return self._opponent_is_blocked

    def game_over(self) -> bool:
        return self.status.game_over()

    def winner(self) -> Optional[Player]:
        return self.status.winner()

    def count_pieces(self) -> Tuple[int, int]:
        return (
            self.status.pieces_count(Player.BLACK),
            self.status.pieces_count(Player.WHITE),
        )

    def legal_moves(self) -> List[Tuple[int, int]]:
        if self._player is None:
            return []
        return self.board.legal_moves(self._player)

    def snapshot(self) -> Dict[str, object]:
        black_pieces, white_pieces = self.count_pieces()
        winner = self.winner()
        last_move: Optional[Dict[str, object]] = None
        if self.last_move is not None:
            mover, x, y = self.last_move
            last_move = {"player": mover.value, "x": x, "y": y, "cell": readable_coordinates(x, y)}

        return {
            "board": [
                [piece.value if piece is not None else None for piece in row]
                for row in self._rows()
            ],
            "ascii": board_to_ascii(self.board),
            "turn": self._player.value if self._player is not None else None,
            "legal_moves": [list(move) for move in self.legal_moves()],
            "opponent_is_blocked": self._opponent_is_blocked,
            "game_over": self.game_over(),
            "winner": winner.value if winner is not None else None,
            "black_pieces": black_pieces,
            "white_pieces": white_pieces,
            "last_move": last_move,
        }

    def _rows(self) -> List[List[Optional[Player]]]:
        return [
            [self.board.get_piece(x, y) for x in range(BOARD_SIZE)] for y in range(BOARD_SIZE)
        ]
