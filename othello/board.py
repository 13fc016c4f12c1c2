from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .config import BOARD_SIZE
from .errors import CoordinatesOutOfRangeError

Coordinates = Tuple[int, int]
Direction = Tuple[int, int]


class Player(Enum):
    BLACK = "black"
    WHITE = "white"

    def opponent(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    def __str__(self) -> str:
        return self.name.capitalize()


def grid() -> Iterator[Coordinates]:
    """Yield every cell of the grid, x fastest then y."""
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            yield x, y


def check_coordinates(x: int, y: int) -> None:
    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        raise CoordinatesOutOfRangeError(x, y)


class CellsNavigator:
    """Walks from a start cell to the board edge in a given direction.

    The start cell itself is not yielded. After ``reverse()`` the walk goes
    backward from the current position, so it reaches the start cell again.
    """

    def __init__(self, start: Coordinates, direction: Direction) -> None:
        x, y = start
        dx, dy = direction
        check_coordinates(x, y)
        if not (-1 <= dx <= 1 and -1 <= dy <= 1):
            raise ValueError(f"The given direction is out of range: ({dx}, {dy})")
        self.position = (x, y)
        self.direction = (dx, dy)

    def reverse(self) -> None:
        self.direction = (-self.direction[0], -self.direction[1])

    def __iter__(self) -> "CellsNavigator":
        return self

    def __next__(self) -> Coordinates:
        x = self.position[0] + self.direction[0]
        y = self.position[1] + self.direction[1]
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise StopIteration
        self.position = (x, y)
        return x, y


class Board:
    """An 8x8 Othello board implementing moves, not the game workflow.

    ``play`` never touches the board it is called on: a legal move produces a
    new Board, so search can explore branches without undoing anything.
    """

    ALL_DIRECTIONS: Tuple[Direction, ...] = (
        (0, -1),
        (1, -1),
        (1, 0),
        (1, 1),
        (0, 1),
        (-1, 1),
        (-1, 0),
        (-1, -1),
    )

    def __init__(self, cells: Optional[List[List[Optional[Player]]]] = None) -> None:
        # cells[x][y]
        if cells is None:
            cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._cells = cells

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def new_start(cls) -> "Board":
        board = cls()
        board.set_piece(3, 3, Player.WHITE)
        board.set_piece(4, 4, Player.WHITE)
        board.set_piece(3, 4, Player.BLACK)
        board.set_piece(4, 3, Player.BLACK)
        return board

    def copy(self) -> "Board":
        return Board([column[:] for column in self._cells])

    def get_piece(self, x: int, y: int) -> Optional[Player]:
        check_coordinates(x, y)
        return self._cells[x][y]

    def set_piece(self, x: int, y: int, piece: Optional[Player]) -> None:
        check_coordinates(x, y)
        self._cells[x][y] = piece

    def __iter__(self) -> Iterator[Tuple[int, int, Optional[Player]]]:
        for x, y in grid():
            yield x, y, self._cells[x][y]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def is_move_valid(self, player: Player, x: int, y: int) -> bool:
        """Check a move without building the resulting board."""
        check_coordinates(x, y)
        if self._cells[x][y] is not None:
            return False

        opponent = player.opponent()
        for direction in self.ALL_DIRECTIONS:
            if self._capture_navigator(opponent, x, y, direction) is not None:
                return True
        return False

    def _capture_navigator(
        self, opponent: Player, x: int, y: int, direction: Direction
    ) -> Optional[CellsNavigator]:
        """Return a navigator set to walk a capturable run backward, or None."""
        navigator = CellsNavigator((x, y), direction)
        found_opponent = False
        for px, py in navigator:
            piece = self._cells[px][py]
            if piece is None:
                return None
            if piece is opponent:
                found_opponent = True
                continue
            # Reached one of the mover's pieces
            if not found_opponent:
                return None
            navigator.reverse()
            return navigator
        return None

    def play(self, player: Player, x: int, y: int) -> Optional["Board"]:
        """Play ``player`` at (x, y).

        Returns the board after the move, or None when the cell is occupied or
        the move captures nothing.
        """
        check_coordinates(x, y)
        if self._cells[x][y] is not None:
            return None

        opponent = player.opponent()
        new_board: Optional[Board] = None
        for direction in self.ALL_DIRECTIONS:
            navigator = self._capture_navigator(opponent, x, y, direction)
            if navigator is None:
                continue
            if new_board is None:
                new_board = self.copy()
            for position in navigator:
                # Walking backward stops at the move position
                if position == (x, y):
                    break
                new_board._cells[position[0]][position[1]] = player

        if new_board is not None:
            new_board._cells[x][y] = player
        return new_board

    def can_player_move(self, player: Player) -> bool:
        return any(self.is_move_valid(player, x, y) for x, y in grid())

    def legal_moves(self, player: Player) -> List[Coordinates]:
        return [(x, y) for x, y in grid() if self.is_move_valid(player, x, y)]

    def count_pieces(self) -> Tuple[int, int]:
        """Return (black pieces, white pieces)."""
        black_pieces = 0
        white_pieces = 0
        for _, _, piece in self:
            if piece is Player.BLACK:
                black_pieces += 1
            elif piece is Player.WHITE:
                white_pieces += 1
        return black_pieces, white_pieces

    def __str__(self) -> str:
        symbols = {None: " ", Player.BLACK: "X", Player.WHITE: "O"}
        lines = []
        for y in range(BOARD_SIZE):
            row = "".join(symbols[self._cells[x][y]] for x in range(BOARD_SIZE))
            lines.append(row + ".\n")
        return "".join(lines)

    def __repr__(self) -> str:
        black_pieces, white_pieces = self.count_pieces()
        return f"<Board black={black_pieces} white={white_pieces}>"
