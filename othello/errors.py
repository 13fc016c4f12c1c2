from __future__ import annotations


class OthelloError(ValueError):
    """Base class for rule violations reported to callers."""


class CoordinatesOutOfRangeError(OthelloError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"The given coordinates are out of range: ({x}, {y})")
        self.x = x
        self.y = y


class IllegalMoveError(OthelloError):
    pass


class WrongTurnError(OthelloError):
    pass


class GameOverError(OthelloError):
    pass
