from __future__ import annotations
from typing import Optional


class MoveError(Exception):
    """A move attempt was rejected. The board is left unchanged."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class OutOfRange(MoveError):
    pass


class CellOccupied(MoveError):
    pass


class NoMovesAvailable(MoveError):
    pass


class InvalidInput(MoveError):
    pass


class InvalidBoard(ValueError):
    """Raised when a board cannot occur in a real game"""
    pass


class TooManyAttempts(RuntimeError):
    pass
