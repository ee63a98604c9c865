from __future__ import annotations
import random
from typing import Callable, Optional, Protocol

from .ai import best_move
from .config import MAX_AUTOMATED_ATTEMPTS
from .errors import CellOccupied, InvalidInput, NoMovesAvailable, OutOfRange
from .game import EMPTY, SIZE, Board, Mark


class MoveSource(Protocol):
    """Anything that can pick a move for `mark` on `board`.

    get_move must return the index of an Empty cell or raise a MoveError.
    It must not modify the board it is given. retry_limit is how many
    rejected moves in a row the game tolerates from it (None = no limit).
    """
    name: str
    retry_limit: Optional[int]

    def get_move(self, board: Board, mark: Mark) -> int: ...


class HumanPlayer:
    """Reads a move (0-8) through `read`, which defaults to input()."""

    def __init__(self, read: Callable[[str], str] = input, name: str = "You"):
        self.read = read
        self.name = name
        self.retry_limit: Optional[int] = None

    def get_move(self, board: Board, mark: Mark) -> int:
        # EOFError from read() is left to the caller
        line = self.read(f"{self.name} ({mark}), enter move (0-8): ").strip()
        try:
            idx = int(line)
        except ValueError:
            raise InvalidInput(f"{line!r} is not a number, type 0..8") from None
        if not 0 <= idx < SIZE:
            raise OutOfRange(f"index {idx} is out of range (0-8)", idx)
        if board.cells[idx] != EMPTY:
            raise CellOccupied(f"cell {idx} is already occupied by {board.cells[idx]}", idx)
        return idx


class RandomPlayer:
    def __init__(self, rng: Optional[random.Random] = None, name: str = "Random"):
        self.rng = rng or random.Random()
        self.name = name
        self.retry_limit = MAX_AUTOMATED_ATTEMPTS

    def get_move(self, board: Board, mark: Mark) -> int:
        moves = board.available_moves()
        if not moves:
            raise NoMovesAvailable("board is full, no moves available")
        return self.rng.choice(moves)


class MinimaxPlayer:
    """Perfect play: never loses."""

    def __init__(self, name: str = "AI"):
        self.name = name
        self.retry_limit = MAX_AUTOMATED_ATTEMPTS
        self.last_score: Optional[int] = None

    def get_move(self, board: Board, mark: Mark) -> int:
        idx, self.last_score = best_move(board, mark)
        return idx
