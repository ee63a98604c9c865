from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .errors import CellOccupied, InvalidBoard, OutOfRange

Mark = str  # "X", "O" or EMPTY

EMPTY: Mark = " "
X: Mark = "X"
O: Mark = "O"
MARKS = (X, O)

SIZE = 9

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)

# Characters accepted as an empty cell by Board.from_string
_EMPTY_CHARS = ".-_"


def opponent(mark: Mark) -> Mark:
    if mark not in MARKS:
        raise ValueError(f"not a player mark: {mark!r}")
    return O if mark == X else X


class Outcome(Enum):
    X_WINS = "X wins"
    O_WINS = "O wins"
    DRAW = "Draw"
    IN_PROGRESS = "In progress"

    @classmethod
    def won_by(cls, mark: Mark) -> "Outcome":
        return cls.X_WINS if mark == X else cls.O_WINS

    @property
    def winner(self) -> Optional[Mark]:
        if self is Outcome.X_WINS:
            return X
        if self is Outcome.O_WINS:
            return O
        return None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.IN_PROGRESS


@dataclass
class Board:
    """3x3 grid stored row-major as 9 cells, indexes 0..8.

    The board knows nothing about players or strategy. In a real game X moves
    first, so X marks equal O marks or exceed them by one; validate() checks
    this, but hypothetical boards built during search may break it.
    """
    cells: List[Mark] = field(default_factory=lambda: [EMPTY] * SIZE)

    def __post_init__(self):
        if len(self.cells) != SIZE:
            raise InvalidBoard(f"board must have {SIZE} cells, got {len(self.cells)}")
        for c in self.cells:
            if c != EMPTY and c not in MARKS:
                raise InvalidBoard(f"invalid cell value: {c!r}")

    def validate(self) -> "Board":
        """Check the board could occur in a game where X moves first."""
        diff = self.cells.count(X) - self.cells.count(O)
        if diff not in (0, 1):
            raise InvalidBoard(f"impossible mark counts (X - O = {diff})")
        return self

    @classmethod
    def create_empty(cls) -> "Board":
        return cls([EMPTY] * SIZE)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse e.g. "XX./OO./..." ; '/' and whitespace are ignored."""
        cells = []
        for ch in text:
            if ch.isspace() or ch == "/":
                continue
            if ch in _EMPTY_CHARS:
                cells.append(EMPTY)
            elif ch.upper() in MARKS:
                cells.append(ch.upper())
            else:
                raise InvalidBoard(f"unexpected character {ch!r} in board string")
        return cls(cells).validate()

    def clone(self) -> "Board":
        return Board(self.cells.copy())

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def available_moves(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c == EMPTY]

    def turn(self) -> Mark:
        return X if self.cells.count(X) == self.cells.count(O) else O

    def apply_move(self, idx: int, mark: Mark) -> None:
        """Place mark at idx. Raises OutOfRange or CellOccupied and leaves the board alone."""
        if mark not in MARKS:
            raise ValueError(f"not a player mark: {mark!r}")
        if not 0 <= idx < SIZE:
            raise OutOfRange(f"index {idx} is out of range (0-8)", idx)
        if self.cells[idx] != EMPTY:
            raise CellOccupied(f"cell {idx} is already occupied by {self.cells[idx]}", idx)
        self.cells[idx] = mark

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        b = self.cells
        for line in WIN_LINES:
            a, c, d = line
            if b[a] != EMPTY and b[a] == b[c] == b[d]:
                return line
        return None

    def winner(self) -> Optional[Mark]:
        line = self.winning_line()
        return self.cells[line[0]] if line else None

    def outcome(self) -> Outcome:
        w = self.winner()
        if w is not None:
            return Outcome.won_by(w)
        if self.is_full():
            return Outcome.DRAW
        return Outcome.IN_PROGRESS

    def pretty(self, show_indices: bool = False) -> str:
        b = [
            str(i) if show_indices and c == EMPTY else c
            for i, c in enumerate(self.cells)
        ]
        rows = [" | ".join(b[i:i+3]) for i in range(0, SIZE, 3)]
        return f"\n{rows[0]}\n---------\n{rows[1]}\n---------\n{rows[2]}\n"

    def __str__(self) -> str:
        return self.pretty()
