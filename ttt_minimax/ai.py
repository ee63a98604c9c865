from __future__ import annotations
import logging
from typing import Dict, Optional, Tuple

from .errors import NoMovesAvailable
from .game import Board, Mark, opponent

# Exhaustive minimax. Scores are from as_player's point of view:
# +1 win, -1 loss, 0 draw.

WIN, DRAW, LOSS = 1, 0, -1


def terminal_score(board: Board, as_player: Mark) -> Optional[int]:
    """Score of a finished position, or None if the game goes on."""
    w = board.winner()
    if w is not None:
        return WIN if w == as_player else LOSS
    if board.is_full():
        return DRAW
    return None


class _Search:
    def __init__(self, as_player: Mark):
        self.as_player = as_player
        self.nodes = 0

    def minimax(self, board: Board, to_move: Mark) -> int:
        self.nodes += 1
        score = terminal_score(board, self.as_player)
        if score is not None:
            return score

        values = []
        for idx in board.available_moves():
            nb = board.clone()
            nb.apply_move(idx, to_move)
            values.append(self.minimax(nb, opponent(to_move)))
        if to_move == self.as_player:
            # Maximizing
            return max(values)
        # Minimizing
        return min(values)


def minimax(board: Board, to_move: Mark, as_player: Mark) -> int:
    """Value of board for as_player when to_move plays next."""
    return _Search(as_player).minimax(board, to_move)


def score_moves(board: Board, as_player: Mark) -> Dict[int, int]:
    """Minimax value of every available move, keyed by index (ascending)."""
    if board.is_full():
        raise NoMovesAvailable("board is full, no moves available")
    search = _Search(as_player)
    scores = {}
    for idx in board.available_moves():
        nb = board.clone()
        nb.apply_move(idx, as_player)
        scores[idx] = search.minimax(nb, opponent(as_player))
    logging.debug(f"minimax for {as_player}: searched {search.nodes} positions")
    return scores


def best_move(board: Board, as_player: Mark) -> Tuple[int, int]:
    """Returns (best_index, score). Ties go to the lowest index."""
    scores = score_moves(board, as_player)
    best_idx, best_val = None, None
    for idx, val in scores.items():
        if best_val is None or val > best_val:
            best_idx, best_val = idx, val
    logging.debug(f"{as_player} picks {best_idx} (score {best_val})")
    return best_idx, best_val
