from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .errors import MoveError, TooManyAttempts
from .game import O, X, Board, Mark, Outcome, opponent
from .players import MoveSource


@dataclass(frozen=True)
class AwaitingMove:
    mark: Mark


@dataclass(frozen=True)
class Won:
    mark: Mark


@dataclass(frozen=True)
class Draw:
    pass


State = Union[AwaitingMove, Won, Draw]


class Observer:
    """Receives game events. Subclass and override what you need."""

    def on_board(self, board: Board) -> None:
        pass

    def on_move(self, mark: Mark, idx: int, player: MoveSource) -> None:
        pass

    def on_error(self, mark: Mark, error: MoveError, player: MoveSource) -> None:
        pass

    def on_finish(self, outcome: Outcome, board: Board) -> None:
        pass


class Match:
    """Runs one game between two move sources on a board it owns.

    A rejected move is reported to the observer and the same player is asked
    again; the board and the turn stay as they were. max_attempts is how many
    rejected attempts in a row are tolerated in one turn for every player;
    when it is not given each player's own retry_limit applies.
    """

    def __init__(
        self,
        player_x: MoveSource,
        player_o: MoveSource,
        board: Optional[Board] = None,
        observer: Optional[Observer] = None,
        max_attempts: Optional[int] = None,
    ):
        # The match owns its board; a board passed in is copied.
        self.board = board.clone().validate() if board is not None else Board.create_empty()
        self.players: Dict[Mark, MoveSource] = {X: player_x, O: player_o}
        self.observer = observer or Observer()
        self.max_attempts = max_attempts
        self.failed_attempts = 0
        self.state: State = self._settle(self.board.turn())

    @property
    def finished(self) -> bool:
        return not isinstance(self.state, AwaitingMove)

    def outcome(self) -> Outcome:
        return self.board.outcome()

    def _settle(self, to_move: Mark) -> State:
        w = self.board.winner()
        if w is not None:
            return Won(w)
        if self.board.is_full():
            return Draw()
        return AwaitingMove(to_move)

    def _limit(self, player: MoveSource) -> Optional[int]:
        if self.max_attempts is not None:
            return self.max_attempts
        return getattr(player, "retry_limit", None)

    def _reject(self, mark: Mark, player: MoveSource, err: MoveError) -> None:
        self.failed_attempts += 1
        self.observer.on_error(mark, err, player)
        limit = self._limit(player)
        if limit is not None and self.failed_attempts > limit:
            raise TooManyAttempts(
                f"{player.name} ({mark}) failed {self.failed_attempts} times in a row"
            ) from err

    def step(self) -> bool:
        """Ask the player to move for one attempt. True if a move was applied."""
        if self.finished:
            raise RuntimeError(f"game is already over: {self.outcome().value}")
        mark = self.state.mark
        player = self.players[mark]

        try:
            idx = player.get_move(self.board, mark)
        except MoveError as e:
            logging.warning(f"{player.name} ({mark}): {e}")
            self._reject(mark, player, e)
            return False

        try:
            self.board.apply_move(idx, mark)
        except MoveError as e:
            # The source broke its contract by returning an illegal move.
            logging.error(f"{player.name} ({mark}) returned an illegal move: {e}")
            self._reject(mark, player, e)
            return False

        self.failed_attempts = 0
        logging.info(f"{player.name} ({mark}) plays {idx}")
        self.observer.on_move(mark, idx, player)
        self.state = self._settle(opponent(mark))
        return True

    def play(self) -> Outcome:
        """Run until the game is won or drawn."""
        self.observer.on_board(self.board)
        while not self.finished:
            if self.step():
                self.observer.on_board(self.board)
        outcome = self.outcome()
        logging.info(f"game over: {outcome.value}")
        self.observer.on_finish(outcome, self.board)
        return outcome
