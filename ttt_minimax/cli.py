import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from . import config
from .ai import score_moves
from .game import Board, Mark, Outcome
from .match import Match, Observer
from .players import HumanPlayer, MinimaxPlayer, MoveSource, RandomPlayer

Printer = Callable[[str], None]
Reader = Callable[[str], str]


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(prog="ttt-minimax", description="TicTacToe CLI")
    p.add_argument("--opponent", choices=config.OPPONENTS, default=config.DEFAULT_OPPONENT,
                   help="opponent type")
    p.add_argument("--mark", choices=["X", "O"], default=config.DEFAULT_HUMAN_MARK,
                   help="your mark (X moves first)")
    p.add_argument("--seed", type=int, default=None, help="seed for the random opponent")
    p.add_argument("--hints", action="store_true", help="show the minimax score of each free cell")
    p.add_argument("--once", action="store_true", help="play one game and exit")
    p.add_argument("--log-level", choices=config.LOG_LEVELS, default=config.DEFAULT_LOG_LEVEL)
    return p.parse_args(argv)


class ConsoleObserver(Observer):
    def __init__(self, human_mark: Mark, hints: bool = False, out: Printer = print):
        self.human_mark = human_mark
        self.hints = hints
        self.out = out

    def on_board(self, board: Board):
        self.out(board.pretty(show_indices=True))
        if self.hints and not board.outcome().is_over and board.turn() == self.human_mark:
            scores = score_moves(board, self.human_mark)
            self.out("Hints: " + ", ".join(f"{i}:{s:+d}" for i, s in scores.items()))

    def on_move(self, mark, idx, player):
        if mark != self.human_mark:
            self.out(f"{player.name} plays at {idx}")

    def on_error(self, mark, error, player):
        self.out(f"Invalid move: {error}. Try again.")


def make_opponent(kind: str, seed: Optional[int] = None) -> MoveSource:
    if kind == "random":
        return RandomPlayer(random.Random(seed))
    return MinimaxPlayer()


def result_message(outcome: Outcome) -> str:
    if outcome.winner is None:
        return "Game ended in a draw!"
    return f"Game over! Winner: {outcome.winner}"


def play_game(human: MoveSource, opponent: MoveSource, human_mark: Mark,
              observer: Observer) -> Outcome:
    if human_mark == "X":
        match = Match(human, opponent, observer=observer)
    else:
        match = Match(opponent, human, observer=observer)
    return match.play()


def run_cli(argv: Optional[List[str]] = None, read: Reader = input, out: Printer = print) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=config.LOG_FORMAT)

    opponent = make_opponent(args.opponent, args.seed)
    observer = ConsoleObserver(args.mark, hints=args.hints, out=out)

    out("Tic-Tac-Toe - CLI demonstration")
    out("Index map:\n0|1|2\n3|4|5\n6|7|8\n")
    try:
        while True:
            human = HumanPlayer(read=read)
            outcome = play_game(human, opponent, args.mark, observer)
            out(result_message(outcome))
            if args.once:
                break
            answer = read("Do you want to play again? (y/n): ").strip().lower()
            if answer != "y":
                break
    except (EOFError, KeyboardInterrupt):
        logging.info("input closed, quitting")
        out("")
    out("Thanks for playing! Goodbye")
    return 0


def main():
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
