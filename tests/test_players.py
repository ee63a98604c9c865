"""Tests for the move sources."""

import random

import pytest

from ttt_minimax.config import MAX_AUTOMATED_ATTEMPTS
from ttt_minimax.errors import CellOccupied, InvalidInput, MoveError, NoMovesAvailable, OutOfRange
from ttt_minimax.game import O, X, Board
from ttt_minimax.players import HumanPlayer, MinimaxPlayer, RandomPlayer


def _reader(*answers):
    it = iter(answers)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(it)

    read.prompts = prompts
    return read


def test_human_parses_move():
    read = _reader(" 4\n")
    p = HumanPlayer(read=read)
    assert p.get_move(Board.create_empty(), X) == 4
    assert read.prompts == ["You (X), enter move (0-8): "]


@pytest.mark.parametrize("answer,error", [
    ("abc", InvalidInput),
    ("", InvalidInput),
    ("4.5", InvalidInput),
    ("9", OutOfRange),
    ("-1", OutOfRange),
    ("0", CellOccupied),
])
def test_human_rejects_bad_input(answer, error):
    b = Board.from_string("X../.../...")
    before = b.cells.copy()
    with pytest.raises(error) as exc:
        HumanPlayer(read=_reader(answer)).get_move(b, O)
    assert isinstance(exc.value, MoveError)
    assert str(exc.value)
    assert b.cells == before


def test_human_eof_propagates():
    def read(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        HumanPlayer(read=read).get_move(Board.create_empty(), X)


def test_human_has_no_retry_limit():
    assert HumanPlayer().retry_limit is None
    assert RandomPlayer().retry_limit == MAX_AUTOMATED_ATTEMPTS
    assert MinimaxPlayer().retry_limit == MAX_AUTOMATED_ATTEMPTS


def test_random_covers_exactly_available_moves():
    b = Board.from_string("X.O/.X./O..")
    p = RandomPlayer(random.Random(3))
    seen = {p.get_move(b, X) for _ in range(500)}
    assert seen == set(b.available_moves())


def test_random_is_reproducible_with_seed():
    b = Board.create_empty()
    p1 = RandomPlayer(random.Random(5))
    p2 = RandomPlayer(random.Random(5))
    assert [p1.get_move(b, X) for _ in range(10)] == [p2.get_move(b, X) for _ in range(10)]


def test_random_full_board():
    with pytest.raises(NoMovesAvailable):
        RandomPlayer().get_move(Board.from_string("XOX/XOO/OXX"), O)


def test_minimax_player():
    p = MinimaxPlayer()
    b = Board.from_string("XX./.O./...")
    assert p.get_move(b, O) == 2
    assert p.last_score == 0
    assert b.cells[2] == " "


def test_minimax_player_full_board():
    with pytest.raises(NoMovesAvailable):
        MinimaxPlayer().get_move(Board.from_string("XOX/XOO/OXX"), O)
