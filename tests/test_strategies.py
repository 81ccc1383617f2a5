import pytest

from rpsbot import strategies
from rpsbot.commands import Start, Round
from rpsbot.session import Context
from rpsbot.strategies import Move


def test_reference_strategy_is_rock():
    assert strategies.rock(Start(), Context()) is Move.ROCK
    assert strategies.rock(Round('9'), Context(moves=[Move.PAPER])) is Move.ROCK


def test_always_accepts_move_names():
    assert strategies.always('SCISSORS')(Start(), Context()) is Move.SCISSORS
    with pytest.raises(ValueError):
        strategies.always('LIZARD')


def test_cycle_follows_move_count():
    strategy = strategies.cycle([Move.PAPER, Move.ROCK])
    context = Context()
    played = []
    for _ in range(5):
        move = strategy(Round(''), context)
        context.moves.append(move)
        played.append(move)
    assert played == [Move.PAPER, Move.ROCK, Move.PAPER, Move.ROCK, Move.PAPER]


def test_cycle_needs_moves():
    with pytest.raises(ValueError):
        strategies.cycle([])


def test_random_strategy_is_reproducible():
    a = strategies.random_strategy(seed=42)
    b = strategies.random_strategy(seed=42)
    context = Context()
    assert [a(Start(), context) for _ in range(20)] == \
           [b(Start(), context) for _ in range(20)]


def test_get_strategy():
    assert strategies.get_strategy('paper') is strategies.paper
    assert strategies.get_strategy('random', seed=1)(Start(), Context()) in Move
    with pytest.raises(strategies.UnknownStrategy):
        strategies.get_strategy('lizard')
    with pytest.raises(KeyError):
        strategies.get_strategy('spock')


def test_names():
    assert strategies.names() == ['cycle', 'paper', 'random', 'rock', 'scissors']


def test_move_prints_as_wire_value():
    assert str(Move.SCISSORS) == 'SCISSORS'
