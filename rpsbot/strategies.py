"""Move values and the strategies that pick them.

A strategy is any callable ``strategy(command, context) -> Move``.
"""
import enum
import random


class Move(enum.Enum):
    ROCK = 'ROCK'
    PAPER = 'PAPER'
    SCISSORS = 'SCISSORS'

    def __str__(self):
        return self.value


class UnknownStrategy(KeyError):
    pass


def always(move):
    move = Move(move)

    def strategy(command, context):
        return move
    strategy.__name__ = move.value.lower()
    return strategy


rock = always(Move.ROCK)
paper = always(Move.PAPER)
scissors = always(Move.SCISSORS)


def cycle(moves=tuple(Move)):
    """Plays `moves` round-robin, indexed by the number of moves made so far."""
    moves = [Move(m) for m in moves]
    if not moves:
        raise ValueError("cycle needs at least one move")

    def strategy(command, context):
        return moves[context.movenum % len(moves)]
    return strategy


def random_strategy(seed=None):
    rng = random.Random(seed)
    choices = list(Move)

    def strategy(command, context):
        return rng.choice(choices)
    return strategy


STRATEGIES = {
    'rock': lambda seed=None: rock,
    'paper': lambda seed=None: paper,
    'scissors': lambda seed=None: scissors,
    'cycle': lambda seed=None: cycle(),
    'random': random_strategy,
}


def get_strategy(name, seed=None):
    try:
        factory = STRATEGIES[name]
    except KeyError:
        raise UnknownStrategy(name) from None
    return factory(seed)


def names():
    return sorted(STRATEGIES)
