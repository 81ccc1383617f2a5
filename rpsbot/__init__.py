"""
rpsbot - reference bot for the line based rock-paper-scissors judge protocol.

    judge >> START        bot >> ROCK
    judge >> ROUND 1      bot >> ROCK
    judge >> SCORE 0 0
    judge >> END
"""
from .commands import Start, Round, Score, End, Unknown, classify
from .strategies import Move, get_strategy
from .session import Phase, Context, step, run

__version__ = "0.1.0"

__all__ = [
    "Start", "Round", "Score", "End", "Unknown", "classify",
    "Move", "get_strategy",
    "Phase", "Context", "step", "run",
]
