"""Classification of judge input lines.

Every line the judge sends becomes exactly one of the command types below.
Nothing downstream of :func:`classify` looks at raw text.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Round:
    payload: str = ''


@dataclass(frozen=True)
class Score:
    payload: str = ''


@dataclass(frozen=True)
class End:
    pass


@dataclass(frozen=True)
class Unknown:
    line: str = ''


# commands that the judge expects a move for
PROMPTS = (Start, Round)


def classify(line):
    """Returns the command for a single line of judge input.

    ROUND and SCORE are matched by prefix so that the judge can append
    round numbers or scores; START and END must match exactly.
    Never raises, unrecognized lines become Unknown.
    """
    line = line.strip()
    if line == 'START':
        return Start()
    if line.startswith('ROUND'):
        return Round(line[len('ROUND'):].strip())
    if line.startswith('SCORE'):
        return Score(line[len('SCORE'):].strip())
    if line == 'END':
        return End()
    return Unknown(line)


def is_prompt(command):
    return isinstance(command, PROMPTS)
