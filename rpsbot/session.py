"""The bot side of the judge protocol.

A session moves through three phases::

    WAITING --START--> ACTIVE --END--> DONE

A move is written for START and for every ROUND while ACTIVE.
Everything else, including commands that arrive out of order, is ignored.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .commands import Start, Round, Score, End, classify, is_prompt
from .strategies import Move

log = logging.getLogger(__name__)


class Phase(enum.Enum):
    WAITING = 'waiting'
    ACTIVE = 'active'
    DONE = 'done'


@dataclass
class Context:
    """What a strategy gets to see about the session so far."""
    moves: List[Move] = field(default_factory=list)
    last_score: Optional[str] = None

    @property
    def movenum(self):
        return len(self.moves)


def step(phase, command, strategy, context):
    """Single transition of the session.

    Returns pair (next_phase, move) where move is None when nothing
    should be written.
    """
    if phase is Phase.WAITING:
        if isinstance(command, Start):
            return Phase.ACTIVE, Move(strategy(command, context))
        return Phase.WAITING, None

    if phase is Phase.ACTIVE:
        if isinstance(command, Round):
            return Phase.ACTIVE, Move(strategy(command, context))
        if isinstance(command, End):
            return Phase.DONE, None
        return Phase.ACTIVE, None

    return Phase.DONE, None


def run(infile, outfile, strategy):
    """Reads judge commands from `infile` until END or EOF, writing moves
    to `outfile`. Returns the list of moves written.

    I/O errors on either stream propagate to the caller.
    """
    phase = Phase.WAITING
    context = Context()

    for raw_line in infile:
        if raw_line and raw_line[-1] != '\n':
            log.warning("missing newline at the end")

        command = classify(raw_line)
        if isinstance(command, Score) and phase is Phase.ACTIVE:
            context.last_score = command.payload

        phase, move = step(phase, command, strategy, context)
        if move is not None:
            context.moves.append(move)
            outfile.write('%s\n' % move)
            outfile.flush()
            log.debug("%r -> %s", raw_line, move)
        elif is_prompt(command):
            log.debug("ignoring out of order %r", raw_line)
        else:
            log.debug("no reply for %r", raw_line)

        if phase is Phase.DONE:
            break
    else:
        log.info("input closed before END, %d moves played", len(context.moves))

    return context.moves
