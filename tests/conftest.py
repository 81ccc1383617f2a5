import io
import sys

import pytest

from rpsbot import session, strategies


@pytest.fixture
def play():
    """Runs a session over the given input lines, returns the output lines."""
    def _play(lines, strategy=strategies.rock):
        infile = io.StringIO(''.join(line + '\n' for line in lines))
        outfile = io.StringIO()
        session.run(infile, outfile, strategy)
        return outfile.getvalue().splitlines()
    return _play


@pytest.fixture
def bot_cmd():
    """Command line starting the reference bot in a fresh interpreter."""
    def _cmd(*args):
        return [sys.executable, '-m', 'rpsbot'] + list(args)
    return _cmd
