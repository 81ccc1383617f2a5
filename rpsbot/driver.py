#!/usr/bin/env python3
"""Protocol checker: plays a judge transcript against a single bot process.

    BOT << 'START'
    BOT >> 'ROCK'
    BOT << 'ROUND 1'
    BOT >> 'ROCK'
    BOT << 'SCORE 0 0'
    BOT << 'END'

The bot must answer every START and ROUND with exactly one move line,
stay silent otherwise, and exit with status 0 once END was sent.
"""
import sys
import argparse
import logging
import shlex
import subprocess

from .commands import Start, Round, End, classify
from .strategies import Move


class ProtocolError(Exception):
    pass


class BadReply(ProtocolError):
    pass


class MissingReply(ProtocolError):
    pass


class UnexpectedOutput(ProtocolError):
    pass


def parse_reply(reply):
    """Returns the Move for a raw reply line, raises BadReply otherwise."""
    try:
        return Move(reply.strip())
    except ValueError:
        raise BadReply("not a move: %r" % reply) from None


class BotProcess:
    def __init__(self, bot_cmd, name='BOT'):
        if isinstance(bot_cmd, str):
            bot_cmd = shlex.split(bot_cmd)
        self.bot_cmd = bot_cmd
        self.name = name

        self.p = subprocess.Popen(self.bot_cmd,
                                  stdin=subprocess.PIPE,
                                  stdout=subprocess.PIPE,
                                  stderr=None,
                                  text=True,
                                  bufsize=1)

    def __str__(self):
        return self.name

    def write(self, cmd):
        print("%s << %s" % (self, repr(cmd)))

        self.p.stdin.write(cmd + "\n")
        self.p.stdin.flush()

    def read(self):
        line = self.p.stdout.readline()
        if not line:
            raise MissingReply("bot closed its output while a move was due")
        print("%s >> %s" % (self, repr(line.rstrip('\n'))))
        return parse_reply(line)

    def interact(self, cmd):
        self.write(cmd)
        return self.read()

    def finish(self, timeout=5.0):
        """Closes the bot's input and waits for it to exit.

        Returns the exit status; raises UnexpectedOutput if the bot printed
        anything it was not asked for.
        """
        try:
            leftover, _ = self.p.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            self.close()
            raise
        if leftover:
            raise UnexpectedOutput("unprompted output: %r" % leftover)
        return self.p.returncode

    def close(self):
        self.p.kill()
        self.p.wait()


def make_script(rounds):
    """Judge transcript for `rounds` rounds, START counting as the first."""
    script = ['START']
    for num in range(1, rounds):
        script.append('ROUND %d' % num)
        script.append('SCORE %d' % num)
    script.append('END')
    return script


def read_script(path):
    with open(path) as f:
        return [line.rstrip('\n') for line in f if line.strip()]


def check(bot, script, timeout=5.0):
    """Plays `script` against `bot`, returns the list of moves it made.

    Lines after END are not sent, a bot is not expected to read past it.
    Raises ProtocolError on any violation.
    """
    moves = []
    started = False
    for line in script:
        command = classify(line)
        if isinstance(command, Start) and not started:
            started = True
            moves.append(bot.interact(line))
        elif isinstance(command, Round) and started:
            moves.append(bot.interact(line))
        else:
            bot.write(line)
        if isinstance(command, End):
            break

    status = bot.finish(timeout=timeout)
    if status != 0:
        raise ProtocolError("bot exited with status %d" % status)
    return moves


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='rpsbot-check')

    parser.add_argument('-c', '--command', dest='bot_cmd',
                        required=True, help='bot command')
    parser.add_argument('-r', '--rounds', dest='rounds', type=int, default=5,
                        help='number of rounds in the generated transcript')
    parser.add_argument('--script', dest='script', default=None,
                        help='file with judge commands, one per line')
    parser.add_argument('-t', '--timeout', dest='timeout', type=float, default=5.0,
                        help='seconds to wait for the bot to exit after END')

    return parser.parse_args(argv)


def main(argv=None):
    logging.basicConfig(format='%(levelname)s: %(message)s', level=logging.INFO)

    args = parse_args(argv)
    script = read_script(args.script) if args.script else make_script(args.rounds)

    try:
        bot = BotProcess(args.bot_cmd)
    except OSError as e:
        logging.error("cannot start %r: %s", args.bot_cmd, e)
        return 1

    try:
        moves = check(bot, script, timeout=args.timeout)
    except (ProtocolError, subprocess.TimeoutExpired, OSError) as e:
        logging.error("%s failed: %s", bot, e)
        if bot.p.poll() is None:
            bot.close()
        return 1

    logging.info("%s ok, %d moves: %s", bot, len(moves), ' '.join(map(str, moves)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
