"""Reference bot: reads judge commands on stdin, answers on stdout."""
import sys
import argparse
import logging

from . import session, strategies


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='rpsbot')

    parser.add_argument('-s', '--strategy', dest='strategy', default='rock',
                        choices=strategies.names(), help='move strategy')
    parser.add_argument('--seed', dest='seed', type=int, default=None,
                        help='seed for the random strategy')
    parser.add_argument('-v', '--verbose', action='store_true', default=False,
                        dest='verbose', help='log every command to stderr')

    return parser.parse_args(argv)


def main(argv=None, stdin=None, stdout=None):
    args = parse_args(argv)

    logging.basicConfig(format="rpsbot %(levelname)s: %(message)s",
                        level=logging.DEBUG if args.verbose else logging.WARNING)

    strategy = strategies.get_strategy(args.strategy, seed=args.seed)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    try:
        session.run(stdin, stdout, strategy)
    except OSError as e:
        logging.error("i/o failure: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
