"""Command line client printing the events that happened on a day of the year."""
import argparse
import logging
import sys

from wikipedia_events.config import load_settings
from wikipedia_events.event_query import EventQuery


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv=None):
    """Parses command line arguments."""
    parser = ArgumentParser(
        prog='wikipedia-events',
        description='Events that happened on a day of the year, according to Wikipedia',
    )
    parser.add_argument('month', type=int, help='Month of the year (1-12)')
    parser.add_argument('day', type=int, help='Day of the month (1-31)')
    parser.add_argument('--timeout', type=int, default=None,
                        help='Timeout for retrieving the page, in milliseconds')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log progress to standard error')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(timeout=args.timeout)
        logging.basicConfig(
            level=logging.INFO if args.verbose else settings.log_level,
            format='%(asctime)s - %(levelname)s - %(message)s',
        )
        with EventQuery(timeout=args.timeout, settings=settings) as event_query:
            events = event_query.query(args.month, args.day)
    except Exception as e:
        print(str(e), file=sys.stderr)
        return 1

    for event in events:
        print(event)
    return 0


if __name__ == '__main__':
    sys.exit(main())
