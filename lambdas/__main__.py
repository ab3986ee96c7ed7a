"""A main program for the lambdas demo."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOGGER_NAME
from .demo import Lambdas


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lambdas",
        description="Run the lambda, method reference and constructor reference demos.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", dest="verbose", action="store_true",
        help="report every demo value at debug level (the default).",
    )
    verbosity.add_argument(
        "-q", "--quiet", dest="quiet", action="store_true",
        help="only report warnings and errors.",
    )
    return parser


def resolve_log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return DEFAULT_LOG_LEVEL


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = make_parser().parse_args(argv)

    level = resolve_log_level(verbose=args.verbose, quiet=args.quiet)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger(LOGGER_NAME).setLevel(level)

    Lambdas().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
