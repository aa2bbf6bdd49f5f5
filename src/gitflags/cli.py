""" Implementation of the command line interface.

"""

import logging

from . import cliparser
from . import config
from .dispatcher import execute, parse_and_dispatch
from .exceptions import GitFlagsError
from .utils.loggerutils import (die, warn)

__all__ = "main", "run"

logger = logging.getLogger("gitflags")


def main(argv=None) -> int:
    parser = cliparser.build_parser()
    args, tokens = parser.parse_known_args(argv)
    config.verbose_level = args.verbose

    try:
        table = parse_and_dispatch(tokens)
    except GitFlagsError as err:
        die(str(err))

    results = execute(table, cwd=args.directory, dry_run=args.dry_run)

    failed = [result for result in results if result.failed]
    if failed:
        warn(f"{len(failed)} of {len(results)} git commands failed")
        return 1
    return 0


def run(argv=None) -> int:
    try:
        return main(argv)
    except Exception as err:
        # Error handler of last resort.
        logger.error(repr(err))
        logger.critical("shutting down due to fatal error")
        raise  # print stack trace


if __name__ == "__main__":
    raise SystemExit(run())

# vim: sw=4 et
