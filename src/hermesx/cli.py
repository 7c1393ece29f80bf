"""Command line entry point: ``hermesx <file> [args...]``."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import HermesXError
from .runner import ScriptRunner

LOGGER = logging.getLogger("hermesx.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hermesx",
        description="Run a script against a minimal single-threaded host",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--time-limit",
        dest="time_limit",
        type=float,
        default=None,
        help="stop the event loop after this many seconds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log hermesx diagnostics")
    parser.add_argument("file", help="script to execute")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="arguments passed to the script")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    runner = ScriptRunner(time_limit=args.time_limit)
    try:
        return runner.run_file(args.file, args.args)
    except HermesXError as exc:
        LOGGER.debug("runner failed with %s", exc.code)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
