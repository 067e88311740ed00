"""
Literature Clock

This module serves as the entry point for the literature clock. It shows a
quotation from literature that mentions the current time, with the phrase
naming the time highlighted.

Usage:
    The tool can be operated in two modes:
    1. once: Prints the quotation for the current (or a given) time.
    2. clock: Keeps running and prints a new quotation whenever the
        minute brings a different one.
"""

import argparse
import logging
import sys
import time

from litclock.clock import MODES, run
from litclock.config import Config
from litclock.corpus import load_quotes
from litclock.domain import ClockTime, Direction
from litclock.errors import AlignmentNotFound, ConfigurationError
from litclock.index import TimeIndex
from litclock.utils import configure_logging, get_logger
from litclock.utils.render_utils import ColorStyle, Presenter, resolve_color


logger: logging.Logger = get_logger("litclock")


def _timestamp(value: str) -> ClockTime:
    try:
        return ClockTime.parse(value)
    except ConfigurationError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def _color(value: str) -> str:
    try:
        return resolve_color(value)
    except ConfigurationError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def _width(value: str) -> int:
    try:
        width = int(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}") from err
    if width < 20:
        raise argparse.ArgumentTypeError("The width must be at least 20 columns")
    return width


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="litclock",
        description="Tell the time with quotations from literature",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=MODES,
        default=Config.DEFAULT_CONFIG["mode"],
        help="Print one quotation and exit, or keep updating every minute",
    )
    parser.add_argument(
        "--time",
        type=_timestamp,
        help="Show the quotation for this 24-hour time (HH:MM) instead of now",
    )
    parser.add_argument(
        "--direction",
        choices=[direction.value for direction in Direction],
        default=Config.DEFAULT_CONFIG["direction"],
        help="Where to look when no quotation exists for the exact minute",
    )
    parser.add_argument(
        "--width",
        type=_width,
        default=Config.DEFAULT_CONFIG["width"],
        help="Wrap the quotation at this many columns",
    )
    parser.add_argument(
        "--no-wrap",
        action="store_true",
        help="Print the quotation on a single line without reflowing it",
    )
    parser.add_argument(
        "--corpus",
        type=str,
        help="Path to a pipe-delimited corpus file",
    )
    for style in ("highlight", "inactive", "active"):
        parser.add_argument(
            f"--{style}",
            type=_color,
            default=Config.COLOR_CONFIG[style]["color"],
            help=f"Colour of the {style} text ({', '.join(Config.COLORS)})",
        )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level; overrides the LOG_LEVEL environment variable",
    )
    return parser


def main() -> None:
    """
    Main function to handle the command line interface logic.
    """
    args: argparse.Namespace = build_parser().parse_args()
    configure_logging(args.log_level)

    if args.time is not None and args.mode == "clock":
        logger.error(msg="--time can only be used in 'once' mode.")
        sys.exit(1)

    presenter = Presenter(
        highlight_style=ColorStyle(args.highlight, Config.COLOR_CONFIG["highlight"]["intense"]),
        inactive_style=ColorStyle(args.inactive, Config.COLOR_CONFIG["inactive"]["intense"]),
        active_style=ColorStyle(args.active, Config.COLOR_CONFIG["active"]["intense"]),
        width=args.width,
        wrap=not args.no_wrap,
    )

    start_time: float = time.time()
    try:
        index = TimeIndex(load_quotes(args.corpus))
        logger.debug(
            msg=f"Corpus indexed in {time.time() - start_time:.2f} seconds"
        )
        run(
            index,
            presenter,
            mode=args.mode,
            direction=Direction(args.direction),
            at=args.time,
        )
    except (ConfigurationError, AlignmentNotFound) as err:
        logger.error(msg=f"{err}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
