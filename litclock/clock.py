"""Minute loop that keeps the terminal showing a quotation for the current time."""

import logging
import random
import time
from datetime import datetime
from typing import Any, Callable, Optional

from litclock.config import Config
from litclock.domain import ClockTime, Direction, QuoteRecord
from litclock.errors import ConfigurationError
from litclock.index import TimeIndex
from litclock.utils import get_logger
from litclock.utils.render_utils import Presenter


logger: logging.Logger = get_logger(__name__)

MODES = ("once", "clock")


def seconds_until_next_minute(now: datetime, wait: int = Config.DEFAULT_CONFIG["wait"]) -> int:
    return max(wait - now.second, 1)


def run(
    index: TimeIndex,
    presenter: Presenter,
    mode: str = Config.DEFAULT_CONFIG["mode"],
    direction: Direction = Direction.BACKWARD,
    at: Optional[ClockTime] = None,
    now: Callable[[], datetime] = datetime.now,
    sleep: Callable[[float], Any] = time.sleep,
    rng: Any = random,
) -> Optional[QuoteRecord]:
    """
    Shows the quotation for a time, once or once per minute.

    Arguments:
        index (TimeIndex): Non-empty index of the corpus.
        presenter (Presenter): Paints the selected quotation.
        mode (str): ``"once"`` paints a single quotation and returns;
            ``"clock"`` repaints whenever the selected quotation changes.
        direction (Direction): Search direction for minutes without quotes.
        at (ClockTime, optional): Fixed time to show in ``"once"`` mode.
        now (Callable): Local clock source.
        sleep (Callable): Called with the seconds to wait between minutes.
        rng: Random source used to break ties within a minute.

    Returns:
        Optional[QuoteRecord]: The quotation painted in ``"once"`` mode.

    Raises:
        ConfigurationError: If the index is empty or the mode is unknown.
    """
    if not len(index):
        raise ConfigurationError("The corpus contains no quotations")
    if mode not in MODES:
        raise ConfigurationError(f"Unknown mode {mode!r}, available: {', '.join(MODES)}")

    if mode == "once":
        if at is None:
            started: datetime = now()
            at = ClockTime(started.hour, started.minute)
        target: ClockTime = at
        quote: QuoteRecord = index.nearest(target.hour, target.minute, direction, rng)
        logger.debug("Showing quotation filed under %s for %s", quote.time, target)
        presenter.show(quote)
        return quote

    last: Optional[QuoteRecord] = None
    while True:
        current: datetime = now()
        quote = index.nearest(current.hour, current.minute, direction, rng)
        # ties within the painted minute keep the painted quotation
        if last is None or quote.time != last.time:
            logger.debug("Repainting for %02d:%02d", current.hour, current.minute)
            presenter.show(quote)
            last = quote
        sleep(seconds_until_next_minute(current))
