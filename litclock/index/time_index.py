"""
Time index for the literature clock.

Groups the corpus by the minute each quotation is filed under and answers
"which quotation for this minute" queries, falling back to a minute-by-minute
circular search when the exact minute has no quotation.
"""

import logging
import random
from collections import defaultdict
from typing import Any, DefaultDict, Dict, Iterable, Iterator, List, Optional, Tuple

from litclock.domain import ClockTime, Direction, QuoteRecord
from litclock.utils import get_logger


logger: logging.Logger = get_logger(__name__)


class TimeIndex:
    """Read-only mapping from a minute of the day to its quotations."""

    def __init__(self, records: Iterable[QuoteRecord]) -> None:
        grouped: DefaultDict[ClockTime, List[QuoteRecord]] = defaultdict(list)
        for record in records:
            grouped[ClockTime(*record.time)].append(record)
        self._by_time: Dict[ClockTime, Tuple[QuoteRecord, ...]] = {
            time: tuple(quotes) for time, quotes in grouped.items()
        }
        logger.debug(
            "Indexed %d quotations across %d minutes",
            sum(len(quotes) for quotes in self._by_time.values()),
            len(self._by_time),
        )

    @classmethod
    def from_records(cls, records: Iterable[QuoteRecord]) -> "TimeIndex":
        return cls(records)

    def __len__(self) -> int:
        return len(self._by_time)

    def __contains__(self, time: object) -> bool:
        return time in self._by_time

    def times(self) -> List[ClockTime]:
        """Minutes that have at least one quotation, in clock order."""
        return sorted(self._by_time)

    def lookup(self, hour: int, minute: int) -> Optional[Tuple[QuoteRecord, ...]]:
        """Returns every quotation filed under exactly ``hour:minute``, or None."""
        return self._by_time.get(ClockTime(hour, minute))

    def at_time(self, hour: int, minute: int, rng: Any = random) -> Optional[QuoteRecord]:
        """Picks one quotation for ``hour:minute`` uniformly at random, or None."""
        quotes = self.lookup(hour, minute)
        if not quotes:
            return None
        return rng.choice(quotes)

    @staticmethod
    def walk(start: ClockTime, direction: Direction) -> Iterator[ClockTime]:
        """Yields ``start`` and then every following minute in ``direction``."""
        time = start
        while True:
            yield time
            time = direction.step(time)

    def nearest(
        self,
        hour: int,
        minute: int,
        direction: Direction = Direction.BACKWARD,
        rng: Any = random,
    ) -> QuoteRecord:
        """
        Returns a quotation for the closest populated minute in a direction.

        The search moves one minute at a time and wraps at midnight. It does
        not terminate on an empty index; callers reject an empty corpus at
        startup.

        Arguments:
            hour (int): Hour of the query, 0-23.
            minute (int): Minute of the query, 0-59.
            direction (Direction): Which way to step when a minute is empty.
            rng: Random source with a ``choice`` method, used to break ties
                between quotations that share a minute.

        Returns:
            QuoteRecord: The selected quotation.
        """
        for steps, time in enumerate(self.walk(ClockTime(hour, minute), direction)):
            quote: Optional[QuoteRecord] = self.at_time(time.hour, time.minute, rng)
            if quote is not None:
                if steps:
                    logger.debug(
                        "No quotation at %02d:%02d, using %s (%d minutes %s)",
                        hour,
                        minute,
                        time,
                        steps,
                        direction.value,
                    )
                return quote
