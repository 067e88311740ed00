"""Domain data structures for clock times, quotations and highlight spans."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, NamedTuple

from litclock.errors import ConfigurationError

TIMESTAMP_ERROR = "The value must be a valid 24-hour timestamp, HH:MM"

_TIMESTAMP_RE = re.compile(r"^\s*(\d{1,2}):(\d{1,2})\s*$")


class ClockTime(NamedTuple):
    """A minute of the day on a 24-hour clock."""

    hour: int
    minute: int

    @classmethod
    def parse(cls, literal: str) -> "ClockTime":
        """
        Parses an ``HH:MM`` literal.

        Arguments:
            literal (str): Timestamp such as ``"07:05"`` or ``"7:5"``.

        Returns:
            ClockTime: The parsed time.

        Raises:
            ConfigurationError: If the literal is not a valid 24-hour time.
        """
        match = _TIMESTAMP_RE.match(literal or "")
        if match is None:
            raise ConfigurationError(TIMESTAMP_ERROR)
        hour, minute = int(match.group(1)), int(match.group(2))
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise ConfigurationError(TIMESTAMP_ERROR)
        return cls(hour, minute)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class Direction(Enum):
    """Which way the clock search moves when a minute has no quotation."""

    FORWARD = "forward"
    BACKWARD = "backward"

    def step(self, time: ClockTime) -> ClockTime:
        """Returns the adjacent minute, wrapping at the day boundary."""
        hour, minute = time
        if self is Direction.BACKWARD:
            if minute == 0:
                return ClockTime(23 if hour == 0 else hour - 1, 59)
            return ClockTime(hour, minute - 1)
        if minute == 59:
            return ClockTime(0 if hour == 23 else hour + 1, 0)
        return ClockTime(hour, minute + 1)


class QuoteRecord(NamedTuple):
    """One corpus entry: a quotation that names the time it is filed under."""

    time: ClockTime
    context: str
    quotation: str
    source: str
    author: str

    @property
    def attribution(self) -> str:
        return f"{self.author.strip()} – {self.source}"


@dataclass(frozen=True)
class HighlightSpan:
    """Character positions of one rendering that are painted as highlighted."""

    positions: FrozenSet[int] = frozenset()
    complete: bool = True

    @classmethod
    def from_indices(cls, indices: Iterable[int], complete: bool = True) -> "HighlightSpan":
        return cls(frozenset(indices), complete)

    @classmethod
    def from_range(cls, start: int, end: int) -> "HighlightSpan":
        """Builds a span from the half-open range ``[start, end)``."""
        return cls(frozenset(range(start, end)), True)

    def __contains__(self, index: object) -> bool:
        return index in self.positions

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self.positions))

    def __len__(self) -> int:
        return len(self.positions)
