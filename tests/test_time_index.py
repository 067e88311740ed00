"""Behavior tests for the time index and its circular fallback search."""

import random
from itertools import islice
from typing import List

import pytest

from litclock.domain import ClockTime, Direction, QuoteRecord
from litclock.index import TimeIndex

MINUTES_PER_DAY = 24 * 60


class _LastChoice:
    """Deterministic random source that always picks the last candidate."""

    def __init__(self) -> None:
        self.calls = 0

    def choice(self, candidates):
        self.calls += 1
        return candidates[-1]


def _minute_of_day(time: ClockTime) -> int:
    return time.hour * 60 + time.minute


def test_lookup_returns_exactly_the_records_for_a_minute(sample_records: List[QuoteRecord]) -> None:
    """Lookup returns every record filed under the minute, and nothing else."""
    index = TimeIndex(sample_records)

    quotes = index.lookup(6, 30)

    assert quotes is not None
    assert {quote.author for quote in quotes} == {"B", "C"}
    assert all(quote.time == ClockTime(6, 30) for quote in quotes)


def test_lookup_returns_none_for_an_empty_minute(sample_records: List[QuoteRecord]) -> None:
    """Minutes without quotations have no entry."""
    index = TimeIndex(sample_records)

    assert index.lookup(6, 31) is None
    assert index.at_time(6, 31) is None


def test_every_record_is_indexed_under_its_own_time(sample_records: List[QuoteRecord]) -> None:
    """Each record appears exactly once, under its own minute."""
    index = TimeIndex(sample_records)

    indexed = [quote for time in index.times() for quote in index.lookup(*time)]

    assert sorted(indexed) == sorted(sample_records)
    assert len(index) == 4
    assert ClockTime(13, 0) in index
    assert index.times() == sorted(index.times())


def test_nearest_exact_match_uses_injected_random_source(sample_records: List[QuoteRecord]) -> None:
    """Ties within a minute are broken by the supplied random source."""
    index = TimeIndex(sample_records)
    rng = _LastChoice()

    quote = index.nearest(6, 30, Direction.BACKWARD, rng)

    assert quote.author == "C"
    assert rng.calls == 1


def test_nearest_tie_break_always_stays_within_the_minute(sample_records: List[QuoteRecord]) -> None:
    """Repeated calls may differ among ties but always match the queried minute."""
    index = TimeIndex(sample_records)
    rng = random.Random(1234)

    picks = {index.nearest(6, 30, Direction.FORWARD, rng).author for _ in range(50)}

    assert picks <= {"B", "C"}
    assert picks == {"B", "C"}


def test_nearest_backward_from_midnight_wraps_to_previous_day(sample_records: List[QuoteRecord]) -> None:
    """Backward search from 00:00 continues at 23:59, not at a negative minute."""
    index = TimeIndex(sample_records)

    quote = index.nearest(0, 0, Direction.BACKWARD)

    assert quote.time == ClockTime(23, 58)


def test_nearest_forward_from_end_of_day_wraps_to_midnight(sample_records: List[QuoteRecord]) -> None:
    """Forward search from 23:59 continues at 00:00."""
    index = TimeIndex(sample_records)

    quote = index.nearest(23, 59, Direction.FORWARD)

    assert quote.time == ClockTime(0, 5)


def test_walk_probes_one_minute_at_a_time_across_midnight() -> None:
    """The probe sequence starts at the query and moves one minute per step."""
    backward = list(islice(TimeIndex.walk(ClockTime(0, 0), Direction.BACKWARD), 3))
    forward = list(islice(TimeIndex.walk(ClockTime(23, 59), Direction.FORWARD), 3))

    assert backward == [ClockTime(0, 0), ClockTime(23, 59), ClockTime(23, 58)]
    assert forward == [ClockTime(23, 59), ClockTime(0, 0), ClockTime(0, 1)]


@pytest.mark.parametrize("direction", list(Direction))
def test_nearest_returns_the_first_populated_minute_in_direction(
    sample_records: List[QuoteRecord], direction: Direction
) -> None:
    """No populated minute lies strictly between the query and the result."""
    index = TimeIndex(sample_records)
    populated = {_minute_of_day(time) for time in index.times()}
    sign = 1 if direction is Direction.FORWARD else -1

    for query in range(0, MINUTES_PER_DAY, 7):
        quote = index.nearest(query // 60, query % 60, direction)
        distance = (sign * (_minute_of_day(quote.time) - query)) % MINUTES_PER_DAY

        assert _minute_of_day(quote.time) in populated
        for step in range(distance):
            assert (query + sign * step) % MINUTES_PER_DAY not in populated


def test_nearest_is_stable_in_time_across_calls(sample_records: List[QuoteRecord]) -> None:
    """Identical queries resolve to the same minute."""
    index = TimeIndex(sample_records)

    first = index.nearest(9, 15, Direction.BACKWARD)
    second = index.nearest(9, 15, Direction.BACKWARD)

    assert first.time == second.time == ClockTime(6, 30)


def test_single_record_corpus_answers_every_minute(record_factory) -> None:
    """With one record, every query in either direction resolves to it."""
    only = record_factory(12, 0)
    index = TimeIndex.from_records([only])

    assert index.nearest(12, 1, Direction.BACKWARD) is only
    assert index.nearest(12, 1, Direction.FORWARD) is only
    assert index.nearest(11, 59, Direction.FORWARD) is only
