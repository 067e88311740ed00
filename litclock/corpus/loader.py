"""
Corpus loader for the literature clock.

The corpus is a pipe-delimited text file without a header row. Each line
holds five fields:

    time|context|quote|source|author

Rows with the wrong shape are skipped with a warning. A malformed time
literal, a missing file, or a corpus without a single usable row is a
configuration error.
"""

import csv
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

from halo import Halo

from litclock.config import Config
from litclock.domain import ClockTime, QuoteRecord
from litclock.errors import ConfigurationError
from litclock.utils import get_logger


logger: logging.Logger = get_logger(__name__)

FIELD_COUNT = 5


def parse_row(row: Sequence[str], line_number: int = 0) -> Optional[QuoteRecord]:
    """
    Converts one corpus row into a QuoteRecord.

    Arguments:
        row (Sequence[str]): The split fields of one line.
        line_number (int): Line number, used in log and error messages.

    Returns:
        Optional[QuoteRecord]: The record, or None if the row is unusable.

    Raises:
        ConfigurationError: If the time field is not a valid HH:MM literal.
    """
    if len(row) != FIELD_COUNT:
        logger.warning(
            "Skipping line %d: expected %d fields, found %d",
            line_number,
            FIELD_COUNT,
            len(row),
        )
        return None

    time_literal, context, quotation, source, author = row
    if not context.strip() or not quotation.strip():
        logger.warning("Skipping line %d: empty context or quotation", line_number)
        return None

    try:
        time: ClockTime = ClockTime.parse(time_literal)
    except ConfigurationError as err:
        raise ConfigurationError(f"Line {line_number}: {err} (got {time_literal!r})") from err

    return QuoteRecord(time, context, quotation, source, author)


def load_quotes(path: Optional[Union[str, Path]] = None) -> List[QuoteRecord]:
    """
    Loads every usable record from the corpus file.

    Arguments:
        path (str | Path, optional): Corpus file. Defaults to the configured
            corpus path.

    Returns:
        List[QuoteRecord]: Records in file order. Never empty.

    Raises:
        ConfigurationError: If the file is missing or unreadable, a time
            literal is malformed, or no usable record is found.
    """
    corpus_path: Path = Path(path) if path else Config.corpus_path()
    if not corpus_path.is_file():
        raise ConfigurationError(f"Corpus file not found: {corpus_path}")

    logger.debug(msg=f"Loading corpus from {corpus_path}")
    records: List[QuoteRecord] = []
    with Halo(
        text=f"Loading quotations from {corpus_path.name}",
        spinner="dots",
        text_color="green",
        stream=sys.stderr,
    ):
        try:
            with open(
                corpus_path,
                mode="r",
                newline="",
                encoding=Config.CORPUS_CONFIG["encoding"],
            ) as file:
                reader = csv.reader(
                    file,
                    delimiter=Config.CORPUS_CONFIG["delimiter"],
                    quoting=csv.QUOTE_NONE,
                )
                for line_number, row in enumerate(reader, start=1):
                    if not row:
                        continue
                    record: Optional[QuoteRecord] = parse_row(row, line_number)
                    if record is not None:
                        records.append(record)
        except (UnicodeDecodeError, OSError) as err:
            raise ConfigurationError(f"Cannot read corpus {corpus_path}: {err}") from err

    if not records:
        raise ConfigurationError(f"Corpus {corpus_path} contains no quotations")

    logger.info(msg=f"Loaded {len(records)} quotations from {corpus_path}")
    return records
