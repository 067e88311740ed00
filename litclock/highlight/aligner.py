"""
Highlight alignment for literature clock quotations.

Given a rendering of a quotation and its context phrase, this module works
out which characters of the rendering belong to the phrase so the presenter
can paint them in the highlight style.

Two policies are available:
    - WRAPPED: the rendering was reflowed (line breaks and indentation were
      inserted, typographic apostrophes replaced). A single left-to-right
      scan skips the reflow noise and never backtracks.
    - EXACT: the rendering is the raw quotation. The phrase must occur
      verbatim, ignoring case, and the result is one contiguous range.

The two policies deliberately disagree on normalization: WRAPPED is
best-effort and returns a partial span when the phrase is not found, EXACT
treats a missing phrase as a corpus integrity error.

A line break leaves the WRAPPED scan in its indentation state until the next
mismatch of a non-space character resets it, so a mismatching space later in
the same candidate is skipped as well. This is intended.
"""

import logging
import re
from enum import Enum
from typing import Callable, Dict, List, Tuple

from litclock.domain import HighlightSpan
from litclock.errors import AlignmentNotFound
from litclock.utils import get_logger, normalize_phrase


logger: logging.Logger = get_logger(__name__)


class AlignmentPolicy(Enum):
    """How the rendering handed to ``highlight`` was produced."""

    WRAPPED = "wrapped"
    EXACT = "exact"


def align_wrapped(rendering: str, phrase: str) -> HighlightSpan:
    """
    Finds the phrase inside a reflowed rendering.

    The scan tolerates line breaks and the indentation that follows them. A
    line break consumes a space of the phrase when one is expected, since
    reflow replaces the space it breaks on. On a mismatch the candidate
    match is dropped and the scan continues with the next character; the
    mismatching character is not retried as a new start.

    Arguments:
        rendering (str): The wrapped, apostrophe-normalized quotation.
        phrase (str): The lowercase, apostrophe-normalized context phrase.

    Returns:
        HighlightSpan: Matched indices into ``rendering``. ``complete`` is
            False when the scan ran out before the whole phrase matched.
    """
    phrase = phrase.lower()
    matched: List[int] = []
    expected: int = 0
    head: bool = False

    if not phrase:
        return HighlightSpan()

    for index, char in enumerate(rendering):
        if char == "\n":
            head = True
            if expected and phrase[expected].isspace():
                expected += 1
                if expected == len(phrase):
                    break
            continue

        if char.lower() == phrase[expected]:
            matched.append(index)
            expected += 1
            if expected == len(phrase):
                break
            continue

        # indentation inserted after a line break
        if char == " " and head:
            continue

        matched = []
        expected = 0
        head = False

    complete: bool = expected == len(phrase)
    if not complete:
        logger.debug(
            "Phrase %r only partially matched (%d of %d characters)",
            phrase,
            expected,
            len(phrase),
        )
    return HighlightSpan.from_indices(matched, complete=complete)


def find_exact_range(quotation: str, context: str) -> Tuple[int, int]:
    """
    Locates the first case-insensitive occurrence of context in quotation.

    Returns:
        Tuple[int, int]: Half-open ``(start, end)`` range into ``quotation``.

    Raises:
        AlignmentNotFound: If the phrase does not occur verbatim.
    """
    match = re.search(re.escape(context), quotation, flags=re.IGNORECASE)
    if not context or match is None:
        raise AlignmentNotFound(
            f"Context phrase {context!r} not found in quotation {quotation[:40]!r}..."
        )
    return match.start(), match.end()


def align_exact(rendering: str, context: str) -> HighlightSpan:
    start, end = find_exact_range(rendering, context)
    return HighlightSpan.from_range(start, end)


def _align_wrapped_context(rendering: str, context: str) -> HighlightSpan:
    return align_wrapped(rendering, normalize_phrase(context))


ALIGNERS: Dict[AlignmentPolicy, Callable[[str, str], HighlightSpan]] = {
    AlignmentPolicy.WRAPPED: _align_wrapped_context,
    AlignmentPolicy.EXACT: align_exact,
}


def highlight(
    rendering: str,
    context: str,
    policy: AlignmentPolicy = AlignmentPolicy.WRAPPED,
) -> HighlightSpan:
    """
    Returns the highlighted positions of context within rendering.

    Arguments:
        rendering (str): The text that will be painted.
        context (str): The context phrase as stored in the corpus.
        policy (AlignmentPolicy): How ``rendering`` was produced.

    Returns:
        HighlightSpan: Positions into ``rendering``.
    """
    aligner = ALIGNERS[policy]
    span: HighlightSpan = aligner(rendering, context)
    logger.debug("Aligned %d characters with %s policy", len(span), policy.value)
    return span
