"""
Render Utility Functions for the Literature Clock

This module paints a quotation to the terminal in three styles: the context
phrase in the highlight style, the rest of the quotation in the inactive
style, and the attribution line in the active style.

Functions:
    - resolve_color: Validates a colour name from the command line.
    - color_txt: Colorizes a string.
    - styled_runs: Splits a rendering into runs of equal style.

Classes:
    - ColorStyle: A foreground colour with a brightness flag.
    - Presenter: Formats and prints QuoteRecords.
"""

import logging
import sys
from typing import IO, List, NamedTuple, Optional, Tuple

from colored import attr, fg

from litclock.config import Config
from litclock.domain import HighlightSpan, QuoteRecord
from litclock.errors import ConfigurationError
from litclock.highlight import AlignmentPolicy, find_exact_range, highlight
from litclock.utils import get_logger
from litclock.utils.text_utils import (
    normalize_apostrophes,
    reflow,
    restore_apostrophes,
)


logger: logging.Logger = get_logger(__name__)

HIGHLIGHT = "highlight"
INACTIVE = "inactive"
ACTIVE = "active"

# Terminal colour names as understood by `colored`, per brightness
_NORMAL_COLORS = {
    "black": "black",
    "blue": "blue",
    "green": "green",
    "red": "red",
    "cyan": "cyan",
    "magenta": "magenta",
    "yellow": "yellow",
    "white": "light_gray",
    "grey": "dark_gray",
}
_INTENSE_COLORS = {
    "black": "dark_gray",
    "blue": "light_blue",
    "green": "light_green",
    "red": "light_red",
    "cyan": "light_cyan",
    "magenta": "light_magenta",
    "yellow": "light_yellow",
    "white": "white",
    "grey": "light_gray",
}


def resolve_color(name: str) -> str:
    """
    Validates a colour name, ignoring case.

    Arguments:
        name (str): One of ``Config.COLORS``.

    Returns:
        str: The lowercase colour name.

    Raises:
        ConfigurationError: If the colour is not supported.
    """
    color: str = name.strip().lower()
    if color not in Config.COLORS:
        raise ConfigurationError(
            f"Unknown color, available: {', '.join(Config.COLORS)}"
        )
    return color


def color_txt(string: str, fg_color: str, bold: bool = False) -> str:
    """
    Colorizes a string.

    Arguments:
        string (str): String to be colorized.
        fg_color (str): Foreground colour name understood by ``colored``.
        bold (bool): Whether to also set the bold attribute.

    Returns:
        str: Colorized string.
    """
    if not string:
        return ""
    prefix: str = f"{attr('bold')}{fg(fg_color)}" if bold else fg(fg_color)
    return f"{prefix}{string}{attr('reset')}"


class ColorStyle(NamedTuple):
    """Foreground colour of one paint style."""

    color: str
    intense: bool = False

    @classmethod
    def from_config(cls, style: str) -> "ColorStyle":
        settings = Config.COLOR_CONFIG[style]
        return cls(settings["color"], settings["intense"])

    def paint(self, text: str) -> str:
        palette = _INTENSE_COLORS if self.intense else _NORMAL_COLORS
        return color_txt(text, palette[resolve_color(self.color)], bold=self.intense)


def styled_runs(text: str, span: HighlightSpan) -> List[Tuple[str, str]]:
    """
    Splits text into maximal runs painted with the same style.

    Arguments:
        text (str): The rendering the span indexes into.
        span (HighlightSpan): Positions painted in the highlight style.

    Returns:
        List[Tuple[str, str]]: ``(style, text)`` pairs in order, where
            style is ``"highlight"`` or ``"inactive"``.
    """
    runs: List[Tuple[str, str]] = []
    for index, char in enumerate(text):
        style: str = HIGHLIGHT if index in span else INACTIVE
        if runs and runs[-1][0] == style:
            runs[-1] = (style, runs[-1][1] + char)
        else:
            runs.append((style, char))
    return runs


class Presenter:
    """Formats quotations with their context phrase highlighted."""

    def __init__(
        self,
        highlight_style: Optional[ColorStyle] = None,
        inactive_style: Optional[ColorStyle] = None,
        active_style: Optional[ColorStyle] = None,
        width: int = Config.DEFAULT_CONFIG["width"],
        wrap: bool = True,
        stream: Optional[IO[str]] = None,
    ) -> None:
        self.styles = {
            HIGHLIGHT: highlight_style or ColorStyle.from_config(HIGHLIGHT),
            INACTIVE: inactive_style or ColorStyle.from_config(INACTIVE),
            ACTIVE: active_style or ColorStyle.from_config(ACTIVE),
        }
        self.width = width
        self.wrap = wrap
        self.stream = stream

    def _paint_runs(self, runs: List[Tuple[str, str]]) -> str:
        return "".join(self.styles[style].paint(text) for style, text in runs)

    def wrapped_rendering(self, quote: QuoteRecord) -> Tuple[str, HighlightSpan]:
        """Reflows the quotation and aligns its context phrase."""
        rendering: str = reflow(normalize_apostrophes(quote.quotation), self.width)
        span: HighlightSpan = highlight(rendering, quote.context, AlignmentPolicy.WRAPPED)
        if not span.complete:
            logger.warning(
                "Context %r was not fully found in the quotation by %s",
                quote.context,
                quote.author.strip(),
            )
        return rendering, span

    def format_wrapped(self, quote: QuoteRecord) -> str:
        rendering, span = self.wrapped_rendering(quote)
        body: str = self._paint_runs(styled_runs(restore_apostrophes(rendering), span))
        indent: str = Config.WRAP_CONFIG["attribution_indent"]
        attribution: str = reflow(quote.attribution, self.width, indent, indent)
        return f"\n{body}\n\n{self.styles[ACTIVE].paint(attribution)}\n"

    def format_unwrapped(self, quote: QuoteRecord) -> str:
        """
        Formats the raw quotation on one logical line.

        Raises:
            AlignmentNotFound: If the context phrase is not in the quotation.
        """
        start, end = find_exact_range(quote.quotation, quote.context)
        text: str = quote.quotation
        body: str = self._paint_runs(
            [
                (INACTIVE, text[:start]),
                (HIGHLIGHT, text[start:end]),
                (INACTIVE, text[end:]),
            ]
        )
        align: int = Config.WRAP_CONFIG["attribution_align"]
        attribution: str = f"{quote.author.strip():>{align}} – {quote.source}"
        return f"\n{body}\n\n{self.styles[ACTIVE].paint(attribution)}\n"

    def format(self, quote: QuoteRecord) -> str:
        if self.wrap:
            return self.format_wrapped(quote)
        return self.format_unwrapped(quote)

    def show(self, quote: QuoteRecord) -> None:
        """Prints the formatted quotation to the configured stream."""
        stream: IO[str] = self.stream or sys.stdout
        stream.write(self.format(quote))
        stream.flush()
