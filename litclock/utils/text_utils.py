import textwrap
from typing import Optional

from litclock.config import Config

TYPOGRAPHIC_APOSTROPHE = "’"
PLAIN_APOSTROPHE = "'"


def normalize_apostrophes(text: str) -> str:
    """Replaces the typographic apostrophe with the plain ASCII one."""
    return text.replace(TYPOGRAPHIC_APOSTROPHE, PLAIN_APOSTROPHE)


def restore_apostrophes(text: str) -> str:
    """Inverse of ``normalize_apostrophes``; keeps every index in place."""
    return text.replace(PLAIN_APOSTROPHE, TYPOGRAPHIC_APOSTROPHE)


def normalize_phrase(context: str) -> str:
    """Returns the context phrase in the form the wrapped aligner compares."""
    return normalize_apostrophes(context).lower()


def reflow(
    text: str,
    width: int,
    initial_indent: Optional[str] = None,
    subsequent_indent: Optional[str] = None,
) -> str:
    """
    Word-wraps text into an indented multi-line block.

    Arguments:
        text (str): Text to wrap. Case and punctuation are left untouched.
        width (int): Maximum line width, indentation included.
        initial_indent (str, optional): Prefix of the first line.
        subsequent_indent (str, optional): Prefix of every following line.

    Returns:
        str: The wrapped lines joined with newlines.
    """
    if initial_indent is None:
        initial_indent = Config.WRAP_CONFIG["initial_indent"]
    if subsequent_indent is None:
        subsequent_indent = Config.WRAP_CONFIG["subsequent_indent"]
    wrapper = textwrap.TextWrapper(
        width=width,
        initial_indent=initial_indent,
        subsequent_indent=subsequent_indent,
    )
    return "\n".join(wrapper.wrap(text))
