"""Word-prefix search used by the prefix highlighter.

A match must begin on a word boundary: the start of the string, or a
position whose preceding character is not a letter or digit.  Comparison
is case-insensitive (``str.casefold`` on both sides).
"""

import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)


class MatchRange(NamedTuple):
    """Half-open ``[start, end)`` range of a prefix match."""

    start: int
    end: int


def is_word_boundary(text: str, index: int) -> bool:
    """Return True if a word may start at *index* in *text*."""
    return index == 0 or not text[index - 1].isalnum()


def strip_leading_separators(prefix: str) -> str:
    """Drop leading non-alphanumeric characters from a typed query."""
    i = 0
    while i < len(prefix) and not prefix[i].isalnum():
        i += 1
    return prefix[i:]


def find_prefix_range(text: str, prefix: str) -> MatchRange | None:
    """Find the first word in *text* that starts with *prefix*.

    Args:
        text: The display string to search.
        prefix: The query, compared case-insensitively.

    Returns:
        The ``[start, start + len(prefix))`` range of the first match, or
        None when either argument is empty or no word starts with *prefix*.
    """
    if not text or not prefix:
        return None

    size = len(prefix)
    folded = prefix.casefold()
    for i in range(len(text) - size + 1):
        if not is_word_boundary(text, i):
            continue
        if text[i:i + size].casefold() == folded:
            logger.debug("Prefix %r matched at %d in %r", prefix, i, text)
            return MatchRange(i, i + size)
    return None
