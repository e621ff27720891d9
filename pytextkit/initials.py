"""Initials extraction."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import EMPTY
from .helpers import generate_delimiter_set, is_empty

__all__ = ["initials"]


def initials(text: str | None, delimiters: Sequence[str] | None = None) -> str | None:
    """Extract the first character of every delimiter-separated run.

    Args:
        text: Text to scan (None and "" are returned unchanged)
        delimiters: Characters separating words. None means any whitespace;
            an empty sequence means there are no words, so "" is returned.
            A plain string is treated as a sequence of characters.

    Returns:
        The initials in their original order and case

    Examples:
        >>> initials("Ben John Lee")
        'BJL'
        >>> initials("John A. Doe", [".", " "])
        'JAD'
        >>> initials("Ben J.Lee", [])
        ''
    """
    if is_empty(text):
        return text
    if delimiters is not None and len(delimiters) == 0:
        return EMPTY

    delimiter_set = generate_delimiter_set(delimiters)
    match_whitespace = delimiters is None
    result: list[str] = []
    last_was_gap = True
    for ch in text:
        if ch in delimiter_set or (match_whitespace and ch.isspace()):
            last_was_gap = True
        elif last_was_gap:
            result.append(ch)
            last_was_gap = False
    return EMPTY.join(result)
