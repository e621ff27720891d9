"""Small null-tolerant helpers shared by the text transformations."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import EMPTY, INDEX_NOT_FOUND, SPACE


def check_argument(expression: bool, message: str) -> None:
    """Raise ``ValueError(message)`` unless ``expression`` holds."""
    if not expression:
        raise ValueError(message)


def length_of(text: str | None) -> int:
    """Return the length of text, 0 for None."""
    return 0 if text is None else len(text)


def is_empty(text: str | None) -> bool:
    """Check if text is None or empty."""
    return not text


def is_blank(text: str | None) -> bool:
    """Check if text is None, empty or made only of whitespace.

    Examples:
        >>> is_blank("  \\t")
        True
        >>> is_blank(" a ")
        False
    """
    if length_of(text) == 0:
        return True
    return all(ch.isspace() for ch in text)


def default_string(text: str | None) -> str:
    """Return text, or an empty string for None."""
    return EMPTY if text is None else text


def index_of(text: str | None, search: str | None, start: int = 0) -> int:
    """Find ``search`` in ``text`` at or after ``start``.

    Returns:
        The index of the first occurrence, or ``INDEX_NOT_FOUND`` when either
        operand is None or there is no occurrence.
    """
    if text is None or search is None:
        return INDEX_NOT_FOUND
    return text.find(search, max(start, 0))


def generate_delimiter_set(delimiters: Iterable[str] | None) -> frozenset[str]:
    """Build the set of delimiter characters used by :func:`initials`.

    When ``delimiters`` is None the set only holds a space; callers are
    expected to also treat any whitespace as a delimiter in that case.
    An empty iterable yields an empty set.
    """
    if delimiters is None:
        return frozenset(SPACE)
    return frozenset(delimiters)
