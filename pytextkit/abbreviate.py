"""Bounded truncation with a continuation marker."""

from __future__ import annotations

from .constants import INDEX_NOT_FOUND, SPACE
from .helpers import check_argument, default_string, index_of, is_empty

__all__ = ["abbreviate", "truncate"]


def abbreviate(
    text: str | None,
    lower: int,
    upper: int,
    append_to_end: str | None = None,
) -> str | None:
    """Abbreviate text between a lower and an upper bound.

    The cut is placed at the first space found at or after ``lower``, but
    never beyond ``upper``. When a space is found the marker is always
    appended; otherwise it is only appended if the text was actually cut.

    Args:
        text: Text to abbreviate (None and "" are returned unchanged)
        lower: Preferred minimum length, clamped to the text length
        upper: Maximum length, or -1 for no limit
        append_to_end: Marker appended after the cut (None means no marker)

    Returns:
        The abbreviated text

    Raises:
        ValueError: If upper is less than -1, or less than lower (unless -1)

    Example:
        >>> abbreviate("Now is the time for all good men", 0, 10, "...")
        'Now...'
        >>> abbreviate("0123456789", 0, 5, "-")
        '01234-'
    """
    check_argument(upper >= -1, "upper value cannot be less than -1")
    check_argument(
        upper >= lower or upper == -1, "upper value is less than lower value"
    )
    if is_empty(text):
        return text

    length = len(text)
    if lower > length:
        lower = length
    if upper == -1 or upper > length:
        upper = length

    index = index_of(text, SPACE, lower)
    if index == INDEX_NOT_FOUND:
        result = text[:upper]
        if upper != length:
            result += default_string(append_to_end)
        return result

    return text[: min(index, upper)] + default_string(append_to_end)


truncate = abbreviate
