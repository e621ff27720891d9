"""Word-aware letter case inversion."""

from __future__ import annotations

import unicodedata

from .constants import EMPTY
from .helpers import is_empty

__all__ = ["swap_case"]


def _is_titlecase(ch: str) -> bool:
    return unicodedata.category(ch) == "Lt"


def _single(ch: str, mapped: str) -> str:
    # One codepoint in, one out; "ß" -> "SS" style mappings keep the original
    return mapped if len(mapped) == 1 else ch


def swap_case(text: str | None) -> str | None:
    """Swap upper and lower case, capitalizing the first letter of each word.

    Upper and titlecase letters become lowercase. Lowercase letters become
    titlecase at the start of a word and uppercase elsewhere. Only whitespace
    starts a new word; punctuation and digits do not. Characters whose case
    mapping expands to several codepoints are left as they are.

    Example:
        >>> swap_case("The dog has a BONE")
        'tHE DOG HAS A bone'
        >>> swap_case("hello world")
        'HELLO WORLD'
    """
    if is_empty(text):
        return text

    result: list[str] = []
    whitespace = True
    for ch in text:
        if ch.isupper() or _is_titlecase(ch):
            result.append(_single(ch, ch.lower()))
            whitespace = False
        elif ch.islower():
            if whitespace:
                result.append(_single(ch, ch.title()))
                whitespace = False
            else:
                result.append(_single(ch, ch.upper()))
        else:
            whitespace = ch.isspace()
            result.append(ch)
    return EMPTY.join(result)
