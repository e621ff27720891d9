from __future__ import annotations

import re
from collections.abc import Iterator

from ..types import BreakMatch

__all__ = ["RegexBreakPattern"]


class RegexBreakPattern:
    """Regular expression break pattern.

    Matching runs on the ``text[start:end]`` slice, so ``^``, ``$``, ``\\b``
    and lookarounds treat the window edges as the edges of the string.
    Patterns that can match the empty string are allowed.
    """

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self.regex = re.compile(pattern)

    def __repr__(self) -> str:
        return f"RegexBreakPattern({self.regex.pattern!r})"

    def finditer(
        self, text: str, start: int, end: int | None = None
    ) -> Iterator[BreakMatch]:
        window = text[start:end]
        for match in self.regex.finditer(window):
            yield BreakMatch(start=match.start(), end=match.end())

    def search(
        self, text: str, start: int, end: int | None = None
    ) -> BreakMatch | None:
        match = self.regex.search(text[start:end])
        if match is None:
            return None
        return BreakMatch(start=match.start(), end=match.end())
