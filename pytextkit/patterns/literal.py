from __future__ import annotations

from collections.abc import Iterator

from ..constants import INDEX_NOT_FOUND
from ..types import BreakMatch

__all__ = ["LiteralBreakPattern"]


class LiteralBreakPattern:
    """Fixed-string break pattern, scanned with ``str.find``."""

    def __init__(self, literal: str) -> None:
        if not literal:
            raise ValueError("literal break pattern cannot be empty")
        self.literal = literal

    def __repr__(self) -> str:
        return f"LiteralBreakPattern({self.literal!r})"

    def finditer(
        self, text: str, start: int, end: int | None = None
    ) -> Iterator[BreakMatch]:
        stop = len(text) if end is None else min(end, len(text))
        width = len(self.literal)
        pos = text.find(self.literal, start, stop)
        while pos != INDEX_NOT_FOUND:
            yield BreakMatch(start=pos - start, end=pos - start + width)
            pos = text.find(self.literal, pos + width, stop)

    def search(
        self, text: str, start: int, end: int | None = None
    ) -> BreakMatch | None:
        return next(self.finditer(text, start, end), None)
