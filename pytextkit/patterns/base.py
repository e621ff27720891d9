from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from ..types import BreakMatch


class BreakPattern(Protocol):
    def finditer(
        self, text: str, start: int, end: int | None = None
    ) -> Iterator[BreakMatch]:
        """Yield matches inside ``text[start:end]``, offsets relative to start."""
        ...

    def search(
        self, text: str, start: int, end: int | None = None
    ) -> BreakMatch | None:
        """Return the first match inside ``text[start:end]`` or None."""
        ...
