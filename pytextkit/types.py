from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BreakMatch:
    """A break pattern match (offsets are relative to the searched window)."""

    start: int
    end: int

    @property
    def width(self) -> int:
        return self.end - self.start
