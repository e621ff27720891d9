from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_BREAK_PATTERN, DEFAULT_WRAP_LENGTH


@dataclass(frozen=True)
class WrapConfig:
    """Settings for :class:`~pytextkit.wrap.TextWrapper`.

    Keep this frozen+hashable so a wrapper can be shared between threads.
    """

    wrap_length: int = DEFAULT_WRAP_LENGTH
    # None means os.linesep
    line_separator: str | None = None
    wrap_long_words: bool = False
    # Literal string or regular expression; blank falls back to a space
    break_pattern: str | None = DEFAULT_BREAK_PATTERN
