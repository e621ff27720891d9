"""Fixed-width line wrapping on a configurable break pattern.

The wrapper scans the text with a bounded window of ``wrap_length + 1``
characters and breaks at the rightmost break pattern match inside it. Text
without a usable break is either split mid-word (``wrap_long_words``) or
kept whole up to the next match beyond the window.

Break patterns may match the empty string (lookarounds, ``x*``). The most
recent match width is tracked so that a zero-width match at the cursor,
which forces the cursor one character forward, can be compensated for when
the line is emitted.
"""

from __future__ import annotations

import logging
import os

from .constants import DEFAULT_WRAP_LENGTH, EMPTY
from .patterns.base import BreakPattern
from .patterns.factory import compile_break_pattern
from .wrap_config import WrapConfig

logger = logging.getLogger(__name__)

__all__ = ["TextWrapper", "wrap"]

# No break pattern match has been consumed yet
_NO_MATCH = -1


def _wrap_with_pattern(
    text: str,
    wrap_length: int,
    line_separator: str,
    wrap_long_words: bool,
    pattern: BreakPattern,
) -> str:
    input_length = len(text)
    offset = 0
    match_width = _NO_MATCH
    out: list[str] = []

    while offset < input_length:
        break_at = -1
        window_end = min(offset + wrap_length + 1, input_length)
        matches = pattern.finditer(text, offset, window_end)
        match = next(matches, None)
        if match is not None:
            if match.start == 0:
                match_width = match.width
                if match_width != 0:
                    offset += match.end
                    continue
                offset += 1
            break_at = offset + match.start

        if input_length - offset <= wrap_length:
            break

        # Window offsets are measured from the cursor, including any
        # zero-width advance made above.
        for match in matches:
            break_at = offset + match.start

        if break_at >= offset:
            out.append(text[offset:break_at])
            out.append(line_separator)
            offset = break_at + 1
        elif wrap_long_words:
            if match_width == 0:
                offset -= 1
            logger.debug("Splitting long word at offset %d", offset)
            out.append(text[offset : offset + wrap_length])
            out.append(line_separator)
            offset += wrap_length
            match_width = _NO_MATCH
        else:
            lookahead_start = offset + wrap_length
            match = pattern.search(text, lookahead_start)
            if match is not None:
                match_width = match.width
                break_at = lookahead_start + match.start

            if break_at >= 0:
                if match_width == 0 and offset != 0:
                    offset -= 1
                logger.debug("Breaking long word at offset %d", break_at)
                out.append(text[offset:break_at])
                out.append(line_separator)
                offset = break_at + 1
            else:
                if match_width == 0 and offset != 0:
                    offset -= 1
                out.append(text[offset:])
                offset = input_length
                match_width = _NO_MATCH

    if match_width == 0 and offset < input_length:
        offset -= 1

    out.append(text[offset:])
    return EMPTY.join(out)


def wrap(
    text: str | None,
    wrap_length: int = DEFAULT_WRAP_LENGTH,
    line_separator: str | None = None,
    wrap_long_words: bool = False,
    break_pattern: str | None = None,
) -> str | None:
    """Wrap text into lines of at most ``wrap_length`` characters.

    Leading break matches on a line are dropped, and the character at each
    break position is consumed. Lines are never longer than ``wrap_length``
    unless a single word is longer and ``wrap_long_words`` is False.

    Args:
        text: Text to wrap, None is returned unchanged
        wrap_length: Column to wrap at, values below 1 are treated as 1
        line_separator: String inserted between lines (default: os.linesep)
        wrap_long_words: Split words longer than ``wrap_length``
        break_pattern: Literal string or regular expression marking where a
            line may end (default: a single space)

    Returns:
        The wrapped text, with no trailing separator

    Raises:
        re.error: If ``break_pattern`` is not a valid regular expression

    Example:
        >>> wrap("Hello World, have a nice day!", 10, "\\n", True, " ")
        'Hello\\nWorld,\\nhave a\\nnice day!'
    """
    if text is None:
        return None
    if line_separator is None:
        line_separator = os.linesep
    if wrap_length < 1:
        wrap_length = 1
    pattern = compile_break_pattern(break_pattern)
    return _wrap_with_pattern(
        text, wrap_length, line_separator, wrap_long_words, pattern
    )


class TextWrapper:
    """Reusable wrapper bound to a :class:`WrapConfig`.

    The break pattern is compiled once on construction. A custom
    :class:`BreakPattern` implementation can be injected with ``pattern``,
    in which case ``config.break_pattern`` is ignored.
    """

    def __init__(
        self,
        config: WrapConfig | None = None,
        *,
        pattern: BreakPattern | None = None,
    ) -> None:
        self.config = config or WrapConfig()
        self.pattern = pattern or compile_break_pattern(self.config.break_pattern)

    @property
    def wrap_length(self) -> int:
        return max(self.config.wrap_length, 1)

    @property
    def line_separator(self) -> str:
        if self.config.line_separator is None:
            return os.linesep
        return self.config.line_separator

    def wrap(self, text: str | None) -> str | None:
        if text is None:
            return None
        return _wrap_with_pattern(
            text,
            self.wrap_length,
            self.line_separator,
            self.config.wrap_long_words,
            self.pattern,
        )

    def wrap_lines(self, text: str | None) -> list[str]:
        """Wrap text and return the individual lines."""
        wrapped = self.wrap(text)
        if wrapped is None:
            return []
        return wrapped.split(self.line_separator)
