from __future__ import annotations

import logging

from ..constants import DEFAULT_BREAK_PATTERN
from ..helpers import is_blank
from .base import BreakPattern
from .literal import LiteralBreakPattern
from .regex import RegexBreakPattern

logger = logging.getLogger(__name__)

# Characters that give a pattern string regular expression meaning
_REGEX_METACHARACTERS = frozenset(".^$*+?{}[]\\|()")


def is_literal_pattern(pattern: str) -> bool:
    return not any(ch in _REGEX_METACHARACTERS for ch in pattern)


def compile_break_pattern(pattern: str | None) -> BreakPattern:
    """Compile a break pattern string once for repeated window searches.

    Blank or None patterns fall back to a single space. Strings without
    regular expression metacharacters use the fixed-string scanner, anything
    else is compiled with :mod:`re`.

    Raises:
        re.error: If ``pattern`` is not a valid regular expression
    """
    if is_blank(pattern):
        pattern = DEFAULT_BREAK_PATTERN
    if is_literal_pattern(pattern):
        logger.debug("Using literal break pattern %r", pattern)
        return LiteralBreakPattern(pattern)
    logger.debug("Using regex break pattern %r", pattern)
    return RegexBreakPattern(pattern)
