"""Break pattern matchers used by the line wrapper."""

from .base import BreakPattern
from .factory import compile_break_pattern
from .literal import LiteralBreakPattern
from .regex import RegexBreakPattern

__all__ = [
    "BreakPattern",
    "LiteralBreakPattern",
    "RegexBreakPattern",
    "compile_break_pattern",
]
