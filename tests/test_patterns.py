"""Tests for break pattern matchers."""

import re

import pytest

from pytextkit.patterns.factory import compile_break_pattern, is_literal_pattern
from pytextkit.patterns.literal import LiteralBreakPattern
from pytextkit.patterns.regex import RegexBreakPattern
from pytextkit.types import BreakMatch


def _spans(matches):
    return [(m.start, m.end) for m in matches]


class TestLiteralBreakPattern:
    """Tests for the fixed-string scanner."""

    def test_finditer_whole_text(self):
        pattern = LiteralBreakPattern(" ")
        assert _spans(pattern.finditer("a b c", 0)) == [(1, 2), (3, 4)]

    def test_offsets_are_relative_to_window(self):
        pattern = LiteralBreakPattern(" ")
        assert _spans(pattern.finditer("a b c", 2)) == [(1, 2)]

    def test_window_end_is_exclusive(self):
        pattern = LiteralBreakPattern(" ")
        assert _spans(pattern.finditer("a b c", 0, 2)) == [(1, 2)]
        assert _spans(pattern.finditer("a b c", 0, 1)) == []

    def test_multi_character_literal(self):
        pattern = LiteralBreakPattern("ab")
        assert _spans(pattern.finditer("xxabab", 0)) == [(2, 4), (4, 6)]

    def test_search(self):
        pattern = LiteralBreakPattern(",")
        assert pattern.search("a,b,c", 2) == BreakMatch(start=1, end=2)
        assert pattern.search("abc", 0) is None

    def test_empty_literal_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            LiteralBreakPattern("")


class TestRegexBreakPattern:
    """Tests for the regular expression matcher."""

    def test_finditer(self):
        pattern = RegexBreakPattern(r"\s+")
        assert _spans(pattern.finditer("a  b c", 0)) == [(1, 3), (4, 5)]

    def test_window_start_acts_as_string_start(self):
        pattern = RegexBreakPattern("^b")
        assert pattern.search("abc", 1) == BreakMatch(start=0, end=1)
        assert pattern.search("abc", 0) is None

    def test_lookahead_does_not_see_past_window(self):
        pattern = RegexBreakPattern("b(?=c)")
        assert pattern.search("abc", 0, 2) is None
        assert pattern.search("abc", 0, 3) == BreakMatch(start=1, end=2)

    def test_zero_width_matches(self):
        pattern = RegexBreakPattern("x*")
        assert _spans(pattern.finditer("ab", 0)) == [(0, 0), (1, 1), (2, 2)]

    def test_accepts_compiled_pattern(self):
        pattern = RegexBreakPattern(re.compile(","))
        assert pattern.search("a,b", 0) == BreakMatch(start=1, end=2)


class TestCompileBreakPattern:
    """Tests for matcher selection."""

    @pytest.mark.parametrize("pattern", [None, "", "  ", "\t"])
    def test_blank_defaults_to_space(self, pattern):
        compiled = compile_break_pattern(pattern)
        assert isinstance(compiled, LiteralBreakPattern)
        assert compiled.literal == " "

    def test_plain_string_is_literal(self):
        compiled = compile_break_pattern(", ")
        assert isinstance(compiled, LiteralBreakPattern)

    @pytest.mark.parametrize("pattern", ["[, ]", r"\s", "(?=c)", "a|b", "x*"])
    def test_metacharacters_use_regex(self, pattern):
        assert isinstance(compile_break_pattern(pattern), RegexBreakPattern)

    def test_invalid_regex_raises(self):
        with pytest.raises(re.error):
            compile_break_pattern("(")

    def test_is_literal_pattern(self):
        assert is_literal_pattern("abc")
        assert not is_literal_pattern("a.c")


def test_package_exports():
    import pytextkit
    from pytextkit.patterns import (
        BreakPattern,
        LiteralBreakPattern as ExportedLiteral,
        RegexBreakPattern as ExportedRegex,
        compile_break_pattern as exported_compile,
    )

    assert ExportedLiteral is LiteralBreakPattern
    assert ExportedRegex is RegexBreakPattern
    assert exported_compile is compile_break_pattern
    assert pytextkit.BreakPattern is BreakPattern
    assert pytextkit.compile_break_pattern is compile_break_pattern
    assert callable(pytextkit.wrap)
