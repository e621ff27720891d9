#!/usr/bin/env python3
"""
Demonstrate the pytextkit text helpers.

This example wraps a paragraph with different settings and shows the
abbreviate, initials and swap_case helpers.

Usage:
    python examples/wrap_demo.py
"""

import pytextkit
from pytextkit import TextWrapper, WrapConfig

TEXT = (
    "Click here to jump to the commons website - https://commons.apache.org "
    "or read the guide before you start."
)


def main():
    """Print wrapped and transformed text."""
    # Example 1: Word wrap at 20 columns, long words kept whole
    print("=" * 60)
    print("Example 1: Keep long words")
    print("=" * 60)
    print(pytextkit.wrap(TEXT, 20, "\n", False))

    # Example 2: Long words are split
    print("\n" + "=" * 60)
    print("Example 2: Split long words")
    print("=" * 60)
    wrapper = TextWrapper(
        WrapConfig(wrap_length=20, line_separator="\n", wrap_long_words=True)
    )
    for i, line in enumerate(wrapper.wrap_lines(TEXT), start=1):
        print(f"{i:2d} | {line}")

    # Example 3: Regular expression break pattern
    print("\n" + "=" * 60)
    print("Example 3: Break on commas or spaces")
    print("=" * 60)
    print(pytextkit.wrap("red,green,blue yellow,magenta", 10, "\n", True, "[, ]"))

    # Example 4: The smaller helpers
    print("\n" + "=" * 60)
    print("Example 4: abbreviate / initials / swap_case")
    print("=" * 60)
    print(pytextkit.abbreviate("Now is the time for all good men", 0, 10, "..."))
    print(pytextkit.initials("John A. Doe", [".", " "]))
    print(pytextkit.swap_case("The dog has a BONE"))


if __name__ == "__main__":
    main()
