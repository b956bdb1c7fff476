"""Seven-segment display decoding."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence

_SEGMENTS = "abcdefg"
_ENTRY_LENGTH = 14
_OUTPUT = slice(10, 14)
_EASY_SEGMENT_COUNTS = {2, 3, 4, 7}


def parse_pattern(word: str) -> int:
    """Return the bit mask of the lit segments, ``a`` being the lowest bit."""
    mask = 0
    for char in word:
        index = _SEGMENTS.find(char)
        if index < 0:
            raise ValueError("unknown segment")
        mask |= 1 << index
    return mask


def parse_entry(line: str) -> tuple[int, ...]:
    """Parse ten signal patterns and four output patterns from a line."""
    words = re.findall(r"[^\W\d_]+", line)
    if len(words) != _ENTRY_LENGTH:
        raise ValueError(f"expected {_ENTRY_LENGTH} patterns, got {len(words)}")
    return tuple(parse_pattern(word) for word in words)


def count_easy_digits(entries: Iterable[Sequence[int]]) -> int:
    """Count output digits that are 1, 4, 7 or 8, told apart by segment count."""
    return sum(
        1
        for entry in entries
        for pattern in entry[_OUTPUT]
        if pattern.bit_count() in _EASY_SEGMENT_COUNTS
    )


def deduce_encoding(entry: Sequence[int]) -> list[int]:
    """Work out which pattern shows each digit; index i holds the pattern for i."""
    encoding = [0] * 10
    for pattern in sorted(entry, key=int.bit_count):
        lit = pattern.bit_count()
        one, four, seven = encoding[1], encoding[4], encoding[7]
        if lit == 2:
            encoding[1] = pattern
        elif lit == 3:
            encoding[7] = pattern
        elif lit == 4:
            encoding[4] = pattern
        elif lit == 5:
            if one and pattern & one == one:
                encoding[3] = pattern
            elif four and (pattern & four).bit_count() == 2:
                encoding[2] = pattern
            elif four and (pattern & four).bit_count() == 3:
                encoding[5] = pattern
            else:
                raise ValueError("cannot tell 2, 3 and 5 apart")
        elif lit == 6:
            if (one and pattern & one == one) or (seven and pattern & seven == seven):
                if not four:
                    raise ValueError("need a 4 to tell 0 and 9 apart")
                if (pattern & four).bit_count() == 4:
                    encoding[9] = pattern
                else:
                    encoding[0] = pattern
            else:
                encoding[6] = pattern
        elif lit == 7:
            encoding[8] = pattern
    return encoding


def decode_output(entry: Sequence[int]) -> int:
    """Decode the four output digits of an entry into a number."""
    digits = {pattern: digit for digit, pattern in enumerate(deduce_encoding(entry))}
    result = 0
    for pattern in entry[_OUTPUT]:
        try:
            result = result * 10 + digits[pattern]
        except KeyError:
            raise ValueError(f"pattern {pattern:#09b} shows no known digit") from None
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decode seven-segment displays.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    entries = [parse_entry(line) for line in text.splitlines() if line.strip()]
    print(f"outputs 1, 4, 7 and 8: {count_easy_digits(entries)}")
    print(f"output total: {sum(decode_output(entry) for entry in entries)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())