"""Sonar sweep: count how often depth measurements increase."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def window_sums(values: Sequence[int]) -> list[int]:
    """Return the sums of every window of three consecutive values."""
    return [a + b + c for a, b, c in zip(values, values[1:], values[2:])]


def count_increases(values: Sequence[int]) -> int:
    """Count the values that are larger than the value before them."""
    return sum(1 for before, after in zip(values, values[1:]) if after > before)


def _read_text(argv: list[str] | None, description: str) -> str:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        return sys.stdin.read()
    with open(args.input, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    text = _read_text(argv, "Count depth increases in a sonar report.")
    values = [int(word) for word in text.split()]
    print(f"increases {count_increases(values)}")
    print(f"increas3s {count_increases(window_sums(values))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())