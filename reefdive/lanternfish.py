"""Lanternfish population growth."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable

_RESET_TIMER = 6
_NEWBORN_TIMER = 8


def parse_ages(text: str) -> list[int]:
    """Parse the comma separated timers on the first line."""
    lines = text.splitlines()
    if not lines:
        return []
    return [int(word) for word in re.findall(r"\d+", lines[0])]


def simulate_school(ages: Iterable[int], days: int) -> list[int]:
    """Simulate each fish individually and return the timers after the given days."""
    fish = list(ages)
    for _ in range(days):
        births = fish.count(0)
        fish = [_RESET_TIMER if timer == 0 else timer - 1 for timer in fish]
        fish.extend([_NEWBORN_TIMER] * births)
    return fish


def count_after(ages: Iterable[int], days: int) -> int:
    """Count the fish after the given days by tracking how many share each timer."""
    buckets = [0] * (_NEWBORN_TIMER + 1)
    for age in ages:
        if not 0 <= age <= _NEWBORN_TIMER:
            raise ValueError(f"timer out of range: {age}")
        buckets[age] += 1
    for _ in range(days):
        spawning = buckets[0]
        buckets = buckets[1:] + [spawning]
        buckets[_RESET_TIMER] += spawning
    return sum(buckets)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Model lanternfish growth.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    ages = parse_ages(text)
    print(f"total: {count_after(ages, 80)}")
    print(f"total: {count_after(ages, 256)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())