"""Navigation subsystem syntax checking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_CLOSERS = frozenset(_PAIRS.values())
_ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}


@dataclass(frozen=True)
class LineCheck:
    """Result of checking one line.

    ``illegal`` is the first wrong closing character of a corrupted line;
    ``missing`` holds the closers that would complete an intact line.
    """

    illegal: str | None
    missing: str

    @property
    def corrupted(self) -> bool:
        return self.illegal is not None


def check_line(line: str) -> LineCheck:
    """Check a line of brackets; other characters are ignored."""
    expected: list[str] = []
    for char in line:
        if char in _PAIRS:
            expected.append(_PAIRS[char])
        elif char in _CLOSERS:
            if not expected:
                raise ValueError(f"closer {char!r} with nothing open")
            if expected.pop() != char:
                return LineCheck(char, "")
    return LineCheck(None, "".join(reversed(expected)))


def corruption_score(lines: Iterable[str]) -> int:
    """Total error score of the corrupted lines."""
    return sum(
        _ERROR_POINTS[result.illegal]
        for result in map(check_line, lines)
        if result.illegal is not None
    )


def completion_score(closers: str) -> int:
    """Score a completion string."""
    score = 0
    for char in closers:
        score = 5 * score + _COMPLETION_POINTS[char]
    return score


def middle_completion_score(lines: Iterable[str]) -> int:
    """Middle score of all lines that are not corrupted."""
    scores = sorted(
        completion_score(result.missing)
        for result in map(check_line, lines)
        if not result.corrupted
    )
    if not scores:
        raise ValueError("no line can be completed")
    return scores[len(scores) // 2]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check navigation syntax.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    lines = text.splitlines()
    print(f"part 1 score {corruption_score(lines)}")
    print(f"part 2 score {middle_completion_score(lines)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())