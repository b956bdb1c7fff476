"""Hydrothermal vent lines and their overlaps."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point

    def is_orthogonal(self) -> bool:
        return self.start.x == self.end.x or self.start.y == self.end.y

    def is_diagonal(self) -> bool:
        return abs(self.end.x - self.start.x) == abs(self.end.y - self.start.y)

    def points(self) -> Iterator[Point]:
        """Yield every point the line covers."""
        if self.is_orthogonal():
            low_x, high_x = sorted((self.start.x, self.end.x))
            low_y, high_y = sorted((self.start.y, self.end.y))
            for x in range(low_x, high_x + 1):
                for y in range(low_y, high_y + 1):
                    yield Point(x, y)
        elif self.is_diagonal():
            step_x = 1 if self.end.x > self.start.x else -1
            step_y = 1 if self.end.y > self.start.y else -1
            for i in range(abs(self.end.x - self.start.x) + 1):
                yield Point(self.start.x + step_x * i, self.start.y + step_y * i)
        else:
            raise ValueError("line is not orthogonal or diagonal, cannot plot")

    def __str__(self) -> str:
        return f"{self.start.x},{self.start.y} -> {self.end.x},{self.end.y}"


def parse_line(text: str) -> Line:
    """Parse ``x1,y1 -> x2,y2``."""
    numbers = [int(word) for word in re.findall(r"\d+", text)]
    if len(numbers) < 4:
        raise ValueError(f"malformed line: {text!r}")
    return Line(Point(numbers[0], numbers[1]), Point(numbers[2], numbers[3]))


def plot(lines: Iterable[Line]) -> Counter[Point]:
    """Count how many lines cover each point."""
    return Counter(point for line in lines for point in line.points())


def count_overlaps(counts: Mapping[Point, int]) -> int:
    """Number of points covered by at least two lines."""
    return sum(1 for count in counts.values() if count > 1)


def _cell(count: int) -> str:
    if count == 0:
        return "."
    if count <= 9:
        return str(count)
    return "X"


def render(counts: Mapping[Point, int]) -> str:
    """Draw the diagram, one row per y coordinate."""
    if not counts:
        return ""
    width = max(p.x for p in counts)
    height = max(p.y for p in counts)
    return "\n".join(
        "".join(_cell(counts.get(Point(x, y), 0)) for x in range(width + 1))
        for y in range(height + 1)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count overlapping vent lines.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    lines = [parse_line(row) for row in text.splitlines() if row.strip()]
    straight = [line for line in lines if line.is_orthogonal()]
    print(f"result = {count_overlaps(plot(straight))}")
    plottable = [line for line in lines if line.is_orthogonal() or line.is_diagonal()]
    counts = plot(plottable)
    if counts and max(p.x for p in counts) < 80:
        print(render(counts))
    print(f"result = {count_overlaps(counts)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())