"""Transparent origami: fold a sheet of dots."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

Point = tuple[int, int]


class Axis(Enum):
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Fold:
    """A fold along the line ``axis = position``."""

    axis: Axis
    position: int

    def fold_point(self, point: Point) -> Point:
        """Mirror a point lying past the fold line onto the near side."""
        x, y = point
        coord = x if self.axis is Axis.X else y
        if coord > self.position:
            mirrored = 2 * self.position - coord
            if mirrored < 0:
                raise ValueError(f"point {point} folds past the edge of the sheet")
            coord = mirrored
        return (coord, y) if self.axis is Axis.X else (x, coord)

    def apply(self, points: Iterable[Point]) -> list[Point]:
        """Fold every point; return the distinct results in sorted order."""
        return sorted({self.fold_point(point) for point in points})


def _parse_fold(line: str) -> Fold:
    words = re.split(r"[\W_]", line)
    if len(words) < 4:
        raise ValueError(f"malformed fold: {line!r}")
    try:
        axis = Axis(words[2])
    except ValueError:
        raise ValueError("unknown fold") from None
    return Fold(axis, int(words[3]))


def _parse_point(line: str) -> Point:
    numbers = [int(word) for word in re.findall(r"\d+", line)]
    if len(numbers) < 2:
        raise ValueError(f"malformed point: {line!r}")
    return numbers[0], numbers[1]


def parse_manual(lines: Iterable[str]) -> tuple[list[Point], list[Fold]]:
    """Parse dot coordinates and fold instructions."""
    points: list[Point] = []
    folds: list[Fold] = []
    for line in lines:
        if not line:
            continue
        first = line[0]
        if first == "f":
            folds.append(_parse_fold(line))
        elif first.isdigit():
            points.append(_parse_point(line))
        else:
            raise ValueError(f"unexpected line: {line!r}")
    return points, folds


def render(points: Iterable[Point]) -> str:
    """Draw the dots as ``#`` on a field of ``.``."""
    dots = set(points)
    if not dots:
        raise ValueError("no points to render")
    width = max(x for x, _ in dots)
    height = max(y for _, y in dots)
    return "\n".join(
        "".join("#" if (x, y) in dots else "." for x in range(width + 1))
        for y in range(height + 1)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fold transparent paper.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    points, folds = parse_manual(text.splitlines())
    for fold in folds:
        points = fold.apply(points)
        print(f"{len(points)} points left")
    print(render(points))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())