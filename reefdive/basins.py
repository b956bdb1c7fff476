"""Smoke basins in a cave heightmap."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator, Sequence

Heightmap = Sequence[Sequence[int]]

_DELTAS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_PEAK = 9


def parse_heightmap(lines: Iterable[str]) -> list[list[int]]:
    """Parse rows of digits; rows without digits are skipped."""
    rows = [[int(char) for char in line if char.isdigit()] for line in lines]
    return [row for row in rows if row]


def _adjacent(heightmap: Heightmap, row: int, col: int) -> Iterator[tuple[int, int]]:
    rows, cols = len(heightmap), len(heightmap[0])
    for dr, dc in _DELTAS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def neighbours(heightmap: Heightmap, row: int, col: int) -> list[int]:
    """Heights of the cells above, below, left and right that exist."""
    return [heightmap[r][c] for r, c in _adjacent(heightmap, row, col)]


def is_low_point(heightmap: Heightmap, row: int, col: int) -> bool:
    """True if the cell is lower than every neighbour."""
    around = neighbours(heightmap, row, col)
    if not around:
        raise ValueError("a cell without neighbours has no low point")
    return heightmap[row][col] < min(around)


def low_points(heightmap: Heightmap) -> list[tuple[int, int]]:
    """Coordinates (row, col) of every low point, in reading order."""
    return [
        (row, col)
        for row, line in enumerate(heightmap)
        for col in range(len(line))
        if is_low_point(heightmap, row, col)
    ]


def risk_level(heightmap: Heightmap) -> int:
    """Sum of one plus the height of every low point."""
    return sum(1 + heightmap[r][c] for r, c in low_points(heightmap))


def basin_size(heightmap: Heightmap, row: int, col: int) -> int:
    """Count the cells below 9 reached by spreading out from the given cell."""
    filled: set[tuple[int, int]] = set()
    pending = [(row, col)]
    while pending:
        current = pending.pop()
        for cell in _adjacent(heightmap, *current):
            r, c = cell
            if cell not in filled and heightmap[r][c] < _PEAK:
                filled.add(cell)
                pending.append(cell)
    return len(filled)


def largest_basins_product(heightmap: Heightmap) -> int:
    """Product of the sizes of the three largest basins."""
    sizes = sorted(
        (basin_size(heightmap, r, c) for r, c in low_points(heightmap)), reverse=True
    )
    if len(sizes) < 3:
        raise ValueError("fewer than three basins")
    return math.prod(sizes[:3])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find low points and basins.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    heightmap = parse_heightmap(text.splitlines())
    print(f"part1: is {risk_level(heightmap)}!")
    print(f"part2: {largest_basins_product(heightmap)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())