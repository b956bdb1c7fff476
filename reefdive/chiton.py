"""Lowest-risk path through a cave of chitons."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Sequence

Grid = Sequence[Sequence[int]]


def parse_map(lines: Iterable[str]) -> list[list[int]]:
    """Parse rows of digits; rows without digits are skipped."""
    rows = [[int(char) for char in line if char.isdigit()] for line in lines]
    return [row for row in rows if row]


def _wrap(value: int, increase: int) -> int:
    total = value + increase
    return total - 9 if total > 9 else total


def expand_map(grid: Grid, times: int) -> list[list[int]]:
    """Tile the map ``times`` by ``times``, each tile one higher, 9 wrapping to 1."""
    if times < 1:
        raise ValueError("times must be at least 1")
    wide = [[_wrap(value, n) for n in range(times) for value in row] for row in grid]
    taller = [[_wrap(value, n) for value in row] for n in range(1, times) for row in wide]
    return wide + taller


def lowest_risk(grid: Grid) -> int:
    """Lowest total risk from the top left to the bottom right, start excluded."""
    if not grid or not grid[0]:
        raise ValueError("empty map")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("map rows differ in length")
    target = (rows - 1, cols - 1)
    best = {(0, 0): 0}
    queue = [(0, 0, 0)]
    while queue:
        risk, row, col = heapq.heappop(queue)
        if (row, col) == target:
            return risk
        if risk > best[(row, col)]:
            continue
        for r, c in ((row - 1, col), (row, col - 1), (row + 1, col), (row, col + 1)):
            if 0 <= r < rows and 0 <= c < cols:
                candidate = risk + grid[r][c]
                if candidate < best.get((r, c), candidate + 1):
                    best[(r, c)] = candidate
                    heapq.heappush(queue, (candidate, r, c))
    raise ValueError("no path to the exit")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the safest path through the cave.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    grid = parse_map(text.splitlines())
    print(f"Hello, {lowest_risk(grid)}")
    print(f"Hello, {lowest_risk(expand_map(grid, 5))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())