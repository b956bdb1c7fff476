"""Dumbo octopus energy levels and their flashes."""

from __future__ import annotations

import argparse
import copy
import sys
from collections.abc import Iterable, Iterator

Grid = list[list[int]]

_FLASH_LEVEL = 10


def parse_grid(lines: Iterable[str]) -> Grid:
    """Parse rows of digits; rows without digits are skipped."""
    rows = [[int(char) for char in line if char.isdigit()] for line in lines]
    return [row for row in rows if row]


def _surrounding(grid: Grid, row: int, col: int) -> Iterator[tuple[int, int]]:
    rows, cols = len(grid), len(grid[0])
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            r, c = row + dr, col + dc
            if 0 <= r < rows and 0 <= c < cols:
                yield r, c


def step(grid: Grid) -> int:
    """Advance the grid one step in place and return how many octopuses flashed."""
    pending: list[tuple[int, int]] = []
    for r, line in enumerate(grid):
        for c in range(len(line)):
            line[c] += 1
            if line[c] == _FLASH_LEVEL:
                pending.append((r, c))
    flashes = 0
    while pending:
        r, c = pending.pop()
        flashes += 1
        for nr, nc in _surrounding(grid, r, c):
            grid[nr][nc] += 1
            if grid[nr][nc] == _FLASH_LEVEL:
                pending.append((nr, nc))
    for line in grid:
        for c, value in enumerate(line):
            if value >= _FLASH_LEVEL:
                line[c] = 0
    return flashes


def flashes_after(grid: Grid, steps: int) -> int:
    """Total flashes over the given number of steps; the grid is left untouched."""
    working = copy.deepcopy(grid)
    return sum(step(working) for _ in range(steps))


def first_sync_step(grid: Grid) -> int:
    """The first step on which every octopus flashes; the grid is left untouched."""
    if not grid or not grid[0]:
        raise ValueError("empty grid")
    working = copy.deepcopy(grid)
    size = sum(len(line) for line in working)
    number = 0
    while True:
        number += 1
        if step(working) == size:
            return number


def render(grid: Grid) -> str:
    """Draw the energy levels, showing levels above 9 as 0."""
    return "\n".join(
        "".join(str(value) if value < _FLASH_LEVEL else "0" for value in line)
        for line in grid
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Watch dumbo octopuses flash.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    grid = parse_grid(text.splitlines())
    print(f"Sync flash on step {first_sync_step(grid)}")
    print(f"Flashes after 100: {flashes_after(grid, 100)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())