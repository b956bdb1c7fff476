"""Align crab submarines with the least fuel."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence


def parse_positions(text: str) -> list[int]:
    """Parse the comma separated positions on the first line."""
    lines = text.splitlines()
    if not lines:
        return []
    return [int(word) for word in re.findall(r"\d+", lines[0])]


def fuel_to(target: int, positions: Sequence[int], cost: Callable[[int], int]) -> int:
    """Total fuel for every crab to move to the target."""
    return sum(cost(abs(target - position)) for position in positions)


def linear_cost(distance: int) -> int:
    """Fuel for a move when every step costs one unit."""
    return abs(distance)


def triangular_cost(distance: int) -> int:
    """Fuel for a move when each step costs one more than the last."""
    steps = abs(distance)
    return steps * (steps + 1) // 2


def median_target(positions: Sequence[int]) -> int:
    """The median position, the cheapest target under linear cost."""
    if not positions:
        raise ValueError("no positions")
    ordered = sorted(positions)
    return ordered[len(ordered) // 2]


def cheapest_target(
    positions: Sequence[int], cost: Callable[[int], int]
) -> tuple[int, int]:
    """Search every target between the extremes; return (target, fuel)."""
    if not positions:
        raise ValueError("no positions")
    candidates = range(min(positions), max(positions) + 1)
    best = min(candidates, key=lambda target: fuel_to(target, positions, cost))
    return best, fuel_to(best, positions, cost)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Align crabs for the least fuel.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    positions = parse_positions(text)
    target = median_target(positions)
    print(f"[part 1] Fuel to {target}: {fuel_to(target, positions, linear_cost)}")
    best, fuel = cheapest_target(positions, triangular_cost)
    print(f"[part 2] Fuel to {best}: {fuel}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())