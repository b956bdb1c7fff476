"""Launch a probe into an ocean trench target area."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass

_MAX_LAUNCH_VY = 1000


@dataclass(frozen=True)
class Area:
    """A rectangular target area, bounds inclusive."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def __post_init__(self) -> None:
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError("area bounds are inverted")

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def overshot(self, x: int, y: int) -> bool:
        """True once the probe is past the area or below it."""
        return x > self.x_max or y < self.y_min


def simulate(vx: int, vy: int, area: Area) -> int | None:
    """Fly the probe; return the highest y reached if it lands in the area, else None."""
    x = y = apex = 0
    while True:
        x += vx
        y += vy
        apex = max(apex, y)
        if area.overshot(x, y):
            return None
        if area.contains(x, y):
            return apex
        vy -= 1
        if vx > 0:
            vx -= 1
        elif vx < 0:
            vx += 1


def _reaches_x(vx: int, area: Area) -> bool:
    x = 0
    while True:
        x += vx
        if area.x_min <= x <= area.x_max:
            return True
        if vx > 0:
            vx -= 1
        elif vx < 0:
            vx += 1
        else:
            return False


def vx_range(area: Area) -> range:
    """Horizontal launch velocities that pass through the area's columns."""
    hits = [vx for vx in range(1, area.x_max + 1) if _reaches_x(vx, area)]
    if not hits:
        raise ValueError("no horizontal velocity reaches the area")
    return range(hits[0], hits[-1] + 1)


def vy_range(area: Area) -> range:
    """Vertical launch velocities worth trying."""
    return range(area.y_min, -area.y_min)


def highest_apex(area: Area) -> int:
    """Highest point reachable on a throw that lands in the area."""
    vx = vx_range(area).start
    apexes = (simulate(vx, vy, area) for vy in range(1, _MAX_LAUNCH_VY + 1))
    return max((apex for apex in apexes if apex is not None), default=0)


def count_velocities(area: Area) -> int:
    """Number of distinct launch velocities that land in the area."""
    return sum(
        1
        for vx in vx_range(area)
        for vy in vy_range(area)
        if simulate(vx, vy, area) is not None
    )


def _parse_area(text: str) -> Area:
    numbers = [int(word) for word in re.findall(r"-?\d+", text)]
    if len(numbers) < 4:
        raise ValueError(f"malformed target area: {text!r}")
    x_a, x_b, y_a, y_b = numbers[:4]
    return Area(min(x_a, x_b), max(x_a, x_b), min(y_a, y_b), max(y_a, y_b))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Aim a probe at a target area.")
    parser.add_argument(
        "input", nargs="?", help="file holding 'target area: x=A..B, y=C..D'"
    )
    args = parser.parse_args(argv)
    if args.input is None:
        area = Area(195, 238, -93, -67)
    else:
        with open(args.input, encoding="utf-8") as handle:
            area = _parse_area(handle.read())
    print(f"max_y {highest_apex(area)}")
    print(f"{count_velocities(area)} results")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())