"""Snailfish number arithmetic."""

from __future__ import annotations

import argparse
import functools
import itertools
import sys
from collections.abc import Iterable, Iterator, Sequence

_EXPLODE_DEPTH = 4
_SPLIT_AT = 10


class Number:
    """A snailfish number: a regular number or a pair of snailfish numbers."""

    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value: int | None = 0,
        left: Number | None = None,
        right: Number | None = None,
    ) -> None:
        if (left is None) != (right is None):
            raise ValueError("a pair needs both halves")
        if left is None and value is None:
            raise ValueError("a regular number needs a value")
        self.value = None if left is not None else value
        self.left = left
        self.right = right

    @classmethod
    def pair(cls, left: Number, right: Number) -> Number:
        return cls(None, left, right)

    @property
    def is_pair(self) -> bool:
        return self.left is not None

    def _copy(self) -> Number:
        if self.left is not None and self.right is not None:
            return Number.pair(self.left._copy(), self.right._copy())
        return Number(self.value)

    def magnitude(self) -> int:
        """Three times the left magnitude plus twice the right; a value for itself."""
        if self.left is not None and self.right is not None:
            return 3 * self.left.magnitude() + 2 * self.right.magnitude()
        assert self.value is not None
        return self.value

    def _leaves(self) -> Iterator[Number]:
        if self.left is not None and self.right is not None:
            yield from self.left._leaves()
            yield from self.right._leaves()
        else:
            yield self

    def _explode(self, level: int) -> tuple[Number, int, int] | None:
        if self.left is None or self.right is None:
            return None
        if level == _EXPLODE_DEPTH:
            values = (self, self.left.magnitude(), self.right.magnitude())
            self.value, self.left, self.right = 0, None, None
            return values
        return self.left._explode(level + 1) or self.right._explode(level + 1)

    def _split(self) -> bool:
        if self.left is not None and self.right is not None:
            return self.left._split() or self.right._split()
        assert self.value is not None
        if self.value >= _SPLIT_AT:
            half = self.value // 2
            self.left, self.right = Number(half), Number(self.value - half)
            self.value = None
            return True
        return False

    def reduce(self) -> None:
        """Explode and split in place until neither applies."""
        while True:
            exploded = self._explode(0)
            if exploded is not None:
                node, left_value, right_value = exploded
                leaves = list(self._leaves())
                index = next(i for i, leaf in enumerate(leaves) if leaf is node)
                if index > 0:
                    leaves[index - 1].value += left_value  # type: ignore[operator]
                if index + 1 < len(leaves):
                    leaves[index + 1].value += right_value  # type: ignore[operator]
            elif not self._split():
                break

    def __add__(self, other: Number) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        result = Number.pair(self._copy(), other._copy())
        result.reduce()
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        if self.is_pair != other.is_pair:
            return False
        if self.is_pair:
            return self.left == other.left and self.right == other.right
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.is_pair:
            return f"[{self.left},{self.right}]"
        return str(self.value)

    def __repr__(self) -> str:
        return f"Number({self})"


def _parse(text: str, pos: int) -> tuple[Number, int]:
    if pos >= len(text):
        raise ValueError("unexpected end of snailfish number")
    char = text[pos]
    if char == "[":
        left, pos = _parse(text, pos + 1)
        if pos >= len(text) or text[pos] != ",":
            raise ValueError(f"expected ',' at position {pos}")
        right, pos = _parse(text, pos + 1)
        if pos >= len(text) or text[pos] != "]":
            raise ValueError(f"expected ']' at position {pos}")
        return Number.pair(left, right), pos + 1
    if char.isdigit():
        end = pos
        while end < len(text) and text[end].isdigit():
            end += 1
        return Number(int(text[pos:end])), end
    raise ValueError(f"unexpected {char!r} at position {pos}")


def parse_number(text: str) -> Number:
    """Parse a number written like ``[[1,2],3]``."""
    stripped = text.strip()
    number, end = _parse(stripped, 0)
    if end != len(stripped):
        raise ValueError(f"trailing text after snailfish number: {stripped[end:]!r}")
    return number


def sum_numbers(numbers: Iterable[Number]) -> Number:
    """Add the numbers together in order."""
    items = list(numbers)
    if not items:
        raise ValueError("nothing to add")
    if len(items) == 1:
        result = items[0]._copy()
        result.reduce()
        return result
    return functools.reduce(lambda acc, number: acc + number, items)


def largest_magnitude(numbers: Sequence[Number]) -> int:
    """Largest magnitude of the sum of any two different numbers, in either order."""
    return max(
        ((a + b).magnitude() for a, b in itertools.permutations(numbers, 2)),
        default=0,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Do snailfish homework.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    numbers = [parse_number(line) for line in text.splitlines() if line.strip()]
    print(f"Magnitude: {sum_numbers(numbers).magnitude()}")
    print(f"Max magnitude: {largest_magnitude(numbers)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())