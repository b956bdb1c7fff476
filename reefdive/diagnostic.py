"""Binary diagnostic report: power consumption and life support ratings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence


def parse_report(lines: Iterable[str]) -> tuple[int, list[int]]:
    """Parse binary lines; return the bit width (of the last line) and values."""
    cleaned = [line.strip() for line in lines if line.strip()]
    if not cleaned:
        return 0, []
    return len(cleaned[-1]), [int(line, 2) for line in cleaned]


def _count_ones(values: Sequence[int], bits: int) -> list[int]:
    return [sum((value >> bit) & 1 for value in values) for bit in range(bits)]


def power_rates(values: Sequence[int], bits: int) -> tuple[int, int]:
    """Return (gamma, epsilon) for the report."""
    threshold = len(values) // 2
    gamma = 0
    for bit, count in enumerate(_count_ones(values, bits)):
        if count > threshold:
            gamma |= 1 << bit
    epsilon = ~gamma & ((1 << bits) - 1)
    return gamma, epsilon


def most_common_bits(values: Sequence[int], bits: int) -> list[bool | None]:
    """Most common value per bit position (index 0 is the lowest bit); None on a tie."""
    total = len(values)
    result: list[bool | None] = []
    for ones in _count_ones(values, bits):
        zeros = total - ones
        if zeros == ones:
            result.append(None)
        else:
            result.append(ones > zeros)
    return result


def _filter_values(
    values: Sequence[int], bits: int, keep: Callable[[bool, bool | None], bool]
) -> int:
    remaining = list(values)
    for bit in reversed(range(bits)):
        commons = most_common_bits(remaining, bits)
        remaining = [v for v in remaining if keep(bool((v >> bit) & 1), commons[bit])]
        if len(remaining) == 1:
            return remaining[0]
    return 0


def oxygen_rating(values: Sequence[int], bits: int) -> int:
    return _filter_values(
        values, bits, lambda bit, common: bit if common is None else bit == common
    )


def co2_rating(values: Sequence[int], bits: int) -> int:
    return _filter_values(
        values, bits, lambda bit, common: not bit if common is None else bit != common
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyse a binary diagnostic report.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        lines = sys.stdin.read().splitlines()
    else:
        with open(args.input, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    bits, values = parse_report(lines)
    gamma, epsilon = power_rates(values, bits)
    print(f"gamma: {gamma}")
    print(f"epsilon: {epsilon}")
    print(f"result: {gamma * epsilon}")
    oxygen = oxygen_rating(values, bits)
    co2 = co2_rating(values, bits)
    print(f"oxygen {oxygen}")
    print(f"co2 {co2}")
    print(f"total {oxygen * co2}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())