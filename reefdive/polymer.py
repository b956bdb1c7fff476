"""Extended polymerization by pair insertion."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Mapping

Rules = Mapping[str, str]


def _uppercase(text: str) -> str:
    return "".join(char for char in text if char.isascii() and char.isupper())


def parse_input(lines: Iterable[str]) -> tuple[str, dict[str, str]]:
    """Parse the template line and the ``AB -> C`` insertion rules."""
    iterator = iter(lines)
    try:
        template = _uppercase(next(iterator))
    except StopIteration:
        raise ValueError("empty input") from None
    rules: dict[str, str] = {}
    for line in iterator:
        if len(line) < 7:
            continue
        chars = _uppercase(line)
        if len(chars) < 3:
            raise ValueError(f"malformed rule: {line!r}")
        rules[chars[:2]] = chars[2]
    return template, rules


def expand(polymer: str, rules: Rules) -> str:
    """Insert the element of every matching rule between each pair once."""
    if not polymer:
        raise ValueError("empty polymer")
    parts = [first + rules.get(first + second, "") for first, second in zip(polymer, polymer[1:])]
    parts.append(polymer[-1])
    return "".join(parts)


def element_counts(template: str, rules: Rules, steps: int) -> Counter[str]:
    """Count the elements after the given steps by tracking pair counts."""
    if not template:
        raise ValueError("empty polymer")
    pairs = Counter(a + b for a, b in zip(template, template[1:]))
    for _ in range(steps):
        following: Counter[str] = Counter()
        for pair, count in pairs.items():
            inserted = rules.get(pair)
            if inserted is None:
                following[pair] += count
            else:
                following[pair[0] + inserted] += count
                following[inserted + pair[1]] += count
        pairs = following
    counts: Counter[str] = Counter({template[-1]: 1})
    for pair, count in pairs.items():
        counts[pair[0]] += count
    return counts


def spread(counts: Mapping[str, int]) -> int:
    """Most common quantity minus least common quantity."""
    if not counts:
        raise ValueError("no elements")
    return max(counts.values()) - min(counts.values())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Grow a polymer by pair insertion.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    template, rules = parse_input(text.splitlines())
    polymer = template
    for step in range(1, 11):
        polymer = expand(polymer, rules)
        print(f"Step {step}:")
    print(f"Total: {spread(Counter(polymer))}")
    print(f"Total: {spread(element_counts(template, rules, 40))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())