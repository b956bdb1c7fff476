"""Paths through a cave system."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterable

_WORD = re.compile(r"[^\W\d_]+")


def _is_large(name: str) -> bool:
    return all(char.isupper() for char in name)


class CaveGraph:
    """Undirected graph of named caves; upper case names are large caves."""

    def __init__(self) -> None:
        self._links: dict[str, list[str]] = {}

    def _node(self, name: str) -> list[str]:
        return self._links.setdefault(name, [])

    def add_edge(self, first: str, second: str) -> None:
        """Connect two caves both ways."""
        self._node(first).append(second)
        self._node(second).append(first)

    def neighbours(self, name: str) -> list[str]:
        """Caves linked to the named cave, in the order the links were added."""
        return list(self._links.get(name, ()))

    def paths(self, start: str, end: str) -> list[list[str]]:
        """Every path from start to end visiting each small cave at most once."""
        if start not in self._links:
            return []
        found: list[list[str]] = []

        def walk(node: str, path: list[str], blocked: frozenset[str]) -> None:
            for nxt in self._links[node]:
                if nxt == end:
                    found.append(path + [nxt])
                elif nxt not in blocked:
                    more = blocked if _is_large(nxt) else blocked | {nxt}
                    walk(nxt, path + [nxt], more)

        initial = frozenset() if _is_large(start) else frozenset({start})
        walk(start, [start], initial)
        return found

    def paths_with_revisit(self, start: str, end: str) -> list[list[str]]:
        """Every path where one small cave may be visited twice, never the start."""
        if start not in self._links:
            raise ValueError(f"unknown cave {start}")
        found: list[list[str]] = []
        visits: Counter[str] = Counter()

        def walk(node: str, path: list[str]) -> None:
            can_double = all(
                count < 2 for name, count in visits.items() if not _is_large(name)
            )
            for nxt in self._links[node]:
                if nxt == start:
                    continue
                if not (_is_large(nxt) or visits[nxt] == 0 or can_double):
                    continue
                if nxt == end:
                    found.append(path + [nxt])
                else:
                    visits[nxt] += 1
                    walk(nxt, path + [nxt])
                    visits[nxt] -= 1

        walk(start, [start])
        return found

    def __str__(self) -> str:
        return "Graph(nodes=[" + "".join(f"{name}," for name in self._links) + "])"


def parse_graph(lines: Iterable[str]) -> CaveGraph:
    """Build a graph from lines such as ``start-A``."""
    graph = CaveGraph()
    for line in lines:
        if not line.strip():
            continue
        words = _WORD.findall(line)
        if len(words) < 2:
            raise ValueError(f"malformed edge: {line!r}")
        graph.add_edge(words[0], words[1])
    return graph


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count paths through the caves.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    graph = parse_graph(text.splitlines())
    print(graph)
    print(f"{len(graph.paths('start', 'end'))} paths")
    print(f"{len(graph.paths_with_revisit('start', 'end'))} paths")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())