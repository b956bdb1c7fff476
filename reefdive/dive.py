"""Submarine steering: follow forward/up/down commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from collections.abc import Iterable


class Direction(Enum):
    FORWARD = "forward"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Command:
    direction: Direction
    value: int


@dataclass(frozen=True)
class Position:
    """Position where up and down change the depth directly."""

    horizontal: int = 0
    depth: int = 0

    def __add__(self, command: Command) -> Position:
        if not isinstance(command, Command):
            return NotImplemented
        if command.direction is Direction.FORWARD:
            return Position(self.horizontal + command.value, self.depth)
        if command.direction is Direction.UP:
            return Position(self.horizontal, self.depth - command.value)
        return Position(self.horizontal, self.depth + command.value)


@dataclass(frozen=True)
class AimedPosition:
    """Position where up and down change the aim, and forward dives along it."""

    horizontal: int = 0
    depth: int = 0
    aim: int = 0

    def __add__(self, command: Command) -> AimedPosition:
        if not isinstance(command, Command):
            return NotImplemented
        if command.direction is Direction.FORWARD:
            return AimedPosition(
                self.horizontal + command.value,
                self.depth + self.aim * command.value,
                self.aim,
            )
        if command.direction is Direction.UP:
            return AimedPosition(self.horizontal, self.depth, self.aim - command.value)
        return AimedPosition(self.horizontal, self.depth, self.aim + command.value)


def parse_command(line: str) -> Command:
    """Parse a line such as ``forward 5``."""
    words = line.split()
    if len(words) < 2:
        raise ValueError(f"malformed command: {line!r}")
    try:
        direction = Direction(words[0])
    except ValueError:
        raise ValueError(f"unknown direction {words[0]}") from None
    return Command(direction, int(words[1]))


def follow(commands: Iterable[Command]) -> Position:
    return reduce(lambda pos, cmd: pos + cmd, commands, Position())


def follow_with_aim(commands: Iterable[Command]) -> AimedPosition:
    return reduce(lambda pos, cmd: pos + cmd, commands, AimedPosition())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Follow submarine commands.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    commands = [parse_command(line) for line in text.splitlines() if line.strip()]
    plain = follow(commands)
    aimed = follow_with_aim(commands)
    print(f"the end is {plain.horizontal * plain.depth}")
    print(f"the end is {aimed.horizontal * aimed.depth}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())