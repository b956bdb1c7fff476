"""Giant squid bingo."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator, Sequence

_SIZE = 5
_ROW_MASK = (1 << _SIZE) - 1
_COL_MASK = sum(1 << (_SIZE * row) for row in range(_SIZE))


class Board:
    """A 5x5 bingo board with its marked cells."""

    SIZE = _SIZE

    def __init__(self, values: Iterable[int]) -> None:
        self.values = tuple(values)
        if len(self.values) != _SIZE * _SIZE:
            raise ValueError("Wrong number of numbers")
        self.marked = 0

    def _is_marked(self, index: int) -> bool:
        return bool(self.marked & (1 << index))

    def call(self, number: int) -> None:
        """Mark every cell holding the number."""
        for index, value in enumerate(self.values):
            if value == number:
                self.marked |= 1 << index

    def is_winning(self) -> bool:
        """True when a full row or column is marked."""
        for i in range(_SIZE):
            row_mask = _ROW_MASK << (_SIZE * i)
            col_mask = _COL_MASK << i
            if self.marked & row_mask == row_mask or self.marked & col_mask == col_mask:
                return True
        return False

    def score(self) -> int:
        """Sum of the unmarked numbers."""
        return sum(v for i, v in enumerate(self.values) if not self._is_marked(i))

    def __str__(self) -> str:
        rows = []
        for row in range(_SIZE):
            cells = []
            for col in range(_SIZE):
                index = row * _SIZE + col
                cell = f"{self.values[index]:>2}"
                if self._is_marked(index):
                    cell = f"\x1b[7m{cell}\x1b[0m"
                cells.append(cell)
            rows.append(" ".join(cells))
        return "\n".join(rows)


def parse_numbers(text: str) -> list[int]:
    """Return every run of digits in the text as an integer."""
    return [int(word) for word in re.findall(r"\d+", text)]


def parse_game(text: str) -> tuple[list[int], list[Board]]:
    """Parse the drawn numbers (first line) and the boards that follow."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty bingo input")
    numbers = parse_numbers(lines[0])
    cells = parse_numbers("\n".join(lines[1:]))
    per_board = _SIZE * _SIZE
    boards = [Board(cells[i : i + per_board]) for i in range(0, len(cells), per_board)]
    return numbers, boards


def winners(
    numbers: Iterable[int], boards: Sequence[Board]
) -> Iterator[tuple[int, int, int]]:
    """Call numbers and yield (board index, number, score) as each board first wins."""
    for number in numbers:
        for index, board in enumerate(boards):
            was_winning = board.is_winning()
            board.call(number)
            if not was_winning and board.is_winning():
                yield index, number, board.score()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play bingo against a giant squid.")
    parser.add_argument("input", nargs="?", help="puzzle input file (default: stdin)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    numbers, boards = parse_game(text)
    for _, number, score in winners(numbers, boards):
        print(f"winner! {score}*{number} = {score * number}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())