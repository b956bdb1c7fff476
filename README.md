# reefdive

Solvers for a series of small undersea puzzles. Each puzzle has its own module
with plain functions and classes you can call from Python, and a command that
runs the whole puzzle from the command line. There are no dependencies beyond
the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

Each command prints its answers to standard output. Most commands take the
puzzle input file as an optional argument and read standard input when it is
left out:

```
reefdive-dive input.txt
reefdive-dive < input.txt
```

| Command                | Puzzle                                                |
|------------------------|-------------------------------------------------------|
| `reefdive-sonar`       | count depth increases, single readings and windows    |
| `reefdive-dive`        | follow steering commands, with and without aim        |
| `reefdive-diagnostic`  | power consumption and life-support ratings            |
| `reefdive-bingo`       | play bingo against the giant squid, every winner      |
| `reefdive-vents`       | count overlapping hydrothermal vent lines             |
| `reefdive-lanternfish` | school size after 80 and 256 days                     |
| `reefdive-crabs`       | align crab submarines for the least fuel              |
| `reefdive-segments`    | decode scrambled seven-segment displays               |
| `reefdive-basins`      | low points and the largest basins of a heightmap      |
| `reefdive-syntax`      | corrupted and incomplete bracket lines                |
| `reefdive-octopus`     | first synchronised flash and flashes after 100 steps  |
| `reefdive-caves`       | count paths through a cave system                     |
| `reefdive-origami`     | fold transparent paper and draw the dots              |
| `reefdive-polymer`     | grow a polymer by pair insertion, 10 and 40 steps     |
| `reefdive-chiton`      | lowest-risk path through the map and its 5x5 tiling   |
| `reefdive-packets`     | decode a binary transmission of nested packets        |
| `reefdive-trickshot`   | launch a probe into a target area                     |
| `reefdive-snailfish`   | add and reduce snailfish numbers                      |

Two commands differ:

- `reefdive-packets` reads raw bytes, not text. It prints the expression, the
  version sum and the value, or `Error: ...` and exits with status 1 when the
  data ends too early or is malformed.
- `reefdive-trickshot` does not read standard input. Given a file holding
  `target area: x=A..B, y=C..D` it uses that area; without one it uses a
  built-in area.

`reefdive-vents` also draws the diagram when it is less than 80 columns wide.

## Using the library

The same work is available as functions:

```python
from reefdive.sonar import count_increases, window_sums
from reefdive.lanternfish import parse_ages, count_after
from reefdive.snailfish import parse_number, sum_numbers

depths = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]
count_increases(depths)               # 7
count_increases(window_sums(depths))  # 5

count_after(parse_ages("3,4,3,1,2"), 80)  # 5934

total = sum_numbers([parse_number("[1,2]"), parse_number("[[3,4],5]")])
print(total, total.magnitude())
```

A few more entry points:

- `reefdive.dive.follow` and `reefdive.dive.follow_with_aim` fold a sequence of
  `Command` values into a final `Position` or `AimedPosition`;
  `parse_command` reads lines such as `forward 5`.
- `reefdive.diagnostic.power_rates`, `oxygen_rating` and `co2_rating` work on
  the values returned by `parse_report`.
- `reefdive.bingo.winners` yields `(board index, number, score)` for each board
  as it first wins, so the first and the last winner are both at hand.
- `reefdive.lanternfish.simulate_school` follows every fish one by one;
  `count_after` only counts them and handles long runs.
- `reefdive.crabs.cheapest_target` searches every target with a cost such as
  `linear_cost` or `triangular_cost`.
- `reefdive.syntax.check_line` returns a `LineCheck` with the illegal closer of
  a corrupted line or the closers that would complete it.
- `reefdive.caves.CaveGraph` offers `paths` (small caves at most once) and
  `paths_with_revisit` (one small cave may be visited twice, never the start).
- `reefdive.origami.Fold.apply` folds a set of points; `render` draws them.
- `reefdive.polymer.expand` builds the polymer step by step, while
  `element_counts` counts elements after any number of steps without building it.
- `reefdive.chiton.expand_map` tiles a risk map, and `lowest_risk` finds the
  cheapest route from the top-left to the bottom-right corner.
- `reefdive.packets.decode_packet` turns bytes into a `Packet` tree with
  `version_sum()` and `value()`; `BitReader` reads big-endian bit fields.
- `reefdive.trickshot.Area` describes a target; `highest_apex` and
  `count_velocities` answer both trick-shot questions.
- `reefdive.snailfish.largest_magnitude` finds the largest magnitude of the sum
  of any two different numbers.

## What it does not do

`reefdive.packets` works on bytes only: it does not turn a hexadecimal text
transmission into bytes, so convert it first, for example with
`bytes.fromhex(text.strip())`, before calling `decode_packet`.