import pytest

from reefdive.octopus import (
    first_sync_step,
    flashes_after,
    parse_grid,
    render,
    step,
)

SMALL = ["11111", "19991", "19191", "19991", "11111"]

LARGE = [
    "5483143223",
    "2745854711",
    "5264556173",
    "6141336146",
    "6357385478",
    "4167524645",
    "2176841721",
    "6882881134",
    "4846848554",
    "5283751526",
]


def test_parse_grid_skips_blank_rows():
    grid = parse_grid(["12", "", "34"])
    assert grid == [[1, 2], [3, 4]]


def test_small_example_first_step():
    grid = parse_grid(SMALL)
    flashes = step(grid)
    assert render(grid) == "34543\n40004\n50005\n40004\n34543"
    assert flashes == sum(line.count(0) for line in grid)


def test_step_flashes_match_zeros_and_levels_stay_in_range():
    grid = parse_grid(LARGE)
    for _ in range(20):
        flashes = step(grid)
        assert flashes == sum(line.count(0) for line in grid)
        assert all(0 <= value <= 9 for line in grid for value in line)


def test_all_nines_flash_together():
    grid = [[9] * 4 for _ in range(3)]
    assert step(grid) == 12
    assert grid == [[0] * 4 for _ in range(3)]


def test_step_without_flashes():
    grid = [[0, 0], [0, 0]]
    assert step(grid) == 0
    assert grid == [[1, 1], [1, 1]]


def test_flashes_after_hundred_steps():
    grid = parse_grid(LARGE)
    assert flashes_after(grid, 100) == 1656
    assert grid == parse_grid(LARGE)


def test_first_sync_step():
    grid = parse_grid(LARGE)
    number = first_sync_step(grid)
    assert number == 195
    working = parse_grid(LARGE)
    for _ in range(number):
        step(working)
    assert all(value == 0 for line in working for value in line)


def test_first_sync_step_rejects_empty_grid():
    with pytest.raises(ValueError):
        first_sync_step([])


def test_render_shows_high_levels_as_zero():
    assert render([[0, 5], [12, 9]]) == "05\n09"