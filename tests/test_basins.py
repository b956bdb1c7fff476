import pytest

from reefdive.basins import (
    basin_size,
    is_low_point,
    largest_basins_product,
    low_points,
    neighbours,
    parse_heightmap,
    risk_level,
)

EXAMPLE = """\
2199943210
3987894921
9856789892
8767896789
9899965678
"""


@pytest.fixture
def heightmap():
    return parse_heightmap(EXAMPLE.splitlines())


def test_parse_shape(heightmap):
    assert len(heightmap) == 5
    assert all(len(row) == 10 for row in heightmap)
    assert heightmap[0] == [int(c) for c in "2199943210"]


def test_parse_skips_blank_lines():
    assert parse_heightmap(["12", "", "34", "  "]) == parse_heightmap(["12", "34"])


def test_neighbour_counts(heightmap):
    assert len(neighbours(heightmap, 0, 0)) == 2
    assert len(neighbours(heightmap, 0, 5)) == 3
    assert len(neighbours(heightmap, 2, 2)) == 4


def test_neighbour_values(heightmap):
    around = neighbours(heightmap, 2, 2)
    expected = [heightmap[1][2], heightmap[3][2], heightmap[2][1], heightmap[2][3]]
    assert around == expected


def test_low_points_are_strictly_lowest(heightmap):
    points = low_points(heightmap)
    assert points
    for r, c in points:
        assert all(heightmap[r][c] < h for h in neighbours(heightmap, r, c))


def test_risk_level_matches_low_points(heightmap):
    points = low_points(heightmap)
    assert risk_level(heightmap) == sum(heightmap[r][c] + 1 for r, c in points)
    assert risk_level(heightmap) == 15


def test_largest_basins_product(heightmap):
    assert largest_basins_product(heightmap) == 1134


def test_basin_sizes_bounded(heightmap):
    open_cells = sum(1 for row in heightmap for h in row if h < 9)
    sizes = [basin_size(heightmap, r, c) for r, c in low_points(heightmap)]
    assert all(1 <= size <= open_cells for size in sizes)
    assert sum(sizes) <= open_cells


def test_basin_size_independent_of_start_cell(heightmap):
    r, c = low_points(heightmap)[0]
    size = basin_size(heightmap, r, c)
    for nr, nc in [(r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)]:
        if 0 <= nr < 5 and 0 <= nc < 10 and heightmap[nr][nc] < 9:
            assert basin_size(heightmap, nr, nc) == size


def test_flat_map_has_no_low_points():
    assert low_points([[5, 5], [5, 5]]) == []


def test_too_few_basins():
    with pytest.raises(ValueError):
        largest_basins_product([[1, 2], [2, 3]])


def test_single_cell_has_no_neighbours():
    with pytest.raises(ValueError):
        is_low_point([[4]], 0, 0)