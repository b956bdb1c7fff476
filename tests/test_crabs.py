import pytest

from reefdive.crabs import (
    cheapest_target,
    fuel_to,
    linear_cost,
    main,
    median_target,
    parse_positions,
    triangular_cost,
)

EXAMPLE = [16, 1, 2, 0, 4, 2, 7, 1, 2, 14]


def test_parse_positions():
    assert parse_positions("16,1,2,0,4,2,7,1,2,14\n") == EXAMPLE


def test_example_median():
    assert median_target(EXAMPLE) == 2


def test_example_linear_fuel():
    assert fuel_to(median_target(EXAMPLE), EXAMPLE, linear_cost) == 37


def test_example_triangular_fuel():
    _, fuel = cheapest_target(EXAMPLE, triangular_cost)
    assert fuel == 168


def test_median_is_cheapest_for_linear_cost():
    target, fuel = cheapest_target(EXAMPLE, linear_cost)
    assert fuel == fuel_to(median_target(EXAMPLE), EXAMPLE, linear_cost)
    assert fuel == fuel_to(target, EXAMPLE, linear_cost)


def test_cheapest_is_minimal_over_range():
    _, fuel = cheapest_target(EXAMPLE, triangular_cost)
    for target in range(min(EXAMPLE), max(EXAMPLE) + 1):
        assert fuel <= fuel_to(target, EXAMPLE, triangular_cost)


def test_triangular_cost_steps():
    assert triangular_cost(0) == 0
    for n in range(1, 20):
        assert triangular_cost(n) - triangular_cost(n - 1) == n


def test_all_at_same_place_costs_nothing():
    assert cheapest_target([5, 5, 5], triangular_cost) == (5, 0)


def test_empty_positions_raise():
    with pytest.raises(ValueError):
        median_target([])
    with pytest.raises(ValueError):
        cheapest_target([], linear_cost)


def test_main_output(tmp_path, capsys):
    path = tmp_path / "crabs.txt"
    path.write_text("16,1,2,0,4,2,7,1,2,14\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    target = median_target(EXAMPLE)
    best, fuel = cheapest_target(EXAMPLE, triangular_cost)
    assert out == [
        f"[part 1] Fuel to {target}: {fuel_to(target, EXAMPLE, linear_cost)}",
        f"[part 2] Fuel to {best}: {fuel}",
    ]