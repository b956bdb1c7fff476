import io

import pytest

from reefdive.dive import (
    AimedPosition,
    Command,
    Direction,
    Position,
    follow,
    follow_with_aim,
    main,
    parse_command,
)

EXAMPLE = [
    Command(Direction.FORWARD, 5),
    Command(Direction.DOWN, 5),
    Command(Direction.FORWARD, 8),
    Command(Direction.UP, 3),
    Command(Direction.DOWN, 8),
    Command(Direction.FORWARD, 2),
]


def test_example_plain():
    end = follow(EXAMPLE)
    assert end.horizontal * end.depth == 150


def test_example_aimed():
    end = follow_with_aim(EXAMPLE)
    assert end.horizontal * end.depth == 900


def test_parse_command():
    assert parse_command("forward 5") == Command(Direction.FORWARD, 5)
    assert parse_command("  up 3\n") == Command(Direction.UP, 3)


def test_parse_unknown_direction():
    with pytest.raises(ValueError, match="unknown direction"):
        parse_command("backward 2")


def test_parse_missing_value():
    with pytest.raises(ValueError):
        parse_command("down")


def test_up_and_down_cancel():
    start = Position(3, 4)
    end = start + Command(Direction.UP, 2) + Command(Direction.DOWN, 2)
    assert end == start


def test_up_reduces_depth_only():
    start = Position(3, 4)
    end = start + Command(Direction.UP, 1)
    assert end.horizontal == start.horizontal
    assert end.depth < start.depth


def test_aim_does_not_change_depth_until_forward():
    pos = AimedPosition() + Command(Direction.DOWN, 4) + Command(Direction.UP, 1)
    assert pos.depth == 0
    assert pos.horizontal == 0
    moved = pos + Command(Direction.FORWARD, 2)
    assert moved.depth == pos.aim * 2


def test_empty_commands():
    assert follow([]) == Position(0, 0)
    assert follow_with_aim([]) == AimedPosition(0, 0, 0)


def test_main_reads_stdin(monkeypatch, capsys):
    text = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    plain = follow(EXAMPLE)
    aimed = follow_with_aim(EXAMPLE)
    assert out == [
        f"the end is {plain.horizontal * plain.depth}",
        f"the end is {aimed.horizontal * aimed.depth}",
    ]