import pytest

from submarine.navigation import (
    Command,
    main,
    navigate,
    navigate_with_aim,
    parse_commands,
)

EXAMPLE_TEXT = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"


def test_parse_commands():
    assert parse_commands("forward 5\n\ndown 3\n") == [
        Command("forward", 5),
        Command("down", 3),
    ]


def test_parse_rejects_bad_amount():
    with pytest.raises(ValueError):
        parse_commands("forward five\n")


def test_parse_rejects_missing_amount():
    with pytest.raises(ValueError):
        parse_commands("forward\n")


def test_down_increases_depth():
    assert navigate([Command("down", 3)]) == (0, 3)


def test_forward_moves_horizontally():
    assert navigate([Command("forward", 5)]) == (5, 0)


def test_up_cancels_down():
    assert navigate([Command("down", 4), Command("up", 4)]) == (0, 0)


def test_unknown_direction_is_ignored():
    assert navigate([Command("sideways", 4)]) == (0, 0)
    assert navigate_with_aim([Command("sideways", 4)]) == (0, 0)


def test_aim_without_forward_keeps_depth():
    assert navigate_with_aim([Command("down", 7)]) == (0, 0)


def test_aim_multiplies_forward():
    aim, distance = 4, 6
    result = navigate_with_aim([Command("down", aim), Command("forward", distance)])
    assert result == (distance, aim * distance)


def test_horizontal_position_agrees_between_modes():
    commands = parse_commands(EXAMPLE_TEXT)
    assert navigate(commands)[0] == navigate_with_aim(commands)[0]


def test_example_plain():
    assert navigate(parse_commands(EXAMPLE_TEXT)) == (15, 10)


def test_example_with_aim():
    assert navigate_with_aim(parse_commands(EXAMPLE_TEXT))[1] == 60


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "course.txt"
    path.write_text(EXAMPLE_TEXT)
    horizontal, depth = navigate(parse_commands(EXAMPLE_TEXT))
    assert main([str(path)]) == 0
    assert f"Answer: {horizontal * depth}" in capsys.readouterr().out


def test_main_with_aim(tmp_path, capsys):
    path = tmp_path / "course.txt"
    path.write_text(EXAMPLE_TEXT)
    horizontal, depth = navigate_with_aim(parse_commands(EXAMPLE_TEXT))
    assert main([str(path), "--aim"]) == 0
    assert f"Answer: {horizontal * depth}" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1