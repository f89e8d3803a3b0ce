import pytest

from submarine.octopus import OctopusGrid

SMALL = "11111\n19991\n19191\n19991\n11111\n"

LARGE = """\
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""


def _grid_text(grid):
    return "\n".join("".join(map(str, row)) for row in grid.levels)


def test_small_example_first_step():
    grid = OctopusGrid.from_text(SMALL)
    assert grid.step() == 9
    assert _grid_text(grid) == "34543\n40004\n50005\n40004\n34543"


def test_small_example_second_step():
    grid = OctopusGrid.from_text(SMALL)
    grid.step()
    assert grid.step() == 0
    assert _grid_text(grid) == "45654\n51115\n61116\n51115\n45654"


def test_flashed_cells_are_reset_to_zero():
    grid = OctopusGrid.from_text(LARGE)
    for _ in range(5):
        grid.step()
        for row, column in grid.flashed:
            assert grid.levels[row][column] == 0
        assert all(0 <= value <= 9 for row in grid.levels for value in row)


def test_flash_count_accumulates():
    grid = OctopusGrid.from_text(LARGE)
    total = sum(grid.step() for _ in range(10))
    assert grid.flash_count == total
    assert grid.steps == 10


def test_first_synchronized_step_of_large_example():
    grid = OctopusGrid.from_text(LARGE)
    assert grid.first_synchronized_step() == 195
    assert grid.all_flashed()
    assert all(value == 0 for row in grid.levels for value in row)


def test_all_nines_synchronize_immediately():
    grid = OctopusGrid([[9, 9], [9, 9]])
    assert grid.first_synchronized_step() == 1


def test_all_flashed_is_false_before_any_step():
    assert not OctopusGrid.from_text(SMALL).all_flashed()


def test_render_layout():
    grid = OctopusGrid.from_text("12\n34")
    lines = grid.render().splitlines()
    assert len(lines) == 3
    assert lines[0].split() == ["0", "1"]
    assert lines[1].split() == ["0", "1", "2"]
    assert lines[2].split() == ["1", "3", "4"]
    assert all(len(line) == 9 for line in lines)


def test_from_text_rejects_non_digits():
    with pytest.raises(ValueError):
        OctopusGrid.from_text("12\n3x")


def test_rejects_ragged_rows():
    with pytest.raises(ValueError):
        OctopusGrid.from_text("123\n45")


def test_rejects_empty_grid():
    with pytest.raises(ValueError):
        OctopusGrid.from_text("\n\n")