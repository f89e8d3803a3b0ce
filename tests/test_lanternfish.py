import pytest

from submarine.lanternfish import (
    age_counts,
    fish_count,
    main,
    parse_ages,
    tick,
)

EXAMPLE = [3, 4, 3, 1, 2]


def test_parse_ages():
    assert parse_ages("3,4,3,1,2\n") == EXAMPLE


def test_parse_empty():
    assert parse_ages("") == []


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_ages("3,x,1\n")


def test_age_counts():
    assert age_counts(EXAMPLE) == [0, 1, 1, 2, 1, 0, 0, 0, 0]


@pytest.mark.parametrize("age", [-1, 9])
def test_age_out_of_range(age):
    with pytest.raises(ValueError):
        age_counts([age])


def test_tick_shifts_without_spawning():
    assert tick([0, 1, 2, 3, 4, 5, 6, 7, 8]) == [1, 2, 3, 4, 5, 6, 7, 8, 0]


def test_tick_spawns_and_resets():
    assert tick([1, 0, 0, 0, 0, 0, 0, 0, 0]) == [0, 0, 0, 0, 0, 0, 1, 0, 1]


def test_tick_grows_by_spawning_fish():
    counts = [2, 0, 1, 0, 3, 0, 0, 4, 1]
    assert sum(tick(counts)) == sum(counts) + counts[0]


def test_tick_does_not_mutate():
    counts = [1, 0, 0, 0, 0, 0, 0, 0, 0]
    tick(counts)
    assert counts == [1, 0, 0, 0, 0, 0, 0, 0, 0]


def test_tick_wrong_length():
    with pytest.raises(ValueError):
        tick([0, 1, 2])


def test_zero_days_keeps_population():
    assert fish_count(EXAMPLE, 0) == len(EXAMPLE)


def test_population_never_shrinks():
    counts = [fish_count(EXAMPLE, day) for day in range(30)]
    assert counts == sorted(counts)


def test_fish_grow_independently():
    assert fish_count(EXAMPLE, 40) == sum(fish_count([age], 40) for age in EXAMPLE)


def test_example_eighty_days():
    assert fish_count(EXAMPLE, 80) == 5934


def test_negative_days():
    with pytest.raises(ValueError):
        fish_count(EXAMPLE, -1)


def test_main_prints_count(tmp_path, capsys):
    path = tmp_path / "fish.txt"
    path.write_text("3,4,3,1,2\n")
    assert main([str(path), "--days", "0"]) == 0
    assert f"Count: {len(EXAMPLE)}" in capsys.readouterr().out


def test_main_default_days(tmp_path, capsys):
    path = tmp_path / "fish.txt"
    path.write_text("3,4,3,1,2\n")
    assert main([str(path)]) == 0
    assert f"Count: {fish_count(EXAMPLE, 80)}" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1