import math

import pytest

from submarine.position import SCANNER_POSITIONS, Position, largest_manhattan, main


def test_parse_three_fields():
    assert Position.parse("108,-1254,-76") == Position(108, -1254, -76)


def test_parse_missing_fields_are_zero():
    assert Position.parse("5,-7") == Position(5, -7, 0)


def test_parse_ignores_extra_fields():
    assert Position.parse("1,2,3,4") == Position(1, 2, 3)


def test_parse_empty_raises():
    with pytest.raises(ValueError):
        Position.parse("")


def test_parse_garbage_raises():
    with pytest.raises(ValueError):
        Position.parse("a,b,c")


def test_default_is_origin():
    assert Position() == Position(0, 0, 0)


def test_add_and_subtract_round_trip():
    a = Position(3, -4, 5)
    b = Position(-10, 20, 7)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_distance_is_symmetric_and_zero_to_self():
    a = Position(1, 2, 3)
    b = Position(-4, 6, 0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0


def test_distance_pythagorean():
    assert Position(0, 0, 0).distance(Position(3, 4, 0)) == pytest.approx(5.0)


def test_distance_matches_sqrt_of_squares():
    a = Position(1, 1, 1)
    b = Position(2, 3, 4)
    assert a.distance(b) == pytest.approx(math.sqrt(1 + 4 + 9))


def test_manhattan_symmetric_and_zero_to_self():
    a = Position(108, -1254, -76)
    b = Position(-1155, -1259, -2)
    assert a.manhattan(b) == b.manhattan(a)
    assert a.manhattan(a) == 0


def test_manhattan_from_origin_is_sum_of_absolutes():
    p = Position(-3, 4, -5)
    assert p.manhattan(Position()) == abs(-3) + abs(4) + abs(-5)


def test_str_format():
    assert str(Position(1, 2, 3)) == "X:  1.00 Y:  2.00 Z:  3.00"


def test_describe_distance_mentions_both_points():
    a = Position(0, 0, 0)
    b = Position(3, 4, 0)
    text = a.describe_distance(b)
    assert text.startswith(f"Distance from {a} to {b} is ")
    assert text.endswith("5.00")


def test_ordering_is_lexicographic():
    points = [Position(1, 2, 3), Position(0, 9, 9), Position(1, 2, 1), Position(1, 0, 5)]
    assert sorted(points) == [
        Position(0, 9, 9),
        Position(1, 0, 5),
        Position(1, 2, 1),
        Position(1, 2, 3),
    ]


def test_largest_manhattan_empty_and_single():
    assert largest_manhattan([]) == 0
    assert largest_manhattan([Position(5, 5, 5)]) == 0


def test_largest_manhattan_is_maximum_of_pairs():
    points = list(SCANNER_POSITIONS)
    best = largest_manhattan(points)
    assert all(a.manhattan(b) <= best for a in points for b in points)
    assert any(a.manhattan(b) == best for a in points for b in points)


def test_main_builtin(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.strip() == f"Score: {largest_manhattan(SCANNER_POSITIONS)}"


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "positions.txt"
    path.write_text("0,0,0\n1,-2,3\n\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "Score: 6"


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1