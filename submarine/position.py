"""Points in three-dimensional space, as reported by beacon scanners."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path

DISPLAY_PRECISION = 2
_FIELD_WIDTH = DISPLAY_PRECISION + 3


@dataclass(frozen=True, order=True)
class Position:
    """A point (x, y, z); positions order by x, then y, then z."""

    x: float = 0
    y: float = 0
    z: float = 0

    @classmethod
    def parse(cls, text: str) -> Position:
        """Parse ``x,y,z``; missing trailing fields are zero, extra ones ignored."""
        if not text.strip():
            raise ValueError("empty position")
        fields = text.strip().split(",")[:3]
        try:
            values = [int(field) for field in fields]
        except ValueError:
            raise ValueError(f"not a position: {text!r}") from None
        return cls(*values)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y, self.z - other.z)

    def __str__(self) -> str:
        return (
            f"X: {self.x:{_FIELD_WIDTH}.{DISPLAY_PRECISION}f}"
            f" Y: {self.y:{_FIELD_WIDTH}.{DISPLAY_PRECISION}f}"
            f" Z: {self.z:{_FIELD_WIDTH}.{DISPLAY_PRECISION}f}"
        )

    def distance(self, other: Position) -> float:
        """Straight-line distance to another position."""
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def manhattan(self, other: Position) -> float:
        """Sum of the absolute coordinate differences to another position."""
        delta = self - other
        return abs(delta.x) + abs(delta.y) + abs(delta.z)

    def describe_distance(self, other: Position) -> str:
        """A sentence giving the distance between two positions."""
        return (
            f"Distance from {self} to {other} is "
            f"{self.distance(other):.{DISPLAY_PRECISION}f}"
        )


def largest_manhattan(positions: Iterable[Position]) -> float:
    """Largest Manhattan distance between any two of the positions (0 if none)."""
    return max(
        (first.manhattan(second) for first, second in combinations(list(positions), 2)),
        default=0,
    )


SCANNER_POSITIONS = (
    Position(108, -1254, -76),
    Position(-1155, -1259, -2),
    Position(101, -1192, -1169),
    Position(41, -1150, 1244),
    Position(-1007, -1211, 1138),
    Position(94, -1150, -2517),
    Position(84, -1142, 2403),
    Position(-2255, -1123, -11),
    Position(1222, -1292, 1106),
    Position(42, -84, 1161),
    Position(59, 1202, 1119),
    Position(1248, -92, 1150),
    Position(1226, 1228, 1133),
    Position(1337, -2482, 1108),
    Position(1380, -1177, 2341),
    Position(147, -2303, -2414),
    Position(2528, -2466, 1184),
    Position(63, -2422, 2442),
    Position(3650, -2428, 1199),
    Position(2512, -32, 1212),
    Position(1386, 1215, 23),
    Position(1359, -2363, 2386),
    Position(1219, 2450, 1192),
    Position(3788, -1230, 1220),
    Position(1274, 2314, -144),
    Position(1316, 3662, 1082),
    Position(0, 0, 0),
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="position",
        description="Find the largest Manhattan distance between scanners.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="file of x,y,z lines (default: the built-in scanner positions)",
    )
    args = parser.parse_args(argv)

    if args.path is None:
        positions = list(SCANNER_POSITIONS)
    else:
        try:
            text = Path(args.path).read_text()
        except OSError:
            print("Unable to open file", file=sys.stderr)
            return 1
        try:
            positions = [
                Position.parse(line) for line in text.splitlines() if line.strip()
            ]
        except ValueError as error:
            print(error, file=sys.stderr)
            return 1

    print(f"Score: {largest_manhattan(positions)}")
    return 0