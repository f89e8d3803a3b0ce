"""Hydrothermal vent lines and the points where they overlap."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

_LINE = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*->\s*(-?\d+)\s*,\s*(-?\d+)\s*$")

Point = tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Segment:
    """A vent line from (x1, y1) to (x2, y2), both ends included."""

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def is_straight(self) -> bool:
        return self.x1 == self.x2 or self.y1 == self.y2

    def points(self, diagonals: bool = False) -> list[Point]:
        """Points covered by the segment.

        Diagonal segments cover nothing unless ``diagonals`` is set; only
        45 degree diagonals are supported.
        """
        dx, dy = self.x2 - self.x1, self.y2 - self.y1
        if not self.is_straight:
            if not diagonals:
                return []
            if abs(dx) != abs(dy):
                raise ValueError(f"segment is not at 45 degrees: {self}")
        step_x, step_y = _sign(dx), _sign(dy)
        length = max(abs(dx), abs(dy))
        return [
            (self.x1 + step * step_x, self.y1 + step * step_y)
            for step in range(length + 1)
        ]


def parse_segments(text: str) -> list[Segment]:
    """Parse lines of ``x1,y1 -> x2,y2``; blank lines are skipped."""
    segments = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"line {number}: not a vent line: {line!r}")
        segments.append(Segment(*map(int, match.groups())))
    return segments


def cover(segments: Iterable[Segment], diagonals: bool = False) -> Counter[Point]:
    """Count how many segments cover each point."""
    counts: Counter[Point] = Counter()
    for segment in segments:
        counts.update(segment.points(diagonals))
    return counts


def count_overlaps(segments: Iterable[Segment], diagonals: bool = False) -> int:
    """Number of points covered by at least two segments."""
    return sum(1 for count in cover(segments, diagonals).values() if count > 1)


def render(counts: Mapping[Point, int], size: int = 10) -> str:
    """Draw the top-left corner of the map; rows are x, columns are y."""
    header = "  " + "".join(f"{index:2}" for index in range(size))
    rows = [
        f"{x:2}"
        + "".join(
            f"{counts.get((x, y), 0) or '.':>2}" for y in range(size)
        )
        for x in range(size)
    ]
    return "\n".join([header, *rows])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vents", description="Count overlapping hydrothermal vent lines."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument(
        "--diagonals", action="store_true", help="include 45 degree lines"
    )
    parser.add_argument(
        "--show", type=int, metavar="SIZE", help="draw the first SIZE rows and columns"
    )
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        counts = cover(parse_segments(text), args.diagonals)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    if args.show:
        print(render(counts, args.show))
    print(f"Count: {sum(1 for count in counts.values() if count > 1)}")
    return 0