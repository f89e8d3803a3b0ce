"""Smoke basins: low points and basins of a cave height map."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from math import prod
from pathlib import Path

Point = tuple[int, int]
WALL = 9


@dataclass(frozen=True)
class HeightMap:
    """A grid of heights 0-9 addressed by (row, column)."""

    heights: tuple[tuple[int, ...], ...]

    @classmethod
    def from_text(cls, text: str) -> HeightMap:
        """Parse one row of digits per line; blank lines are skipped."""
        rows = []
        for number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            if not line.isdigit():
                raise ValueError(f"line {number}: not a row of digits: {line!r}")
            rows.append(tuple(int(char) for char in line))
        if not rows:
            raise ValueError("empty height map")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("rows have different lengths")
        return cls(tuple(rows))

    def __getitem__(self, point: Point) -> int:
        row, column = point
        if not (0 <= row < len(self.heights) and 0 <= column < len(self.heights[0])):
            raise IndexError(f"point outside the map: {point}")
        return self.heights[row][column]

    def _points(self) -> Iterator[Point]:
        for row, values in enumerate(self.heights):
            for column in range(len(values)):
                yield row, column

    def _neighbours(self, point: Point) -> Iterator[Point]:
        row, column = point
        for neighbour in (
            (row - 1, column),
            (row + 1, column),
            (row, column - 1),
            (row, column + 1),
        ):
            r, c = neighbour
            if 0 <= r < len(self.heights) and 0 <= c < len(self.heights[0]):
                yield neighbour

    def low_points(self) -> list[Point]:
        """Points strictly lower than every neighbour, in row order."""
        return [
            point
            for point in self._points()
            if all(self[point] < self[n] for n in self._neighbours(point))
        ]

    def risk_sum(self) -> int:
        """Sum of one plus the height of every low point."""
        return sum(self[point] + 1 for point in self.low_points())

    def _flood(self, start: Point, blocked: set[Point]) -> set[Point]:
        basin = {start}
        stack = [start]
        while stack:
            for neighbour in self._neighbours(stack.pop()):
                if (
                    neighbour not in basin
                    and neighbour not in blocked
                    and self[neighbour] < WALL
                ):
                    basin.add(neighbour)
                    stack.append(neighbour)
        return basin

    def basin(self, start: Point) -> set[Point]:
        """All points connected to ``start`` without crossing height 9."""
        if self[start] >= WALL:
            raise ValueError(f"point {start} is a basin wall")
        return self._flood(start, set())

    def basin_sizes(self) -> list[int]:
        """Size of the basin around each low point, in low point order.

        A basin never takes cells already claimed by an earlier basin or
        another low point.
        """
        lows = self.low_points()
        claimed = set(lows)
        sizes = []
        for low in lows:
            region = self._flood(low, claimed - {low})
            claimed |= region
            sizes.append(len(region))
        return sizes

    def basin_product(self) -> int:
        """Product of the sizes of the three largest basins."""
        sizes = sorted(self.basin_sizes(), reverse=True)
        if len(sizes) < 3:
            raise ValueError("fewer than three basins")
        return prod(sizes[:3])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="heightmap", description="Find low points and basins in a height map."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1 for the risk sum, 2 for the basin product",
    )
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        heights = HeightMap.from_text(text)
        if args.part == 1:
            lows = heights.low_points()
            print(f"Count: {len(lows)} Sum: {heights.risk_sum()}")
        else:
            print(f"Answer: {heights.basin_product()}")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0