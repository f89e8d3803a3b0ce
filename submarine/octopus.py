"""Dumbo octopus energy levels and their cascading flashes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

Point = tuple[int, int]
FLASH_LEVEL = 9
COLUMN_WIDTH = 3


class OctopusGrid:
    """A grid of octopus energy levels 0-9, addressed by (row, column)."""

    def __init__(self, levels: Iterable[Iterable[int]]) -> None:
        rows = [list(row) for row in levels]
        if not rows or not rows[0]:
            raise ValueError("empty octopus grid")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("rows have different lengths")
        self._levels = rows
        self.flashed: set[Point] = set()
        self.flash_count = 0
        self.steps = 0

    @classmethod
    def from_text(cls, text: str) -> OctopusGrid:
        """Parse one row of digits per line; blank lines are skipped."""
        rows = []
        for number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            if not line.isdigit():
                raise ValueError(f"line {number}: not a row of digits: {line!r}")
            rows.append([int(char) for char in line])
        return cls(rows)

    @property
    def levels(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._levels)

    def _points(self) -> Iterator[Point]:
        for row, values in enumerate(self._levels):
            for column in range(len(values)):
                yield row, column

    def _neighbours(self, point: Point) -> Iterator[Point]:
        row, column = point
        height, width = len(self._levels), len(self._levels[0])
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                r, c = row + dr, column + dc
                if (dr or dc) and 0 <= r < height and 0 <= c < width:
                    yield r, c

    def step(self) -> int:
        """Advance one step and return the number of octopuses that flashed."""
        for row, column in self._points():
            self._levels[row][column] += 1
        pending = [p for p in self._points() if self._levels[p[0]][p[1]] > FLASH_LEVEL]
        flashed: set[Point] = set()
        while pending:
            point = pending.pop()
            if point in flashed:
                continue
            flashed.add(point)
            for r, c in self._neighbours(point):
                if (r, c) in flashed:
                    continue
                self._levels[r][c] += 1
                if self._levels[r][c] > FLASH_LEVEL:
                    pending.append((r, c))
        for row, column in flashed:
            self._levels[row][column] = 0
        self.flashed = flashed
        self.flash_count += len(flashed)
        self.steps += 1
        return len(flashed)

    def all_flashed(self) -> bool:
        """True when every octopus flashed during the last step."""
        return len(self.flashed) == sum(len(row) for row in self._levels)

    def first_synchronized_step(self) -> int:
        """Step until every octopus flashes at once; return that step's number."""
        while True:
            self.step()
            if self.all_flashed():
                return self.steps

    def render(self) -> str:
        """The grid with row and column indices, three characters per cell."""
        width = len(self._levels[0])
        header = " " * COLUMN_WIDTH + "".join(
            f"{column:{COLUMN_WIDTH}}" for column in range(width)
        )
        rows = [
            f"{index:{COLUMN_WIDTH}}"
            + "".join(f"{value:{COLUMN_WIDTH}}" for value in values)
            for index, values in enumerate(self._levels)
        ]
        return "\n".join([header, *rows])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="octopus", description="Find when all octopuses flash together."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        grid = OctopusGrid.from_text(text)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(grid.render())
    print(f"Flashes: {grid.flash_count}\n")
    step = grid.first_synchronized_step()
    print(f"Step: {step}")
    print(grid.render())
    print(f"Flashes: {grid.flash_count}")
    return 0