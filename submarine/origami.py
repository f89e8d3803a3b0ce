"""Transparent origami: reading the dot sheet and its fold instructions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

Dot = tuple[int, int]


class Axis(Enum):
    """The line a fold runs along."""

    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Fold:
    """A fold instruction such as ``fold along y=7``."""

    axis: Axis
    position: int


def _parse_fold(line: str, number: int) -> Fold:
    head, sep, value = line.partition("=")
    if not sep or not head:
        raise ValueError(f"line {number}: not a fold: {line!r}")
    try:
        axis = Axis(head[-1])
        position = int(value)
    except ValueError:
        raise ValueError(f"line {number}: not a fold: {line!r}") from None
    return Fold(axis, position)


def _parse_dot(line: str, number: int) -> Dot:
    x, sep, y = line.partition(",")
    if not sep:
        raise ValueError(f"line {number}: not a dot: {line!r}")
    try:
        return int(x), int(y)
    except ValueError:
        raise ValueError(f"line {number}: not a dot: {line!r}") from None


def parse_manual(text: str) -> tuple[set[Dot], list[Fold]]:
    """Parse ``x,y`` dots and ``fold along`` lines; blank lines are skipped."""
    dots: set[Dot] = set()
    folds: list[Fold] = []
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("f"):
            folds.append(_parse_fold(line, number))
        else:
            dots.add(_parse_dot(line, number))
    return dots, folds


def render(
    dots: Iterable[Dot], width: int | None = None, height: int | None = None
) -> str:
    """Draw the sheet, two characters per cell; '#' marks a dot.

    Width and height default to just fit the dots.
    """
    marked = set(dots)
    if width is None:
        width = max((x for x, _ in marked), default=-1) + 1
    if height is None:
        height = max((y for _, y in marked), default=-1) + 1
    for x, y in marked:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"dot {x},{y} lies outside a {width}x{height} sheet")
    header = "  " + "".join(f"{x:2}" for x in range(width))
    rows = [
        f"{y:2}"
        + "".join(f"{'#' if (x, y) in marked else '.':>2}" for x in range(width))
        for y in range(height)
    ]
    return "\n".join([header, *rows])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="origami", description="Show the dots of a transparent origami sheet."
    )
    parser.add_argument("path", nargs="?", default="sample.txt")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        dots, folds = parse_manual(text)
        picture = render(dots, args.width, args.height)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    for fold in folds:
        print(f"Fold along {fold.axis.value}={fold.position}")
    print(picture)
    return 0