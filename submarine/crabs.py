"""Aligning crab submarines at the cheapest horizontal position."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

CostFunction = Callable[[Sequence[int], int], int]


def parse_positions(text: str) -> list[int]:
    """Parse the comma separated positions on the first line."""
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        return []
    try:
        return [int(item) for item in lines[0].split(",")]
    except ValueError:
        raise ValueError(f"bad crab positions: {lines[0]!r}") from None


def linear_cost(positions: Iterable[int], target: int) -> int:
    """Fuel when each step costs one unit."""
    return sum(abs(position - target) for position in positions)


def triangular_cost(positions: Iterable[int], target: int) -> int:
    """Fuel when each further step costs one unit more than the last."""
    return sum(
        distance * (distance + 1) // 2
        for distance in (abs(position - target) for position in positions)
    )


def best_alignment(
    positions: Iterable[int], cost: CostFunction = linear_cost
) -> tuple[int, int]:
    """Return (position, fuel) of the cheapest target between the extremes.

    On a tie the lowest position wins.
    """
    crabs = list(positions)
    if not crabs:
        raise ValueError("no crab positions")
    return min(
        ((target, cost(crabs, target)) for target in range(min(crabs), max(crabs) + 1)),
        key=lambda candidate: candidate[1],
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="crabs", description="Find the cheapest crab alignment."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1 for constant step cost, 2 for increasing step cost",
    )
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    cost = linear_cost if args.part == 1 else triangular_cost
    try:
        position, fuel = best_alignment(parse_positions(text), cost)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"Pos: {position} Fuel Cost: {fuel}")
    return 0