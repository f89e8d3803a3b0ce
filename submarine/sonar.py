"""Sonar sweep: counting how often depth measurements increase."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from itertools import pairwise
from pathlib import Path


def parse_depths(text: str) -> list[int]:
    """Parse one integer depth per line, skipping blank lines."""
    depths = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            depths.append(int(line))
        except ValueError:
            raise ValueError(f"line {number}: not a depth: {line!r}") from None
    return depths


def count_increases(depths: Iterable[int]) -> int:
    """Count measurements that are larger than the one before them."""
    return sum(later > earlier for earlier, later in pairwise(depths))


def count_window_increases(depths: Iterable[int], window: int = 3) -> int:
    """Count increases between sums of consecutive sliding windows."""
    if window < 1:
        raise ValueError("window must be at least 1")
    values = list(depths)
    sums = map(sum, zip(*(values[offset:] for offset in range(window))))
    return count_increases(sums)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sonar", description="Count depth increases in a sonar report."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument(
        "--window", type=int, default=1, help="size of the sliding window (default 1)"
    )
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        depths = parse_depths(text)
        total = count_window_increases(depths, args.window)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"Total: {total}")
    return 0