"""Lanternfish population growth tracked by timer counts."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

TIMER_STATES = 9
RESET_TIMER = 6


def parse_ages(text: str) -> list[int]:
    """Parse the comma separated timers on the first line."""
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        return []
    try:
        return [int(item) for item in lines[0].split(",")]
    except ValueError:
        raise ValueError(f"bad fish timers: {lines[0]!r}") from None


def age_counts(ages: Iterable[int]) -> list[int]:
    """Count fish per timer value (0 to 8)."""
    counts = [0] * TIMER_STATES
    for age in ages:
        if not 0 <= age < TIMER_STATES:
            raise ValueError(f"timer out of range: {age}")
        counts[age] += 1
    return counts


def tick(counts: Sequence[int]) -> list[int]:
    """Advance the population by one day and return the new counts."""
    if len(counts) != TIMER_STATES:
        raise ValueError(f"expected {TIMER_STATES} counts, got {len(counts)}")
    spawning = counts[0]
    advanced = [*counts[1:], spawning]
    advanced[RESET_TIMER] += spawning
    return advanced


def fish_count(ages: Iterable[int], days: int) -> int:
    """Number of fish after the given number of days."""
    if days < 0:
        raise ValueError("days must not be negative")
    counts = age_counts(ages)
    for _ in range(days):
        counts = tick(counts)
    return sum(counts)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lanternfish", description="Simulate a lanternfish school."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--days", type=int, default=80)
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        count = fish_count(parse_ages(text), args.days)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"Count: {count}")
    return 0