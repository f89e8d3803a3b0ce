"""Seven-segment displays with scrambled wiring."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

# Output lengths counted as "easy" digits (1, 7, 4, 8) when scanning outputs.
UNIQUE_LENGTHS = frozenset({2, 3, 4, 7, 8})


def _split_entry(line: str) -> tuple[list[str], list[str]]:
    if "|" not in line:
        raise ValueError(f"missing '|' separator: {line!r}")
    patterns, _, outputs = line.partition("|")
    return patterns.split(), outputs.split()


def _entries(lines: Iterable[str]) -> Iterable[str]:
    return (line for line in lines if line.strip())


def count_unique_outputs(lines: Iterable[str]) -> int:
    """Count output words whose length identifies the digit on its own."""
    return sum(
        len(word) in UNIQUE_LENGTHS
        for line in _entries(lines)
        for word in _split_entry(line)[1]
    )


def _only(candidates: list[frozenset[str]], description: str) -> frozenset[str]:
    if len(candidates) != 1:
        raise ValueError(f"cannot identify {description}")
    return candidates[0]


def _take(
    candidates: list[frozenset[str]],
    accept: Callable[[frozenset[str]], bool],
    description: str,
) -> frozenset[str]:
    for candidate in candidates:
        if accept(candidate):
            candidates.remove(candidate)
            return candidate
    raise ValueError(f"cannot identify {description}")


def solve_wiring(patterns: Sequence[str]) -> dict[str, int]:
    """Map each signal pattern (letters sorted) to the digit it shows."""
    signals = [frozenset(pattern) for pattern in patterns]

    def of_length(length: int) -> list[frozenset[str]]:
        return [signal for signal in signals if len(signal) == length]

    one = _only(of_length(2), "digit 1")
    seven = _only(of_length(3), "digit 7")
    four = _only(of_length(4), "digit 4")
    eight = _only(of_length(7), "digit 8")

    sixes = of_length(6)
    nine = _take(sixes, lambda signal: four <= signal, "digit 9")
    zero = _take(sixes, lambda signal: seven <= signal, "digit 0")
    six = _only(sixes, "digit 6")

    fives = of_length(5)
    three = _take(fives, lambda signal: one <= signal, "digit 3")
    five = _take(fives, lambda signal: signal <= nine, "digit 5")
    two = _only(fives, "digit 2")

    digits = (zero, one, two, three, four, five, six, seven, eight, nine)
    return {"".join(sorted(signal)): digit for digit, signal in enumerate(digits)}


def decode_entry(line: str) -> int:
    """Decode the output digits of one ``patterns | outputs`` entry."""
    patterns, outputs = _split_entry(line)
    if not outputs:
        raise ValueError(f"no output digits: {line!r}")
    table = solve_wiring(patterns)
    digits = []
    for word in outputs:
        key = "".join(sorted(word))
        if key not in table:
            raise ValueError(f"unknown output pattern: {word!r}")
        digits.append(str(table[key]))
    return int("".join(digits))


def sum_outputs(lines: Iterable[str]) -> int:
    """Sum of the decoded output values of every entry."""
    return sum(decode_entry(line) for line in _entries(lines))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="segments", description="Decode scrambled seven-segment displays."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1 to count easy digits, 2 to sum decoded outputs",
    )
    args = parser.parse_args(argv)

    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        if args.part == 1:
            print(f"Count: {count_unique_outputs(lines)}")
        else:
            print(f"Sum: {sum_outputs(lines)}")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0