"""Binary diagnostic report: power consumption and life support ratings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from pathlib import Path


def _report(lines: Iterable[str]) -> list[str]:
    values = [line.strip() for line in lines if line.strip()]
    if not values:
        raise ValueError("empty diagnostic report")
    width = len(values[0])
    for value in values:
        if len(value) != width:
            raise ValueError(f"inconsistent width: {value!r}")
        if set(value) - {"0", "1"}:
            raise ValueError(f"not a binary number: {value!r}")
    return values


def gamma_epsilon(lines: Iterable[str]) -> tuple[int, int]:
    """Return the gamma and epsilon rates of a report.

    Each gamma bit is 1 where ones outnumber zeros in that column; epsilon
    is its complement.
    """
    values = _report(lines)
    gamma_bits = []
    for column in zip(*values):
        ones = column.count("1")
        gamma_bits.append("1" if ones > len(column) - ones else "0")
    gamma = "".join(gamma_bits)
    epsilon = "".join("0" if bit == "1" else "1" for bit in gamma)
    return int(gamma, 2), int(epsilon, 2)


def power_consumption(lines: Iterable[str]) -> int:
    """Product of the gamma and epsilon rates."""
    gamma, epsilon = gamma_epsilon(lines)
    return gamma * epsilon


def _rating(lines: Iterable[str], choose: Callable[[int, int], str]) -> int:
    values = _report(lines)
    for position in range(len(values[0])):
        if len(values) == 1:
            break
        ones = sum(value[position] == "1" for value in values)
        wanted = choose(len(values) - ones, ones)
        values = [value for value in values if value[position] == wanted]
        if not values:
            raise ValueError("no values remain after filtering")
    return int(values[0], 2)


def oxygen_rating(lines: Iterable[str]) -> int:
    """Keep the most common bit at each position, preferring 1 on a tie."""
    return _rating(lines, lambda zeros, ones: "1" if ones >= zeros else "0")


def co2_rating(lines: Iterable[str]) -> int:
    """Keep the least common bit at each position, preferring 0 on a tie."""
    return _rating(lines, lambda zeros, ones: "1" if zeros > ones else "0")


def life_support(lines: Iterable[str]) -> int:
    """Product of the oxygen generator and CO2 scrubber ratings."""
    values = list(lines)
    return oxygen_rating(values) * co2_rating(values)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="diagnostics", description="Analyse a binary diagnostic report."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        if args.part == 1:
            gamma, epsilon = gamma_epsilon(lines)
            print(f"Gamma: {gamma} Epsilon: {epsilon}")
            answer = gamma * epsilon
        else:
            oxygen, co2 = oxygen_rating(lines), co2_rating(lines)
            print(f"O2: {oxygen} CO2: {co2}")
            answer = oxygen * co2
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(f"Answer: {answer}")
    return 0