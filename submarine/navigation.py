"""Steering the submarine with forward, up and down commands."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Command:
    """A single course instruction such as ``forward 5``."""

    direction: str
    amount: int


def parse_commands(text: str) -> list[Command]:
    """Parse lines of ``<direction> <amount>``; blank lines are skipped."""
    commands = []
    for number, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2:
            raise ValueError(f"line {number}: missing amount: {line!r}")
        try:
            amount = int(parts[-1])
        except ValueError:
            raise ValueError(f"line {number}: bad amount: {line!r}") from None
        commands.append(Command(parts[0], amount))
    return commands


def navigate(commands: Iterable[Command]) -> tuple[int, int]:
    """Follow commands directly; return (horizontal, depth).

    Unknown directions are ignored.
    """
    horizontal = depth = 0
    for command in commands:
        match command.direction:
            case "forward":
                horizontal += command.amount
            case "up":
                depth -= command.amount
            case "down":
                depth += command.amount
    return horizontal, depth


def navigate_with_aim(commands: Iterable[Command]) -> tuple[int, int]:
    """Follow commands where up and down change the aim; return (horizontal, depth).

    Unknown directions are ignored.
    """
    horizontal = depth = aim = 0
    for command in commands:
        match command.direction:
            case "forward":
                horizontal += command.amount
                depth += aim * command.amount
            case "up":
                aim -= command.amount
            case "down":
                aim += command.amount
    return horizontal, depth


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="navigation", description="Work out where the submarine ends up."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument(
        "--aim", action="store_true", help="interpret up and down as changes of aim"
    )
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        commands = parse_commands(text)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    steer = navigate_with_aim if args.aim else navigate
    horizontal, depth = steer(commands)
    print(f"Horizontal: {horizontal} Depth: {depth}")
    print(f"Answer: {horizontal * depth}")
    return 0