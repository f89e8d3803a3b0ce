"""Cave systems: caves and the passages that connect them."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Cave:
    """A cave; big caves have upper-case names and may be entered repeatedly."""

    name: str
    connections: list[str] = field(default_factory=list)
    entered: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("a cave needs a name")

    @property
    def small(self) -> bool:
        return not self.name[0].isupper()

    def connect(self, other: str) -> None:
        """Record a passage to the named cave."""
        self.connections.append(other)

    def can_enter(self) -> bool:
        """Small caves may be entered only once; big caves any number of times."""
        return not (self.small and self.entered)


def parse_caves(text: str) -> dict[str, Cave]:
    """Parse ``a-b`` passage lines into caves keyed by name, in first-seen order."""
    caves: dict[str, Cave] = {}
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        ends = line.split("-")
        if len(ends) != 2 or not all(ends):
            raise ValueError(f"line {number}: not a passage: {line!r}")
        first, second = ends
        caves.setdefault(first, Cave(first)).connect(second)
        caves.setdefault(second, Cave(second)).connect(first)
    return caves


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="caves", description="Read a cave system's passages."
    )
    parser.add_argument("path", nargs="?", default="sample.txt")
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        caves = parse_caves(text)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    for cave in caves.values():
        kind = "small" if cave.small else "big"
        print(f"{cave.name} ({kind}): {', '.join(cave.connections)}")
    return 0