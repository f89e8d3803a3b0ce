"""Beacon scanners: aligning overlapping scanner reports into one map."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import product
from pathlib import Path

from submarine.position import Position

MIN_MATCHES = 12
ROTATION_COUNT = 24


def rotations(position: Position) -> tuple[Position, ...]:
    """The 24 orientations of a position; the first is the position itself."""
    x, y, z = position.x, position.y, position.z
    return (
        Position(x, y, z),
        Position(x, -y, -z),
        Position(-x, -y, z),
        Position(-x, y, -z),
        Position(x, -z, y),
        Position(x, z, -y),
        Position(-x, -z, -y),
        Position(-x, z, y),
        Position(y, x, -z),
        Position(y, -x, z),
        Position(-y, x, z),
        Position(-y, -x, -z),
        Position(y, z, x),
        Position(y, -z, -x),
        Position(-y, -z, x),
        Position(-y, z, -x),
        Position(z, x, y),
        Position(z, -x, -y),
        Position(-z, x, -y),
        Position(-z, -x, y),
        Position(z, y, -x),
        Position(z, -y, x),
        Position(-z, y, x),
        Position(-z, -y, -x),
    )


class Scanner:
    """A scanner's beacon report, with the orientation and location found for it."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.location = Position(0, 0, 0)
        self.rotation = 0
        self.found = False
        self._frames: list[list[Position]] = [[] for _ in range(ROTATION_COUNT)]
        self.distances: list[float] = []

    def __repr__(self) -> str:
        return f"Scanner({self.name!r})"

    def __str__(self) -> str:
        return (
            f"Scanner: {self.name} with {len(self._frames[0])} Beacons at "
            f"{self.location} and Rotation: {self.rotation}"
        )

    def add_beacon(self, position: Position | str) -> None:
        """Record a beacon seen at a position relative to the scanner."""
        if isinstance(position, str):
            position = Position.parse(position)
        for frame, rotated in zip(self._frames, rotations(position)):
            frame.append(rotated)
        raw = self._frames[0]
        self.distances = sorted({a.distance(b) for a, b in product(raw, raw)})[1:]

    def beacons(self) -> list[Position]:
        """Beacon positions in the current orientation, moved by the location."""
        return [self.location + p for p in self._frames[self.rotation]]

    def beacon_at(self, position: Position) -> bool:
        """True when a beacon lies at the given (placed) position."""
        return position in self.beacons()

    def _frame_at_distance(self, distance: float) -> list[Position]:
        frame = self._frames[self.rotation]
        return [a for a, b in product(frame, frame) if a.distance(b) == distance]

    def beacons_at_distance(self, distance: float) -> list[Position]:
        """Placed beacons that have another beacon at exactly this distance."""
        placed = self.beacons()
        return sorted(
            {a for a, b in product(placed, placed) if a.distance(b) == distance}
        )

    def contains_distance(self, distance: float) -> bool:
        """True when two of the beacons lie this far apart."""
        return distance in self.distances

    def same_distance_count(self, other: Scanner) -> int:
        """How many of this scanner's beacon distances the other scanner shares."""
        theirs = set(other.distances)
        return sum(1 for distance in self.distances if distance in theirs)

    def common_position_count(self, other: Scanner) -> int:
        """How many placed beacons coincide with beacons of the other scanner."""
        theirs = set(other.beacons())
        return sum(1 for p in self.beacons() if p in theirs)

    def locate(self, known: Scanner) -> bool:
        """Find an orientation and location that overlap ``known``.

        On success the scanner keeps the new orientation and location and is
        marked found; otherwise it is left as it was.
        """
        start_location, start_rotation = self.location, self.rotation
        theirs = set(known.beacons())
        for distance in self.distances:
            if not known.contains_distance(distance):
                continue
            for anchor in known.beacons_at_distance(distance):
                for rotation in range(ROTATION_COUNT):
                    self.rotation = rotation
                    for candidate in self._frame_at_distance(distance):
                        self.location = anchor - candidate
                        matches = sum(1 for p in self.beacons() if p in theirs)
                        if matches >= MIN_MATCHES:
                            self.found = True
                            return True
        self.location, self.rotation = start_location, start_rotation
        return False


def parse_scanners(text: str) -> list[Scanner]:
    """Parse ``--- scanner N ---`` blocks of ``x,y,z`` lines."""
    scanners: list[Scanner] = []
    current: Scanner | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("---"):
            current = Scanner(line)
            scanners.append(current)
        elif not line:
            current = None
        elif current is not None:
            current.add_beacon(line)
    return scanners


def assemble(scanners: Sequence[Scanner]) -> list[Position]:
    """Place every scanner relative to the first; return all distinct beacons, sorted."""
    if not scanners:
        return []
    scanners[0].found = True
    while not all(scanner.found for scanner in scanners):
        progress = False
        for known in scanners:
            if not known.found:
                continue
            for scanner in scanners:
                if scanner.found:
                    continue
                if scanner.same_distance_count(known) < MIN_MATCHES * 3:
                    continue
                if scanner.locate(known):
                    progress = True
        if not progress:
            missing = ", ".join(s.name for s in scanners if not s.found)
            raise ValueError(f"cannot place scanners: {missing}")
    return sorted({p for scanner in scanners for p in scanner.beacons()})


def format_beacons(positions: Iterable[Position]) -> str:
    """One numbered line per beacon."""
    return "".join(
        f"Beacon: {count:4}  |  X: {p.x:5}, Y: {p.y:5}, Z: {p.z:5}\n"
        for count, p in enumerate(positions, start=1)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="beacons", description="Assemble a beacon map from scanner reports."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        beacons = assemble(parse_scanners(text))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(format_beacons(beacons))
    print(f"{len(beacons)} Beacons Found.")
    return 0