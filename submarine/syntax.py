"""Navigation subsystem syntax checking: corrupted and incomplete chunk lines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
COMPLETION_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}
_CLOSERS = frozenset(PAIRS.values())


class SyntaxCheckError(ValueError):
    """A line holds a character that is not a bracket, or cannot be completed."""

    def __init__(self, message: str, line: str, position: int) -> None:
        super().__init__(message)
        self.line = line
        self.position = position


def _scan(line: str) -> tuple[str | None, list[str]]:
    """Return (first illegal closer or None, stack of open chunks)."""
    stack: list[str] = []
    for position, char in enumerate(line):
        if char in PAIRS:
            stack.append(char)
        elif char in _CLOSERS:
            if stack and PAIRS[stack[-1]] == char:
                stack.pop()
            else:
                return char, stack
        else:
            raise SyntaxCheckError(
                f"unexpected character {char!r} at {position}", line, position
            )
    return None, stack


def first_illegal(line: str) -> str | None:
    """The first closing character that does not match its chunk, if any."""
    illegal, _ = _scan(line)
    return illegal


def syntax_score(line: str) -> int:
    """Error score of a line: 0 unless it is corrupted."""
    illegal = first_illegal(line)
    return 0 if illegal is None else ERROR_POINTS[illegal]


def total_syntax_score(lines: Iterable[str]) -> int:
    """Sum of the error scores of all lines."""
    return sum(syntax_score(line) for line in lines if line.strip())


def completion(line: str) -> str:
    """The closing characters that complete every open chunk of the line."""
    illegal, stack = _scan(line)
    if illegal is not None:
        position = line.index(illegal) if illegal in line else -1
        raise SyntaxCheckError(f"corrupted line, found {illegal!r}", line, position)
    return "".join(PAIRS[opener] for opener in reversed(stack))


def completion_score(closing: str) -> int:
    """Score a completion string: times five, plus the value of each character."""
    score = 0
    for char in closing:
        score = score * 5 + COMPLETION_POINTS.get(char, 0)
    return score


def middle_completion_score(lines: Iterable[str]) -> int:
    """Middle score of the completions of all incomplete (not corrupted) lines."""
    scores = sorted(
        completion_score(completion(line))
        for line in lines
        if line.strip() and first_illegal(line) is None
    )
    if not scores:
        raise ValueError("no incomplete lines")
    return scores[len(scores) // 2]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="syntax", description="Score syntax errors and completions."
    )
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1 for the syntax error score, 2 for the middle completion score",
    )
    args = parser.parse_args(argv)

    try:
        lines = Path(args.path).read_text().splitlines()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        if args.part == 1:
            count = sum(1 for line in lines if line.strip())
            print(f"Count: {count} Score: {total_syntax_score(lines)}")
        else:
            print(f"Score: {middle_completion_score(lines)}")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0