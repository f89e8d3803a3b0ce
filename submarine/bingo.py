"""Bingo against the giant squid: finding the first and last winning boards."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Container, Iterable, Iterator, Sequence
from itertools import groupby
from pathlib import Path

BOARD_SIZE = 5


class Board:
    """A 5x5 bingo board; the called numbers are supplied by the caller."""

    __slots__ = ("rows",)

    def __init__(self, numbers: Iterable[int]) -> None:
        values = list(numbers)
        if len(values) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"a board needs {BOARD_SIZE * BOARD_SIZE} numbers, got {len(values)}"
            )
        self.rows: tuple[tuple[int, ...], ...] = tuple(
            tuple(values[start : start + BOARD_SIZE])
            for start in range(0, len(values), BOARD_SIZE)
        )

    def __repr__(self) -> str:
        return f"Board({[n for row in self.rows for n in row]!r})"

    @property
    def columns(self) -> tuple[tuple[int, ...], ...]:
        return tuple(zip(*self.rows))

    def wins(self, called: Container[int]) -> bool:
        """True when every number of some row or column has been called."""
        return any(
            all(number in called for number in line)
            for line in (*self.rows, *self.columns)
        )

    def unmarked_sum(self, called: Container[int]) -> int:
        """Sum of the numbers on the board that have not been called."""
        return sum(number for row in self.rows for number in row if number not in called)

    def render(self) -> str:
        """The board as text, three characters per number."""
        return "\n".join("".join(f"{number:3}" for number in row) for row in self.rows)


def parse_bingo(text: str) -> tuple[list[int], list[Board]]:
    """Parse the draw order line followed by blank-separated boards."""
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("missing draw order")
    try:
        draws = [int(item) for item in lines[0].split(",")]
    except ValueError:
        raise ValueError(f"bad draw order: {lines[0]!r}") from None

    boards = []
    for filled, block in groupby(lines[1:], key=lambda line: bool(line.strip())):
        if not filled:
            continue
        block_lines = list(block)
        try:
            numbers = [int(token) for line in block_lines for token in line.split()]
        except ValueError:
            raise ValueError(f"bad board: {block_lines!r}") from None
        boards.append(Board(numbers))
    return draws, boards


def _winners(
    draws: Iterable[int], boards: Iterable[Board]
) -> Iterator[tuple[Board, int, frozenset[int]]]:
    """Yield (board, last draw, called numbers) in the order boards win."""
    remaining = list(boards)
    called: set[int] = set()
    for draw in draws:
        if not remaining:
            return
        called.add(draw)
        marked = frozenset(called)
        still_playing = []
        for board in remaining:
            if board.wins(marked):
                yield board, draw, marked
            else:
                still_playing.append(board)
        remaining = still_playing


def _first(draws: Iterable[int], boards: Sequence[Board]):
    result = next(_winners(draws, boards), None)
    if result is None:
        raise ValueError("no board wins")
    return result


def _last(draws: Iterable[int], boards: Sequence[Board]):
    result = None
    for result in _winners(draws, boards):
        pass
    if result is None:
        raise ValueError("no board wins")
    return result


def first_winner_score(draws: Iterable[int], boards: Sequence[Board]) -> int:
    """Score of the first board to win: unmarked sum times the winning draw."""
    board, draw, called = _first(draws, boards)
    return board.unmarked_sum(called) * draw


def last_winner_score(draws: Iterable[int], boards: Sequence[Board]) -> int:
    """Score of the board that wins last."""
    board, draw, called = _last(draws, boards)
    return board.unmarked_sum(called) * draw


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bingo", description="Play bingo with a squid.")
    parser.add_argument("path", nargs="?", default="input.txt")
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1 for the first winning board, 2 for the last",
    )
    args = parser.parse_args(argv)

    try:
        text = Path(args.path).read_text()
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1

    try:
        draws, boards = parse_bingo(text)
        pick = _first if args.part == 1 else _last
        board, draw, called = pick(draws, boards)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    unmarked = board.unmarked_sum(called)
    print(board.render())
    print(f"Last Draw: {draw} Sum: {unmarked}")
    print(f"Answer: {draw * unmarked}")
    return 0