"""Mirage maintenance: extrapolating sequences by repeated differences."""

from __future__ import annotations

import argparse
from itertools import pairwise
from pathlib import Path
from typing import Sequence


def parse_histories(text: str) -> list[list[int]]:
    """Parse CRLF-separated lines of space-separated integers."""
    try:
        return [[int(word) for word in line.split(" ")] for line in text.split("\r\n")]
    except ValueError:
        raise ValueError("history values must be integers") from None


def _difference_rows(history: Sequence[int]) -> list[list[int]]:
    """Return the history and its differences, excluding the final all-zero row."""
    rows = []
    current = list(history)
    while any(current):
        rows.append(current)
        current = [b - a for a, b in pairwise(current)]
    return rows


def next_value(history: Sequence[int]) -> int:
    """Extrapolate the value that follows the history."""
    return sum(row[-1] for row in _difference_rows(history))


def previous_value(history: Sequence[int]) -> int:
    """Extrapolate the value that precedes the history."""
    value = 0
    for row in reversed(_difference_rows(history)):
        value = row[0] - value
    return value


def part1(text: str) -> int:
    """Sum the extrapolated next values."""
    return sum(next_value(history) for history in parse_histories(text))


def part2(text: str) -> int:
    """Sum the extrapolated previous values."""
    return sum(previous_value(history) for history in parse_histories(text))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extrapolate sensor histories.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    args = _parse_args(argv)
    text = Path(args.input).read_text(newline="")
    try:
        first = part1(text)
    except ValueError:
        print("error executing part 1")
        first = 0
    print(f"Part 1 anwser is: {first}")
    try:
        second = part2(text)
    except ValueError:
        print("error executing part 2")
        second = 0
    print(f"Part 2 anwser is: {second}")


if __name__ == "__main__":
    main()