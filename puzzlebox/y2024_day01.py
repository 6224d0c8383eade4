"""Historian hysteria: comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from puzzlebox.y2022_day01 import _INTEGER, _input_path


def _number(word: str) -> int:
    return int(word) if _INTEGER.fullmatch(word) else 0


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split lines such as '3,4' into a left and a right list of numbers.

    Words that are not integers count as 0.
    """
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        words = line.split(",")
        if len(words) < 2:
            raise ValueError(f"malformed line: {line!r}")
        left.append(_number(words[0]))
        right.append(_number(words[1]))
    return left, right


def total_distance(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum the distances between the lists' numbers paired off in sorted order."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum each left number times how often it occurs in the right list."""
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    path = _input_path(argv, "Compare location id lists.", "part_one")
    left, right = parse_lists(path.read_text())
    for number, solve in enumerate((total_distance, similarity), start=1):
        print(f"The result for day 1 part {number} is: {solve(left, right)}")


if __name__ == "__main__":
    main()