"""Red-nosed reports: checking that level sequences change safely."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Sequence

_INTEGER = re.compile(r"[+-]?[0-9]+")
MAX_STEP = 3


def _levels(line: str) -> list[int]:
    return [int(word) if _INTEGER.fullmatch(word) else 0 for word in line.split(" ")]


def check_levels(levels: Sequence[int]) -> tuple[bool, int]:
    """Return (True, 0) for a safe report, else (False, index of the bad level).

    A safe report moves strictly in one direction by steps of 1 to 3. A bad
    first step is reported at index 0.
    """
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    start, prev = levels[0], levels[1]
    if abs(start - prev) > MAX_STEP or start == prev:
        return False, 0
    increasing = start < prev
    for index in range(2, len(levels)):
        value = levels[index]
        if (
            prev == value
            or (increasing and prev > value)
            or (not increasing and prev < value)
            or abs(prev - value) > MAX_STEP
        ):
            return False, index
        prev = value
    return True, 0


def _without(levels: Sequence[int], index: int) -> list[int]:
    return [*levels[:index], *levels[index + 1 :]]


def _dampened_safe(levels: Sequence[int]) -> bool:
    safe, index = check_levels(levels)
    if safe:
        return True
    if index == 0:
        candidates = (index, index + 1)
    elif index == len(levels) - 1:
        candidates = (index - 1, index)
    else:
        candidates = (index - 1, index, index + 1)
    return any(check_levels(_without(levels, drop))[0] for drop in candidates)


def part1(text: str) -> int:
    """Count the safe reports."""
    return sum(1 for line in text.splitlines() if check_levels(_levels(line))[0])


def part2(text: str) -> int:
    """Count reports that are safe or become safe by dropping one level near the fault."""
    return sum(1 for line in text.splitlines() if _dampened_safe(_levels(line)))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check reactor reports.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    args = _parse_args(argv)
    text = Path(args.input).read_text()
    print(f"part 1 is: {part1(text)}")
    print(f"part 2 is: {part2(text)}")


if __name__ == "__main__":
    main()