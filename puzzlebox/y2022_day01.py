"""Calorie counting: totals of the snack groups carried by elves.

Also holds the small command-line helpers shared by the other puzzles.
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Iterable
from pathlib import Path

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _input_path(argv: list[str] | None, description: str, default: str = "input") -> Path:
    """Parse the command line of a puzzle that reads one input file."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default=default, help="puzzle input file")
    return Path(parser.parse_args(argv).input)


def _report(
    tasks: Iterable[Callable[[], object]],
    *,
    interleaved: bool = False,
    errors: tuple[type[BaseException], ...] = (ValueError,),
) -> None:
    """Run each part and print its answer.

    A part that raises one of ``errors`` prints an error line and answers 0.
    Answers are printed after each part when ``interleaved``, else at the end.
    """
    pending = []
    for number, task in enumerate(tasks, start=1):
        try:
            answer = task()
        except errors:
            print(f"error executing part {number}")
            answer = 0
        if interleaved:
            print(f"Part {number} anwser is: {answer}")
        else:
            pending.append(answer)
    for number, answer in enumerate(pending, start=1):
        print(f"Part {number} anwser is: {answer}")


def _calories(line: str) -> int:
    if not _INTEGER.fullmatch(line):
        raise ValueError("invalid calorie value")
    return int(line)


def part1(text: str) -> int:
    """Return the calorie total of the group that follows the last blank line."""
    current = 0
    for line in text.splitlines():
        current = 0 if not line else current + _calories(line)
    return current


def part2(text: str) -> int:
    """Sum three slots filled as groups close.

    A group closed by a blank line replaces the first slot it exceeds.
    A group still open at the end of the text is not counted.
    """
    slots = [0, 0, 0]
    current = 0
    for line in text.splitlines():
        if line:
            current += _calories(line)
            continue
        for index, best in enumerate(slots):
            if current > best:
                slots[index] = current
                break
        current = 0
    return sum(slots)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    text = _input_path(argv, "Count elf calories.").read_text()
    _report([lambda: part1(text), lambda: part2(text)])


if __name__ == "__main__":
    main()