"""Boat races: counting the ways to beat each record."""

from __future__ import annotations

import argparse
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Race:
    """A race's duration in milliseconds and record distance in millimetres."""

    time: int
    distance: int


def _distance(hold: int, time: int) -> int:
    return hold * (time - hold)


def _first_winning_hold(race: Race) -> int | None:
    """Return the shortest hold in 1..time-1 that beats the record, if any."""
    time, record = race.time, race.distance
    if time < 2:
        return None
    peak = time // 2
    if _distance(peak, time) <= record:
        return None
    low, high = 1, peak
    while low < high:
        middle = (low + high) // 2
        if _distance(middle, time) > record:
            high = middle
        else:
            low = middle + 1
    return low


def count_solutions(race: Race) -> int:
    """Return upper - lower + 1 for the shortest and longest winning holds.

    When no hold wins both limits are 0, so the result is 1.
    """
    lower = _first_winning_hold(race)
    if lower is None:
        return 1
    upper = race.time - lower
    return upper - lower + 1


def _values(line: str) -> list[str]:
    fields = line.split(":")
    if len(fields) < 2:
        raise ValueError(f"malformed line: {line!r}")
    return [word for word in fields[1].split(" ") if word]


def read_races(lines: Iterable[str]) -> list[Race]:
    """Read the Time and Distance lines as separate races."""
    times: list[int] = []
    distances: list[int] = []
    for line in lines:
        numbers = [int(word) for word in _values(line) if _INTEGER.fullmatch(word)]
        if "Time:" in line:
            times = numbers
        else:
            distances = numbers
    if len(distances) < len(times):
        raise ValueError("fewer distances than times")
    return [Race(time, distance) for time, distance in zip(times, distances)]


def read_single_race(lines: Iterable[str]) -> Race:
    """Read the Time and Distance lines as one race, ignoring the spaces."""
    time = 0
    distance = 0
    for line in lines:
        value = int("".join(_values(line)))
        if "Time:" in line:
            time = value
            continue
        distance = value
        break
    return Race(time, distance)


def part1(text: str) -> int:
    """Multiply together the number of ways to win each race."""
    return math.prod(count_solutions(race) for race in read_races(text.splitlines()))


def part2(text: str) -> int:
    """Count the ways to win the single long race."""
    return count_solutions(read_single_race(text.splitlines()))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Count ways to win boat races.")
    parser.add_argument("input", nargs="?", default="input1", help="puzzle input file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    args = _parse_args(argv)
    text = Path(args.input).read_text()
    try:
        first = part1(text)
    except ValueError:
        print("error executing part 1")
        first = 0
    try:
        second = part2(text)
    except ValueError:
        print("error executing part 2")
        second = 0
    print(f"Part 1 anwser is: {first}")
    print(f"Part 2 anwser is: {second}")


if __name__ == "__main__":
    main()