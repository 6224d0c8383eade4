"""Seed almanac: following seeds through a chain of range maps."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence

from puzzlebox.y2022_day01 import _input_path, _report
from puzzlebox.y2023_day04 import parse_numbers

MAX_INT = sys.maxsize

MAP_NAMES = (
    "seed-to-soil",
    "soil-to-fertilizer",
    "fertilizer-to-water",
    "water-to-light",
    "light-to-temperature",
    "temperature-to-humidity",
    "humidity-to-location",
)


@dataclass(frozen=True)
class RangeMap:
    """Maps source..source+length-1 onto destination..destination+length-1."""

    source: int
    destination: int
    length: int

    def lookup(self, value: int) -> int | None:
        """Return the mapped value, or None if value lies outside the source range."""
        if value < self.source or value >= self.source + self.length:
            return None
        return self.destination + (value - self.source)


def read_map(lines: Sequence[str], description: str) -> list[RangeMap]:
    """Read the entries under the first header containing the description."""
    for index, line in enumerate(lines):
        if description not in line:
            continue
        entries = []
        for entry in lines[index + 1 :]:
            if not entry:
                break
            numbers = parse_numbers(entry)
            if len(numbers) < 3:
                raise ValueError(f"malformed map entry: {entry!r}")
            entries.append(RangeMap(numbers[1], numbers[0], numbers[2]))
        return entries
    return []


def read_maps(lines: Sequence[str]) -> list[list[RangeMap]]:
    """Read the seven maps of the chain in order."""
    return [read_map(lines, name) for name in MAP_NAMES]


def _seed_words(line: str) -> list[str]:
    return [word for word in line.split(":")[1].split(" ") if word]


def read_seeds(lines: Sequence[str]) -> list[int]:
    """Return the seed numbers from the first 'seeds:' line."""
    for line in lines:
        if "seeds:" in line:
            return parse_numbers(" ".join(_seed_words(line)))
    return []


def read_seed_ranges(lines: Sequence[str]) -> list[range]:
    """Read the seeds lines as (start, length) pairs of seed ranges."""
    ranges = []
    for line in lines:
        if "seeds:" not in line:
            continue
        words = _seed_words(line)
        for start, length in zip(words[0::2], words[1::2]):
            first = int(start)
            ranges.append(range(first, first + int(length)))
    return ranges


def locate(seed: int, maps: Sequence[Sequence[RangeMap]]) -> int:
    """Follow a seed through every map; the first matching entry of each map wins."""
    value = seed
    for entries in maps:
        mapped = (entry.lookup(value) for entry in entries)
        value = next((found for found in mapped if found is not None), value)
    return value


def part1(text: str) -> int:
    """Return the lowest location of the listed seeds."""
    lines = text.splitlines()
    maps = read_maps(lines)
    return min((locate(seed, maps) for seed in read_seeds(lines)), default=MAX_INT)


def part2(text: str) -> int:
    """Return the lowest location of all seeds in the listed seed ranges."""
    lines = text.splitlines()
    maps = read_maps(lines)
    return min(
        (locate(seed, maps) for seeds in read_seed_ranges(lines) for seed in seeds),
        default=MAX_INT,
    )


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    text = _input_path(argv, "Locate seeds in an almanac.", "input1").read_text()
    _report([lambda: part1(text), lambda: part2(text)])


if __name__ == "__main__":
    main()