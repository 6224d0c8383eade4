"""Haunted wasteland: walking a left/right network of nodes."""

from __future__ import annotations

import argparse
import math
import re
from functools import reduce
from itertools import cycle
from pathlib import Path
from typing import Callable, Iterable, Mapping

_NODE = re.compile(r"(\w+) = \(([^,]+), ([^)]+)\)", re.ASCII)

Network = dict[str, tuple[str, str]]


def parse_network(text: str) -> tuple[str, Network]:
    """Split CRLF text into the instruction line and the node table."""
    sections = text.split("\r\n\r\n")
    if len(sections) < 2:
        raise ValueError("missing node section")
    nodes: Network = {}
    for line in sections[1].split("\r\n"):
        match = _NODE.search(line)
        if match is None:
            raise ValueError(f"malformed node: {line!r}")
        nodes[match.group(1)] = (match.group(2), match.group(3))
    return sections[0], nodes


def _walk(
    instructions: str,
    nodes: Mapping[str, tuple[str, str]],
    start: str,
    is_end: Callable[[str], bool],
) -> int:
    if is_end(start):
        return 0
    if not instructions:
        raise ValueError("no instructions")
    current = start
    for steps, direction in enumerate(cycle(instructions), start=1):
        try:
            left, right = nodes[current]
        except KeyError:
            raise ValueError(f"unknown node: {current!r}") from None
        current = left if direction == "L" else right
        if is_end(current):
            return steps
    raise AssertionError("unreachable")


def count_steps(instructions: str, nodes: Mapping[str, tuple[str, str]], start: str) -> int:
    """Count the steps from start until a node whose name contains 'Z'."""
    return _walk(instructions, nodes, start, lambda name: "Z" in name)


def lcm_all(numbers: Iterable[int]) -> int:
    """Return the least common multiple of the numbers, or 0 if there are none."""
    values = list(numbers)
    if not values:
        return 0
    return reduce(math.lcm, values)


def part1(text: str) -> int:
    """Count the steps from AAA to ZZZ."""
    instructions, nodes = parse_network(text)
    return _walk(instructions, nodes, "AAA", lambda name: name == "ZZZ")


def part2(text: str) -> int:
    """Return when every walk from a node containing 'A' is on a 'Z' node at once."""
    instructions, nodes = parse_network(text)
    starts = [name for name in nodes if "A" in name and "Z" not in name]
    return lcm_all(count_steps(instructions, nodes, start) for start in starts)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Walk a desert network.")
    parser.add_argument("input", nargs="?", default="1.txt", help="puzzle input file")
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