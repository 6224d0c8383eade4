"""Supply stacks: rearranging crates between nine stacks."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple

STACK_COUNT = 9
CRATE_ROWS = 8


class Move(NamedTuple):
    """A crane instruction with zero-based stack indices."""

    count: int
    source: int
    target: int


def parse_stacks(lines: Iterable[str]) -> list[list[str]]:
    """Read the crate drawing rows into stacks, each listed from the top down."""
    stacks: list[list[str]] = [[] for _ in range(STACK_COUNT)]
    for line in lines:
        for index, stack in enumerate(stacks):
            position = index * 4 + 1
            if position < len(line) and line[position].isalpha():
                stack.append(line[position])
    return stacks


def _stack_index(word: str) -> int:
    index = int(word) - 1
    if not 0 <= index < STACK_COUNT:
        raise ValueError(f"no such stack: {word}")
    return index


def parse_moves(lines: Iterable[str]) -> Iterator[Move]:
    """Yield moves from lines such as 'move 3 from 1 to 2', skipping blank lines."""
    for line in lines:
        if not line:
            continue
        words = line.split(" ")
        if len(words) < 6:
            raise ValueError(f"malformed move: {line!r}")
        yield Move(int(words[1]), _stack_index(words[3]), _stack_index(words[5]))


def _rearrange(text: str, keep_order: bool) -> list[str]:
    lines = text.splitlines()
    stacks = parse_stacks(lines[:CRATE_ROWS])
    # The row right after the drawing holds the stack numbers.
    for move in parse_moves(lines[CRATE_ROWS + 1 :]):
        source = stacks[move.source]
        if len(source) < move.count:
            raise ValueError(f"stack {move.source + 1} is empty")
        crates = source[: move.count]
        del source[: move.count]
        if not keep_order:
            crates.reverse()
        stacks[move.target][:0] = crates
    return ["".join(stack) for stack in stacks]


def part1(text: str) -> list[str]:
    """Move crates one at a time; return each stack's crates from the top down."""
    return _rearrange(text, keep_order=False)


def part2(text: str) -> list[str]:
    """Move crates in blocks; return each stack's crates from the top down."""
    return _rearrange(text, keep_order=True)


def _tops(stacks: list[str]) -> str:
    return "".join(stack[0] for stack in stacks if stack)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rearrange crate stacks.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the stacks."""
    args = _parse_args(argv)
    text = Path(args.input).read_text()
    for label, solve in (("part1", part1), ("part2", part2)):
        try:
            stacks = solve(text)
        except ValueError:
            print(f"error executing {label.replace('part', 'part ')}")
            stacks = []
        for stack in stacks:
            print(stack)
        print(f"{label} {_tops(stacks)}")


if __name__ == "__main__":
    main()