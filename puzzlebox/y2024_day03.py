"""Mull it over: summing the valid multiplications in corrupted memory."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)", re.ASCII)
_INSTRUCTION = re.compile(r"do\(\)|don't\(\)|mul\((\d{1,3}),(\d{1,3})\)", re.ASCII)


def part1(text: str) -> int:
    """Sum the products of every well-formed mul(x,y)."""
    return sum(int(x) * int(y) for x, y in _MUL.findall(text))


def part2(text: str) -> int:
    """Sum the products of mul(x,y) that are not switched off by don't()."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scan corrupted memory.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    args = _parse_args(argv)
    text = Path(args.input).read_text()
    print(part1(text))
    print(part2(text))


if __name__ == "__main__":
    main()