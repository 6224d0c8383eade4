"""Gear ratios: part numbers in an engine schematic."""

from __future__ import annotations

import argparse
import string
from dataclasses import dataclass
from itertools import groupby
from pathlib import Path

SYMBOL = -1
DOT = -2
GEAR = -3

Grid = list[list[int]]


@dataclass(frozen=True)
class Point:
    """A cell position: x is the row, y the column."""

    x: int
    y: int


@dataclass(frozen=True)
class RowNumber:
    """A number in the schematic and the cells it covers."""

    value: int
    points: tuple[Point, ...]


def _cell(ch: str, mark_gears: bool) -> int:
    if ch.isdecimal():
        return int(ch) if ch in string.digits else 0
    if ch == ".":
        return DOT
    if mark_gears and ch == "*":
        return GEAR
    return SYMBOL


def parse_grid(text: str, mark_gears: bool = False) -> Grid:
    """Turn the schematic into digits, DOT, SYMBOL and (optionally) GEAR cells."""
    return [[_cell(ch, mark_gears) for ch in line] for line in text.splitlines()]


def read_row_numbers(grid: Grid, row: int) -> list[RowNumber]:
    """Return the numbers on one row from left to right."""
    numbers = []
    cells = enumerate(grid[row])
    for is_digit, run in groupby(cells, key=lambda cell: cell[1] >= 0):
        if not is_digit:
            continue
        run = list(run)
        value = int("".join(str(digit) for _, digit in run))
        numbers.append(RowNumber(value, tuple(Point(row, col) for col, _ in run)))
    return numbers


def adjacent_values(grid: Grid, x: int, y: int) -> list[int]:
    """Return the values of the cells around (x, y) that lie inside the grid."""
    values = []
    for nx in (x - 1, x, x + 1):
        if not 0 <= nx < len(grid):
            continue
        for ny in (y - 1, y, y + 1):
            if (nx, ny) != (x, y) and 0 <= ny < len(grid[nx]):
                values.append(grid[nx][ny])
    return values


def read_gears(grid: Grid, row: int) -> list[Point]:
    """Return the gear cells of a row, looking at as many columns as there are rows."""
    cells = grid[row]
    if len(cells) < len(grid):
        raise ValueError("grid is not square")
    return [Point(row, col) for col, value in enumerate(cells[: len(grid)]) if value == GEAR]


def adjacent_numbers(grid: Grid, gear: Point) -> list[RowNumber]:
    """Return the numbers on the gear's row and the rows below and above that touch it."""
    rows = [gear.x]
    if gear.x < len(grid) - 1:
        rows.append(gear.x + 1)
    if gear.x > 0:
        rows.append(gear.x - 1)
    return [
        number
        for row in rows
        for number in read_row_numbers(grid, row)
        if any(abs(point.y - gear.y) <= 1 for point in number.points)
    ]


def _scanned_rows(grid: Grid) -> range:
    """Rows examined: as many as the first row has columns."""
    if not grid:
        raise ValueError("empty grid")
    width = len(grid[0])
    if len(grid) < width:
        raise ValueError("grid is not square")
    return range(width)


def _is_part(grid: Grid, number: RowNumber) -> bool:
    return any(SYMBOL in adjacent_values(grid, p.x, p.y) for p in number.points)


def part1(text: str) -> int:
    """Sum the numbers that touch a symbol."""
    grid = parse_grid(text)
    return sum(
        number.value
        for row in _scanned_rows(grid)
        for number in read_row_numbers(grid, row)
        if _is_part(grid, number)
    )


def part2(text: str) -> int:
    """Sum the ratios of gears that touch exactly two numbers."""
    grid = parse_grid(text, mark_gears=True)
    total = 0
    for row in _scanned_rows(grid):
        for gear in read_gears(grid, row):
            parts = adjacent_numbers(grid, gear)
            if len(parts) == 2:
                total += parts[0].value * parts[1].value
    return total


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Read an engine schematic.")
    parser.add_argument("input1", nargs="?", default="input1", help="input for part 1")
    parser.add_argument("input2", nargs="?", default="input2", help="input for part 2")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts and print the answers."""
    args = _parse_args(argv)
    try:
        first = part1(Path(args.input1).read_text())
    except (OSError, ValueError):
        print("error executing part 1")
        first = 0
    try:
        second = part2(Path(args.input2).read_text())
    except (OSError, ValueError):
        print("error executing part 2")
        second = 0
    print(f"Part 1 anwser is: {first}")
    print(f"Part 2 anwser is: {second}")


if __name__ == "__main__":
    main()