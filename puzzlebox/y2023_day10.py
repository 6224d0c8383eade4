"""Pipe maze: locating the starting tile."""

from __future__ import annotations

from puzzlebox.y2022_day01 import _input_path, _report

START = "S"


def parse_grid(text: str) -> list[str]:
    """Split the maze into rows; rows are separated by CRLF."""
    return text.split("\r\n")


def find_start(grid: list[str]) -> tuple[int, int] | None:
    """Return the (row, column) of the first start tile, or None."""
    for row, line in enumerate(grid):
        column = line.find(START)
        if column >= 0:
            return row, column
    return None


def part1(text: str) -> int:
    """Print the start tile's position; the answer is always 0."""
    print(find_start(parse_grid(text)))
    return 0


def part2(text: str) -> int:
    """Print every row of the maze; the answer is always 0."""
    print("\n".join(parse_grid(text)))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Run part 1 for the input file and print the answer."""
    text = _input_path(argv, "Explore a pipe maze.").read_text(newline="")
    _report([lambda: part1(text)], errors=())


if __name__ == "__main__":
    main()