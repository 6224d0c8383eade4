"""Tuning trouble: finding start-of-packet and start-of-message markers."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from puzzlebox.y2022_day01 import _input_path

PACKET_SIZE = 4
MESSAGE_SIZE = 14


def has_duplicate(items: Sequence[Hashable]) -> bool:
    """Return True if any item occurs more than once."""
    return len(set(items)) != len(items)


def find_marker(line: str, size: int) -> int | None:
    """Return the position just after the first window of distinct characters.

    The final window of the line is never examined. Returns None if no marker
    is found.
    """
    for start in range(len(line) - size):
        if not has_duplicate(line[start : start + size]):
            return start + size
    return None


def _first_marker(text: str, size: int) -> int:
    markers = (find_marker(line, size) for line in text.splitlines())
    return next((marker for marker in markers if marker is not None), 0)


def part1(text: str) -> int:
    """Return the first start-of-packet marker, or 0 if there is none."""
    return _first_marker(text, PACKET_SIZE)


def part2(text: str) -> int:
    """Return the first start-of-message marker, or 0 if there is none."""
    return _first_marker(text, MESSAGE_SIZE)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    path = _input_path(argv, "Find signal markers.")
    try:
        text = path.read_text()
    except OSError:
        text = ""
    for name, solve in (("part1", part1), ("part2", part2)):
        print(f"{name} {solve(text)}")


if __name__ == "__main__":
    main()