"""Rucksack reorganisation: priorities of shared items."""

from __future__ import annotations

from puzzlebox.y2022_day01 import _input_path, _report


def priority(item: str) -> int:
    """Return the priority of an item: a-z are 1-26, A-Z are 27-52."""
    code = ord(item)
    return code - 96 if code >= 97 else code - 38


def part1(text: str) -> int:
    """Sum priorities of the first item of each first half found in its second half."""
    score = 0
    for line in text.splitlines():
        middle = len(line) // 2
        first, second = line[:middle], line[middle:]
        shared = next((item for item in first if item in second), None)
        if shared is not None:
            score += priority(shared)
    return score


def _length_order(x: int, y: int, z: int) -> tuple[int, int, int]:
    """Return indices of the (biggest, middle, lowest) of three lengths."""
    if x > y:
        if x > z:
            return (0, 1, 2) if y > z else (0, 2, 1)
        return 2, 0, 1
    if z > y:
        return 2, 1, 0
    if x > z:
        return 1, 0, 2
    return 1, 2, 0


def part2(text: str) -> int:
    """Sum priorities of the badge shared by each group of three lines."""
    lines = text.splitlines()
    score = 0
    for group in zip(*[iter(lines)] * 3):
        biggest, middle, lowest = _length_order(*(len(line) for line in group))
        badge = next(
            (
                item
                for item in group[lowest]
                if item in group[middle] and item in group[biggest]
            ),
            None,
        )
        if badge is not None:
            score += priority(badge)
    return score


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    text = _input_path(argv, "Find shared rucksack items.").read_text()
    _report([lambda: part1(text), lambda: part2(text)], errors=())


if __name__ == "__main__":
    main()