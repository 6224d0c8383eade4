"""Trebuchet calibration: first and last digits of each line."""

from __future__ import annotations

import string

from puzzlebox.y2022_day01 import _input_path, _report

WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def part1(text: str) -> int:
    """Sum the two-digit values formed by each line's first and last digit.

    Lines without any digit contribute nothing.
    """
    total = 0
    for line in text.splitlines():
        digits = [ch for ch in line if ch in string.digits]
        if digits:
            total += int(digits[0] + digits[-1])
    return total


def _first_value(line: str) -> int:
    for index, ch in enumerate(line):
        if ch in string.digits:
            return int(ch)
        for word, value in WORDS.items():
            if line.startswith(word, index):
                return value
    return 0


def _last_value(line: str) -> int:
    """Scan backwards; spelled digits must start after the first character."""
    for end in range(len(line), 0, -1):
        ch = line[end - 1]
        if ch in string.digits:
            return int(ch)
        for word, value in WORDS.items():
            start = end - len(word)
            if start >= 1 and line[start:end] == word:
                return value
    return 0


def part2(text: str) -> int:
    """Sum calibration values where digits may also be spelled out."""
    return sum(
        _first_value(line) * 10 + _last_value(line) for line in text.splitlines()
    )


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    text = _input_path(argv, "Recover calibration values.").read_text()
    _report([lambda: part1(text), lambda: part2(text)], errors=())


if __name__ == "__main__":
    main()