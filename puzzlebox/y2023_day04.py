"""Scratchcards: matching winning numbers and copying cards."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from puzzlebox.y2022_day01 import _INTEGER, _report


@dataclass(frozen=True)
class Card:
    """A scratchcard: its number, the winning numbers and the player's numbers."""

    id: int
    winning: tuple[int, ...]
    player: tuple[int, ...]

    @property
    def matches(self) -> int:
        """Number of the player's numbers that are winning numbers."""
        return count_matches(self.player, self.winning)


def parse_numbers(text: str) -> list[int]:
    """Return the integers among the space-separated words, skipping the rest."""
    return [int(word) for word in text.split(" ") if _INTEGER.fullmatch(word)]


def count_matches(player, winning) -> int:
    """Count how many of the player's numbers appear among the winning numbers."""
    winning_set = set(winning)
    return sum(1 for number in player if number in winning_set)


def _split_numbers(line: str) -> tuple[list[int], list[int]]:
    fields = line.split(":")
    halves = fields[1].split("|") if len(fields) > 1 else []
    if len(halves) < 2:
        raise ValueError(f"malformed card: {line!r}")
    return parse_numbers(halves[0]), parse_numbers(halves[1])


def parse_card(line: str) -> Card:
    """Parse a line such as 'Card 1: 41 48 | 83 86 17'."""
    words = [word for word in line.split(":")[0].split(" ") if word]
    if len(words) < 2:
        raise ValueError(f"malformed card: {line!r}")
    winning, player = _split_numbers(line)
    return Card(int(words[1]), tuple(winning), tuple(player))


def part1(text: str) -> int:
    """Sum the card points: 1 for the first match, doubled for each further one."""
    total = 0
    for line in text.splitlines():
        winning, player = _split_numbers(line)
        matches = count_matches(player, winning)
        if matches > 0:
            total += 2 ** (matches - 1)
    return total


def part2(text: str) -> int:
    """Count the cards held once winning cards have copied the cards after them."""
    cards = [parse_card(line) for line in text.splitlines()]
    counts = [1] * len(cards)
    for index, card in enumerate(cards):
        end = min(card.id + card.matches, len(cards))
        for following in range(card.id, end):
            counts[following] += counts[index]
    return sum(counts)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts and print the answers."""
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("input1", nargs="?", default="input1", help="input for part 1")
    parser.add_argument("input2", nargs="?", default="input2", help="input for part 2")
    args = parser.parse_args(argv)
    _report(
        [
            lambda: part1(Path(args.input1).read_text()),
            lambda: part2(Path(args.input2).read_text()),
        ],
        errors=(OSError, ValueError),
    )


if __name__ == "__main__":
    main()