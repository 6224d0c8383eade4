"""Camel cards: ranking poker-like hands and totting up their winnings."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterable

_INTEGER = re.compile(r"[+-]?[0-9]+")

CARD_RANKS = {card: rank for rank, card in enumerate("23456789TJQKA")}


class HandType(IntEnum):
    """Hand types from weakest to strongest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


@dataclass(frozen=True)
class Hand:
    """A hand of cards, its bid and its type."""

    cards: str
    bid: int
    hand_type: HandType


def classify(cards: str) -> HandType:
    """Return the type of a hand from how often each label occurs."""
    counts = Counter(cards)
    distinct = len(counts)
    if distinct == 1:
        return HandType.FIVE_OF_A_KIND
    if distinct == 2:
        if 4 in counts.values():
            return HandType.FOUR_OF_A_KIND
        return HandType.FULL_HOUSE
    if distinct == 5:
        return HandType.HIGH_CARD
    if distinct == 3:
        if 3 in counts.values():
            return HandType.THREE_OF_A_KIND
        return HandType.TWO_PAIR
    return HandType.ONE_PAIR


def _split_line(line: str) -> tuple[str, int]:
    parts = line.split(" ")
    if len(parts) < 2:
        raise ValueError(f"malformed hand: {line!r}")
    bid = int(parts[1]) if _INTEGER.fullmatch(parts[1]) else 0
    return parts[0], bid


def read_hands(text: str) -> list[Hand]:
    """Parse lines such as '32T3K 765' into hands, in input order."""
    hands = []
    for line in text.splitlines():
        cards, bid = _split_line(line)
        hands.append(Hand(cards, bid, classify(cards)))
    return hands


def total_winnings(hands: Iterable[Hand]) -> int:
    """Sum each bid multiplied by its one-based position in the given order."""
    return sum(hand.bid * rank for rank, hand in enumerate(hands, start=1))


def _strength(hand: Hand) -> tuple[HandType, tuple[int, ...]]:
    return hand.hand_type, tuple(CARD_RANKS.get(card, 0) for card in hand.cards)


def part1(text: str) -> int:
    """Rank the hands from weakest to strongest and return the total winnings."""
    return total_winnings(sorted(read_hands(text), key=_strength))


def part2(text: str) -> int:
    """Return the number of hands in the input."""
    return len(read_hands(text))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank camel card hands.")
    parser.add_argument("input", nargs="?", default="input1", help="puzzle input file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    args = _parse_args(argv)
    text = Path(args.input).read_text()
    try:
        first = part1(text)
    except ValueError:
        print("error executing part 1")
        first = 0
    try:
        second = part2(text)
    except ValueError:
        print("error executing part 2")
        second = 0
    print(f"Part 1 anwser is: {first}")
    print(f"Part 2 anwser is: {second}")


if __name__ == "__main__":
    main()