"""Camel cards where J is a joker that improves the hand."""

from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import replace
from pathlib import Path

from puzzlebox.y2023_day07 import Hand, HandType, classify, total_winnings
from puzzlebox.y2023_day07 import read_hands as _read_plain_hands

JOKER = "J"
JOKER_RANKS = {card: rank for rank, card in enumerate("J23456789TQKA")}


def classify_with_jokers(cards: str) -> HandType:
    """Return the hand type when jokers take whichever label helps most."""
    counts = Counter(cards)
    hand_type = classify(cards)
    jokers = counts[JOKER]
    if jokers < 1:
        return hand_type
    distinct = len(counts)
    if distinct <= 2:
        return HandType.FIVE_OF_A_KIND
    if distinct == 3:
        if jokers >= 2 or hand_type is HandType.THREE_OF_A_KIND:
            return HandType.FOUR_OF_A_KIND
        return HandType.FULL_HOUSE
    if distinct == 4:
        return HandType.THREE_OF_A_KIND
    return HandType.ONE_PAIR


def read_hands(text: str) -> list[Hand]:
    """Parse the hands, typing them with jokers taken into account."""
    return [
        replace(hand, hand_type=classify_with_jokers(hand.cards))
        for hand in _read_plain_hands(text)
    ]


def _strength(hand: Hand) -> tuple[HandType, tuple[int, ...]]:
    return hand.hand_type, tuple(JOKER_RANKS.get(card, 0) for card in hand.cards)


def part2(text: str) -> int:
    """Rank the hands with jokers and return the total winnings."""
    return total_winnings(sorted(read_hands(text), key=_strength))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank camel card hands with jokers.")
    parser.add_argument("input", nargs="?", default="input1", help="puzzle input file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Solve the joker variant for the input file and print the answer."""
    args = _parse_args(argv)
    text = Path(args.input).read_text()
    try:
        answer = part2(text)
    except ValueError:
        print("error executing part 2")
        answer = 0
    print(f"Part 2 anwser is: {answer}")


if __name__ == "__main__":
    main()