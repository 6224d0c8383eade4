import pytest

from puzzlebox.y2023_day04 import (
    Card,
    count_matches,
    parse_card,
    parse_numbers,
    part1,
    part2,
)

EXAMPLE = """\
Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
"""


def test_parse_numbers_skips_blanks():
    assert parse_numbers(" 41 48  83 ") == [41, 48, 83]


def test_parse_numbers_skips_words_and_keeps_signs():
    assert parse_numbers("a 1 +2 -3 x7") == [1, 2, -3]


def test_count_matches_of_identical_lists():
    numbers = [5, 9, 12, 40]
    assert count_matches(numbers, numbers) == len(numbers)


def test_count_matches_with_no_winners():
    assert count_matches([1, 2, 3], []) == 0


def test_count_matches_counts_repeated_player_numbers():
    assert count_matches([7, 7, 7], [7]) == count_matches([7], [7]) * 3


def test_parse_card():
    card = parse_card("Card  12: 41 48 | 83 86 17")
    assert card == Card(12, (41, 48), (83, 86, 17))


def test_card_matches_property():
    card = parse_card("Card 1: 1 2 3 | 3 2 9")
    assert card.matches == count_matches(card.player, card.winning)


def test_parse_card_without_colon():
    with pytest.raises(ValueError):
        parse_card("Card 1 41 48 | 83")


def test_parse_card_without_bar():
    with pytest.raises(ValueError):
        parse_card("Card 1: 41 48 83")


def test_part1_example():
    assert part1(EXAMPLE) == 13


def test_part1_card_without_matches():
    assert part1("Card 1: 1 2 | 3 4\n") == 0


def test_part2_example():
    assert part2(EXAMPLE) == 30


def test_part2_at_least_one_of_each_card():
    assert part2(EXAMPLE) >= len(EXAMPLE.splitlines())


def test_part2_without_matches_counts_originals():
    text = "Card 1: 1 2 | 3 4\nCard 2: 5 6 | 7 8\n"
    assert part2(text) == len(text.splitlines())