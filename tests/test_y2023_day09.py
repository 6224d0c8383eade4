import pytest

from puzzlebox.y2023_day09 import (
    next_value,
    parse_histories,
    part1,
    part2,
    previous_value,
)

EXAMPLE = "0 3 6 9 12 15\r\n1 3 6 10 15 21\r\n10 13 16 21 30 45"


def test_parse_histories():
    assert parse_histories("1 2\r\n-3 4") == [[1, 2], [-3, 4]]


def test_parse_histories_rejects_words():
    with pytest.raises(ValueError):
        parse_histories("1 x")


def test_parse_histories_rejects_trailing_blank_line():
    with pytest.raises(ValueError):
        parse_histories("1 2\r\n")


def test_next_value_of_linear_sequence():
    assert next_value([0, 3, 6, 9, 12, 15]) == 18


@pytest.mark.parametrize("value", [5, -2, 0])
def test_constant_sequence(value):
    history = [value] * 4
    assert next_value(history) == value
    assert previous_value(history) == value


@pytest.mark.parametrize("history", [[0, 3, 6, 9, 12, 15], [1, 3, 6, 10, 15, 21], [10, 13, 16, 21, 30, 45]])
def test_previous_is_next_of_reversed(history):
    assert previous_value(history) == next_value(history[::-1])


@pytest.mark.parametrize("history", [[1, 3, 6, 10, 15, 21], [10, 13, 16, 21, 30, 45]])
def test_extrapolation_extends_consistently(history):
    extended = history + [next_value(history)]
    assert next_value(extended[1:]) == next_value(history[1:] + [extended[-1]])
    assert previous_value(extended) == previous_value(history)


def test_part1_example():
    assert part1(EXAMPLE) == 114


def test_part2_example():
    assert part2(EXAMPLE) == 2


def test_parts_sum_line_values():
    histories = parse_histories(EXAMPLE)
    assert part1(EXAMPLE) == sum(next_value(h) for h in histories)
    assert part2(EXAMPLE) == sum(previous_value(h) for h in histories)