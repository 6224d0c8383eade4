import pytest

from puzzlebox.y2023_day06 import (
    Race,
    count_solutions,
    part1,
    part2,
    read_races,
    read_single_race,
)

EXAMPLE = """\
Time:      7  15   30
Distance:  9  40  200
"""


def test_read_races():
    assert read_races(EXAMPLE.splitlines()) == [Race(7, 9), Race(15, 40), Race(30, 200)]


def test_read_races_missing_distances():
    with pytest.raises(ValueError):
        read_races(["Time: 1 2", "Distance: 3"])


def test_read_races_without_colon():
    with pytest.raises(ValueError):
        read_races(["Time 1 2"])


def test_read_single_race():
    assert read_single_race(EXAMPLE.splitlines()) == Race(71530, 940200)


def test_count_solutions_without_winner_is_one():
    assert count_solutions(Race(time=0, distance=0)) == 1


@pytest.mark.parametrize("time", [7, 15, 30, 101])
def test_count_solutions_monotonic_in_record(time):
    counts = [count_solutions(Race(time, record)) for record in range(0, time * time // 4 + 2)]
    assert counts == sorted(counts, reverse=True)


@pytest.mark.parametrize("time", [5, 6, 40, 41])
def test_count_solutions_easy_record_allows_every_hold(time):
    assert count_solutions(Race(time, 0)) == time - 1


def test_part1_example():
    assert part1(EXAMPLE) == 288


def test_part2_example():
    assert part2(EXAMPLE) == 71503


def test_part2_is_single_race_count():
    race = read_single_race(EXAMPLE.splitlines())
    assert part2(EXAMPLE) == count_solutions(race)