import pytest

from puzzlebox.y2023_day02 import CubeSet, Game, main, parse_game, part1, part2

EXAMPLE = (
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green\n"
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 8 green, 6 blue, 1 red\n"
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red\n"
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red\n"
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"
)


def test_part1_example():
    assert part1(EXAMPLE) == 8


def test_parse_game_reads_sets():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game == Game(
        1,
        (
            CubeSet(red=4, blue=3),
            CubeSet(red=1, green=2, blue=6),
            CubeSet(green=2),
        ),
    )


def test_parse_game_sums_repeated_colours():
    repeated = parse_game("Game 1: 1 red, 2 red, 1 green, 1 blue")
    merged = parse_game("Game 1: 3 red, 1 green, 1 blue")
    assert repeated.sets == merged.sets


def test_part1_game_at_limits_counts():
    assert part1("Game 7: 12 red, 13 green, 14 blue") == 7


def test_part1_game_over_limit_excluded():
    assert part1(EXAMPLE + "\nGame 9: 13 red") == part1(EXAMPLE)


def test_part2_single_colour_game_has_zero_power():
    assert part2(EXAMPLE + "\nGame 6: 5 red") == part2(EXAMPLE)


def test_parse_game_rejects_missing_sets():
    with pytest.raises(ValueError):
        parse_game("Game 1")


def test_parse_game_rejects_bad_count():
    with pytest.raises(ValueError):
        parse_game("Game 1: many red")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    assert f"Part 1 anwser is: {part1(EXAMPLE)}" in out
    assert f"Part 2 anwser is: {part2(EXAMPLE)}" in out