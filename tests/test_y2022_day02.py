import pytest

from puzzlebox.y2022_day02 import main, part1, part2


@pytest.mark.parametrize(
    "line, as_move, as_outcome",
    [
        ("A X", 4, 3), ("A Y", 8, 4), ("A Z", 3, 8),
        ("B X", 1, 1), ("B Y", 5, 5), ("B Z", 9, 9),
        ("C X", 7, 2), ("C Y", 2, 6), ("C Z", 6, 7),
        ("D Q", 0, 0),
    ],
)
def test_single_round(line, as_move, as_outcome):
    assert (part1(line), part2(line)) == (as_move, as_outcome)


@pytest.mark.parametrize("solve", [part1, part2])
def test_rounds_add_up(solve):
    lines = ["A Y", "B X", "C Z"]
    assert solve("\n".join(lines)) == sum(solve(line) for line in lines)


def test_malformed_round_raises():
    with pytest.raises(ValueError, match="malformed round"):
        part1("A")


def test_main_prints_answers_in_order(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("A Y\n")
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == [
        "Part 1 anwser is: 8",
        "Part 2 anwser is: 4",
    ]