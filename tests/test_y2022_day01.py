import pytest

from puzzlebox.y2022_day01 import main, part1, part2


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1000\n2000\n\n4000\n", 4000),
        ("4000\n\n", 0),
        ("", 0),
    ],
)
def test_part1(text, expected):
    assert part1(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10\n\n20\n\n", 20),
        ("10\n\n20\n", 10),
        ("30\n\n20\n\n10\n\n", 60),
    ],
)
def test_part2(text, expected):
    assert part2(text) == expected


@pytest.mark.parametrize("solve, text", [(part1, "100\nabc\n"), (part2, "x\n\n")])
def test_invalid_value_raises(solve, text):
    with pytest.raises(ValueError, match="invalid calorie value"):
        solve(text)


@pytest.mark.parametrize(
    "content, expected",
    [
        ("5\n\n7\n", ["Part 1 anwser is: 7", "Part 2 anwser is: 5"]),
        ("x\n", ["error executing part 1", "error executing part 2"]),
    ],
)
def test_main_output(tmp_path, capsys, content, expected):
    path = tmp_path / "input"
    path.write_text(content)
    main([str(path)])
    out = capsys.readouterr().out
    assert all(line in out for line in expected)