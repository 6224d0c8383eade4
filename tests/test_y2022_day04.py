import pytest

from puzzlebox.y2022_day04 import main, parse_pair, part1, part2

EXAMPLE = "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8"


def test_parse_pair():
    assert parse_pair("2-4,6-8") == ((2, 4), (6, 8))


@pytest.mark.parametrize("line", ["2-8,3-7", "6-6,4-6", "3-5,3-5"])
def test_part1_counts_containment(line):
    assert part1(line) == 1


@pytest.mark.parametrize("line", ["2-4,6-8", "5-7,7-9"])
def test_part1_ignores_non_containment(line):
    assert part1(line) == 0


@pytest.mark.parametrize("line", ["5-7,7-9", "2-6,4-8", "2-8,3-7"])
def test_part2_counts_overlap(line):
    assert part2(line) == 1


def test_part2_ignores_disjoint():
    assert part2("2-3,4-5") == 0


def test_example_totals():
    assert part1(EXAMPLE) == 2
    assert part2(EXAMPLE) == 4


def test_containment_implies_overlap():
    for line in EXAMPLE.splitlines():
        assert part1(line) <= part2(line)


@pytest.mark.parametrize("line", ["", "2-4", "a-b,1-2", "1-2-3,4-5"])
def test_malformed_pair_raises(line):
    with pytest.raises(ValueError):
        parse_pair(line)


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("garbage\n")
    main([str(path)])
    out = capsys.readouterr().out
    assert "error executing part 1" in out
    assert "error executing part 2" in out