from puzzlebox.y2023_day10 import find_start, main, parse_grid, part1, part2

MAZE = ".....\r\n.S-7.\r\n.|.|.\r\n.L-J.\r\n....."


def test_parse_grid_splits_on_crlf():
    assert parse_grid("ab\r\ncd") == ["ab", "cd"]


def test_parse_grid_keeps_plain_newlines_in_row():
    assert parse_grid("ab\ncd") == ["ab\ncd"]


def test_find_start_points_at_start_tile():
    grid = parse_grid(MAZE)
    row, column = find_start(grid)
    assert grid[row][column] == "S"


def test_find_start_returns_first_occurrence():
    grid = parse_grid("..\r\nSS\r\nS.")
    assert find_start(grid) == (1, 0)


def test_find_start_missing():
    assert find_start(parse_grid("..\r\n..")) is None


def test_part1_prints_start(capsys):
    result = part1(MAZE)
    out = capsys.readouterr().out
    assert result == 0
    assert out.strip() == str(find_start(parse_grid(MAZE)))


def test_part2_prints_rows(capsys):
    result = part2(MAZE)
    out = capsys.readouterr().out
    assert result == 0
    assert out.splitlines() == parse_grid(MAZE)


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_bytes(MAZE.encode())
    main([str(path)])
    out = capsys.readouterr().out.splitlines()
    assert out == [str(find_start(parse_grid(MAZE))), "Part 1 anwser is: 0"]