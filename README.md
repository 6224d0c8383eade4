# puzzlebox

Solvers for a set of daily programming puzzles: six days from 2022,
ten days from 2023 and three days from 2024. There is one module per
day. Each module works on the puzzle input as plain text, so it can be
used from your own code as well as from the command line.

No third-party libraries are needed.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using it from Python

Most modules expose `part1(text)` and `part2(text)`. Each takes the
whole puzzle input as a string and returns that part's answer:

```python
from pathlib import Path

from puzzlebox import y2022_day01, y2024_day03

text = Path("input").read_text()
print(y2022_day01.part1(text))
print(y2024_day03.part2(text))
```

Modules that differ from this pattern:

- `y2022_day05`: `part1(text)` and `part2(text)` return a list of nine
  strings, one per stack, each listing its crates from the top down.
  `part1` moves crates one at a time; `part2` moves them in blocks.
- `y2023_day07`: `part1(text)` returns the total winnings with the
  ordinary card ranking; `part2(text)` returns the number of hands.
- `y2023_day07_jokers`: provides only `part2(text)`, which treats `J`
  as a joker.
- `y2023_day10`: `part1(text)` prints the position of the start tile
  and `part2(text)` prints the rows of the maze; both return 0.
- `y2024_day01`: call `parse_lists(text)` first, then pass the two lists
  to `total_distance(left, right)` and `similarity(left, right)`.

Several modules also expose the pieces they are built from, for example
`y2022_day06.find_marker`, `y2023_day02.parse_game`,
`y2023_day05.RangeMap`, `y2023_day06.count_solutions`,
`y2023_day07.classify`, `y2023_day07_jokers.classify_with_jokers`,
`y2023_day08.lcm_all`, `y2023_day09.next_value` and
`y2024_day02.check_levels`.

Malformed input raises `ValueError`.

### Input line endings

`y2023_day08`, `y2023_day09` and `y2023_day10` split their input on
`\r\n`. Give them text with CRLF line endings; their commands read the
file without translating newlines. All other modules accept any line
endings.

## Using it from the command line

Each day has its own command. Every command takes the input file as an
optional positional argument and otherwise reads a default file from
the current directory:

| Command                    | Default input           |
|----------------------------|-------------------------|
| `puzzlebox-2022-01`        | `input`                 |
| `puzzlebox-2022-02`        | `input`                 |
| `puzzlebox-2022-03`        | `input`                 |
| `puzzlebox-2022-04`        | `input`                 |
| `puzzlebox-2022-05`        | `input`                 |
| `puzzlebox-2022-06`        | `input`                 |
| `puzzlebox-2023-01`        | `input`                 |
| `puzzlebox-2023-02`        | `input`                 |
| `puzzlebox-2023-03`        | `input1`, `input2`      |
| `puzzlebox-2023-04`        | `input1`, `input2`      |
| `puzzlebox-2023-05`        | `input1`                |
| `puzzlebox-2023-06`        | `input1`                |
| `puzzlebox-2023-07`        | `input1`                |
| `puzzlebox-2023-07-jokers` | `input1`                |
| `puzzlebox-2023-08`        | `1.txt`                 |
| `puzzlebox-2023-09`        | `input`                 |
| `puzzlebox-2023-10`        | `input`                 |
| `puzzlebox-2024-01`        | `part_one`              |
| `puzzlebox-2024-02`        | `input`                 |
| `puzzlebox-2024-03`        | `input`                 |

`puzzlebox-2023-03` and `puzzlebox-2023-04` take two files: the first
for part 1, the second for part 2.

For example:

```
puzzlebox-2023-09 my-input.txt
```

Most commands print lines such as `Part 1 anwser is: 24000`. If a part
fails on bad input, the command prints `error executing part N` and
reports 0 for that part. `puzzlebox-2022-05` prints every stack and then
the top crates, as `part1 CMZ`.

## What it does not do

- The 2023 day 10 module does not trace the pipe loop. Its command only
  prints where the start tile is and answers 0.
- There is no single command that runs every day. Each day is run on its
  own.