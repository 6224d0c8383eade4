"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

from collections.abc import Iterator

from puzzlebox.y2022_day01 import _input_path, _report

_OPPONENT = "ABC"
_RESPONSE = "XYZ"

# Points for the round's result, indexed by 0 = loss, 1 = draw, 2 = win.
_RESULT_POINTS = (0, 3, 6)


def _rounds(text: str) -> Iterator[tuple[int, int] | None]:
    """Yield (opponent, column) indices per round, or None when not recognised."""
    for line in text.splitlines():
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed round: {line!r}")
        opponent, column = parts[0], parts[1]
        if (
            len(opponent) == 1
            and len(column) == 1
            and opponent in _OPPONENT
            and column in _RESPONSE
        ):
            yield _OPPONENT.index(opponent), _RESPONSE.index(column)
        else:
            yield None


def _score(opponent: int, shape: int) -> int:
    """Shape value (1 to 3) plus the points for the result against the opponent."""
    result = (shape - opponent + 1) % 3
    return shape + 1 + _RESULT_POINTS[result]


def part1(text: str) -> int:
    """Score every round reading the second column as the move to play."""
    return sum(_score(*played) for played in _rounds(text) if played is not None)


def part2(text: str) -> int:
    """Score every round reading the second column as the required outcome."""
    total = 0
    for played in _rounds(text):
        if played is None:
            continue
        opponent, wanted = played
        total += _score(opponent, (opponent + wanted - 1) % 3)
    return total


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    text = _input_path(argv, "Score a strategy guide.").read_text()
    _report([lambda: part1(text), lambda: part2(text)], interleaved=True)


if __name__ == "__main__":
    main()