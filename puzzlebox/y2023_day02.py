"""Cube conundrum: games of cubes drawn from a bag."""

from __future__ import annotations

from dataclasses import dataclass

from puzzlebox.y2022_day01 import _input_path, _report

MAX_RED = 12
MAX_GREEN = 13
MAX_BLUE = 14


@dataclass(frozen=True)
class CubeSet:
    """The cubes revealed in one handful."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Game:
    """A game number and the handfuls revealed in it."""

    id: int
    sets: tuple[CubeSet, ...]


def _parse_set(chunk: str) -> CubeSet:
    counts = {"red": 0, "green": 0, "blue": 0}
    for cube in chunk.split(","):
        parts = cube.split(" ")
        if len(parts) < 3:
            raise ValueError(f"malformed cubes: {cube!r}")
        count = int(parts[1])
        if parts[2] in counts:
            counts[parts[2]] += count
    return CubeSet(**counts)


def parse_game(line: str) -> Game:
    """Parse a line such as 'Game 3: 1 red, 2 blue; 4 green'."""
    header, separator, body = line.partition(":")
    words = header.split(" ")
    if not separator or len(words) < 2:
        raise ValueError(f"malformed game: {line!r}")
    return Game(int(words[1]), tuple(_parse_set(chunk) for chunk in body.split(";")))


def _possible(game: Game) -> bool:
    return all(
        s.red <= MAX_RED and s.green <= MAX_GREEN and s.blue <= MAX_BLUE
        for s in game.sets
    )


def part1(text: str) -> int:
    """Sum the ids of games possible with the bag's cube limits."""
    games = (parse_game(line) for line in text.splitlines())
    return sum(game.id for game in games if _possible(game))


def part2(text: str) -> int:
    """Sum the powers of the smallest cube sets that make each game possible."""
    total = 0
    for line in text.splitlines():
        sets = parse_game(line).sets
        total += (
            max(s.red for s in sets)
            * max(s.green for s in sets)
            * max(s.blue for s in sets)
        )
    return total


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    text = _input_path(argv, "Check cube games.").read_text()
    _report([lambda: part1(text), lambda: part2(text)])


if __name__ == "__main__":
    main()