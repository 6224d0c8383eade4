"""Camp cleanup: overlapping section assignments."""

from __future__ import annotations

from puzzlebox.y2022_day01 import _input_path, _report

Span = tuple[int, int]


def parse_pair(line: str) -> tuple[Span, Span]:
    """Parse a line such as '2-4,6-8' into two (start, end) spans."""
    try:
        left, right = line.split(",")
        a1, a2 = (int(part) for part in left.split("-"))
        b1, b2 = (int(part) for part in right.split("-"))
    except ValueError:
        raise ValueError(f"malformed pair: {line!r}") from None
    return (a1, a2), (b1, b2)


def _between(value: int, span: Span) -> bool:
    return span[0] <= value <= span[1]


def _contains(outer: Span, inner: Span) -> bool:
    return all(_between(value, outer) for value in inner)


def _overlaps(a: Span, b: Span) -> bool:
    return any(_between(value, b) for value in a) or any(
        _between(value, a) for value in b
    )


def part1(text: str) -> int:
    """Count pairs in which one span fully contains the other."""
    count = 0
    for line in text.splitlines():
        a, b = parse_pair(line)
        if (a[0] <= b[0] and _contains(a, b)) or _contains(b, a):
            count += 1
    return count


def part2(text: str) -> int:
    """Count pairs whose spans overlap at all."""
    return sum(1 for line in text.splitlines() if _overlaps(*parse_pair(line)))


def main(argv: list[str] | None = None) -> None:
    """Solve both parts for the input file and print the answers."""
    text = _input_path(argv, "Check section assignments.").read_text()
    _report([lambda: part1(text), lambda: part2(text)], interleaved=True)


if __name__ == "__main__":
    main()