"""Ceres Search: find words in a letter grid."""

from collections import Counter
from collections.abc import Iterator

_DIAGONALS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
_ALL_DIRECTIONS = [(1, 0), (-1, 0), (0, 1), (0, -1), *_DIAGONALS]


def _word_in_direction(dx: int, dy: int, word: str) -> list[tuple[int, int, str]]:
    return [(dx * i, dy * i, ch) for i, ch in enumerate(word)]


def _matches(text: str, words: list[list[tuple[int, int, str]]]) -> Iterator[tuple[int, int]]:
    """Yield the position of the second letter of every word occurrence."""
    grid = {
        (x, y): ch
        for y, line in enumerate(text.split("\n"))
        for x, ch in enumerate(line)
    }
    for x, y in grid:
        for word in words:
            if all(grid.get((x + dx, y + dy)) == ch for dx, dy, ch in word):
                dx, dy, _ = word[1]
                yield x + dx, y + dy


def part1(text: str) -> int:
    words = [_word_in_direction(dx, dy, "XMAS") for dx, dy in _ALL_DIRECTIONS]
    return sum(1 for _ in _matches(text, words))


def part2(text: str) -> int:
    words = [_word_in_direction(dx, dy, "MAS") for dx, dy in _DIAGONALS]
    centres = Counter(_matches(text, words))
    return sum(1 for hits in centres.values() if hits == 2)