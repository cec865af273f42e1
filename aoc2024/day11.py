"""Plutonian Pebbles: count stones after repeated blinks."""

from functools import lru_cache

from aoc2024.utils import get_all_numbers


def _atoi(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


@lru_cache(maxsize=None)
def _blink(stone: int, remaining: int) -> int:
    if remaining == 0:
        return 1
    digits = str(stone)
    if stone == 0:
        return _blink(1, remaining - 1)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return _blink(_atoi(digits[:half]), remaining - 1) + _blink(
            _atoi(digits[half:]), remaining - 1
        )
    return _blink(stone * 2024, remaining - 1)


def count_stones(text: str, blinks: int) -> int:
    """Return how many stones the arrangement in ``text`` becomes after ``blinks``."""
    return sum(_blink(n, blinks) for n in get_all_numbers(text))


def part1(text: str) -> int:
    return count_stones(text, 25)


def part2(text: str) -> int:
    return count_stones(text, 75)