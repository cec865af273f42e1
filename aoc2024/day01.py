"""Historian Hysteria: compare two location-id lists."""

from collections import Counter

from aoc2024.utils import get_all_numbers


def _parse_lists(text: str) -> tuple[list[int], list[int]]:
    numbers = get_all_numbers(text)
    return sorted(numbers[0::2]), sorted(numbers[1::2])


def part1(text: str) -> int:
    left, right = _parse_lists(text)
    return sum(abs(a - b) for a, b in zip(left, right))


def part2(text: str) -> int:
    left, right = _parse_lists(text)
    occurrences = Counter(right)
    return sum(n * occurrences[n] for n in left)