"""Red-Nosed Reports: count safe level sequences."""

from aoc2024.utils import get_all_numbers


def is_safe(nums: list[int]) -> bool:
    """A report is safe if it moves monotonically in steps of one to three."""
    levels = list(reversed(nums)) if nums[0] > nums[1] else list(nums)
    return all(1 <= b - a <= 3 for a, b in zip(levels, levels[1:]))


def _safe_with_dampener(nums: list[int]) -> bool:
    return any(is_safe(nums[:i] + nums[i + 1 :]) for i in range(len(nums)))


def _solve(text: str, allow_removal: bool) -> int:
    safe = 0
    for line in text.split("\n"):
        nums = get_all_numbers(line)
        if is_safe(nums) or (allow_removal and _safe_with_dampener(nums)):
            safe += 1
    return safe


def part1(text: str) -> int:
    return _solve(text, False)


def part2(text: str) -> int:
    return _solve(text, True)