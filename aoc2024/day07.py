"""Bridge Repair: decide which calibration equations can be made true."""

from aoc2024.utils import get_all_numbers


def _concat(current: int, following: int) -> int:
    return int(f"{current}{following}")


def _can_be_true(target: int, values: list[int], subtotal: int, with_concat: bool) -> bool:
    if not values:
        return subtotal == target
    head, rest = values[0], values[1:]
    candidates = [subtotal + head, subtotal * head]
    if with_concat:
        candidates.append(_concat(subtotal, head))
    return any(_can_be_true(target, rest, c, with_concat) for c in candidates)


def _solve(text: str, with_concat: bool) -> int:
    total = 0
    for line in text.split("\n"):
        target, *values = get_all_numbers(line)
        if _can_be_true(target, values, 0, with_concat):
            total += target
    return total


def part1(text: str) -> int:
    return _solve(text, False)


def part2(text: str) -> int:
    return _solve(text, True)