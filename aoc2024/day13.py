"""Claw Contraption: find the cheapest button presses that reach each prize."""

from aoc2024.utils import get_all_numbers

PART2_OFFSET = 10_000_000_000_000


def _solve_machine(nums: list[int], add: int) -> int:
    """Return the token cost of winning one machine, or 0 if it cannot be won."""
    ax, ay, bx, by = nums[0], nums[1], nums[2], nums[3]
    target_x = nums[4] + add
    target_y = nums[5] + add

    presses_a = 0
    presses_b = min(target_x // bx, target_y // by)

    while True:
        dx = presses_a * ax + presses_b * bx - target_x
        dy = presses_a * ay + presses_b * by - target_y
        if dx == 0 and dy == 0:
            return presses_a * 3 + presses_b

        remove_b = -1
        if dx > 0:
            remove_b = max(remove_b, dx // bx)
        if dy > 0:
            remove_b = max(remove_b, dy // by)
        if remove_b >= 0:
            presses_b -= max(remove_b, 1)

        add_a = -1
        if dx < 0:
            add_a = max(add_a, -dx // ax)
        if dy < 0:
            add_a = max(add_a, -dy // ay)
        if add_a >= 0:
            presses_a += max(add_a, 1)

        if presses_b < 0:
            return 0


def _solve(text: str, add: int) -> int:
    blocks = text.replace("\r", "").split("\n\n")
    return sum(_solve_machine(get_all_numbers(block), add) for block in blocks)


def part1(text: str) -> int:
    return _solve(text, 0)


def part2(text: str) -> int:
    return _solve(text, PART2_OFFSET)