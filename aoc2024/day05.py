"""Print Queue: check and repair page orderings."""

from aoc2024.utils import get_all_numbers

Rule = tuple[int, int]


def _violates(rule: Rule, pages: list[int]) -> tuple[int, int] | None:
    a, b = rule
    if a in pages and b in pages:
        ai, bi = pages.index(a), pages.index(b)
        if bi < ai:
            return ai, bi
    return None


def _is_valid(rules: list[Rule], pages: list[int]) -> bool:
    return not any(_violates(rule, pages) for rule in rules)


def _fix_ordering(rules: list[Rule], pages: list[int]) -> list[int]:
    fixed = list(pages)
    changed = True
    while changed:
        changed = False
        for rule in rules:
            swap = _violates(rule, fixed)
            if swap:
                ai, bi = swap
                fixed[ai], fixed[bi] = fixed[bi], fixed[ai]
                changed = True
    return fixed


def _solve(text: str, repair: bool) -> int:
    rule_block, update_block = text.split("\n\n")[:2]
    numbers = get_all_numbers(rule_block)
    rules = list(zip(numbers[0::2], numbers[1::2]))

    total = 0
    for line in update_block.split("\n"):
        pages = get_all_numbers(line)
        valid = _is_valid(rules, pages)
        if not repair and valid:
            total += pages[len(pages) // 2]
        elif repair and not valid:
            fixed = _fix_ordering(rules, pages)
            total += fixed[len(fixed) // 2]
    return total


def part1(text: str) -> int:
    return _solve(text, False)


def part2(text: str) -> int:
    return _solve(text, True)