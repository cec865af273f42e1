from aoc2024.day12 import part1, part2

TEST_INPUT = """AAAA
BBCD
BBCC
EEEC"""

NESTED = """OOOOO
OXOXO
OOOOO
OXOXO
OOOOO"""


def test_part1_example():
    assert part1(TEST_INPUT) == 140


def test_part2_example():
    assert part2(TEST_INPUT) == 80


def test_part1_nested_regions():
    assert part1(NESTED) == 772


def test_part2_nested_regions():
    assert part2(NESTED) == 436


def test_carriage_returns_are_ignored():
    assert part1(TEST_INPUT.replace("\n", "\r\n")) == 140


def test_single_plot():
    assert part1("A") == 4
    assert part2("A") == 4