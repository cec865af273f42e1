import pytest

from aoc2024.day07 import part1, part2

TEST_INPUT = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_part1_example():
    assert part1(TEST_INPUT) == 3749


def test_part2_example():
    assert part2(TEST_INPUT) == 11387


def test_single_true_equation():
    assert part1("190: 10 19") == 190


def test_false_equation_contributes_nothing():
    assert part1("83: 17 5") == 0


def test_concatenation_only_in_part2():
    assert part1("156: 15 6") == 0
    assert part2("156: 15 6") == 156


def test_first_value_may_be_multiplied_away():
    # The running total starts at zero, so multiplying by the first value drops it.
    assert part1("3: 5 3") == 3


def test_empty_line_raises():
    with pytest.raises(ValueError):
        part1("190: 10 19\n")