import pytest

from aoc2024.day09 import part1, part2

TEST_INPUT = "2333133121414131402"


def test_part1_example():
    assert part1(TEST_INPUT) == 1928


def test_part2_example():
    assert part2(TEST_INPUT) == 2858


def test_part1_small_map():
    assert part1("12345") == 60


def test_single_file_checksum_is_zero():
    assert part1("5") == 0
    assert part2("5") == 0


def test_part2_not_worse_than_unmoved():
    # Whole-file moves never fragment, so a map with no gaps is unchanged.
    assert part2("9090") == part1("9090")


def test_non_digit_raises():
    with pytest.raises(ValueError):
        part1("12a")