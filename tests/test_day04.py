from aoc2024.day04 import part1, part2

TEST_INPUT = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX"""


def test_part1():
    assert part1(TEST_INPUT) == 18


def test_part2():
    assert part2(TEST_INPUT) == 9


def test_part1_palindromic_reading_counts_both_ways():
    assert part1("XMASAMX") == 2


def test_part2_single_cross():
    assert part2("M.S\n.A.\nM.S") == 1