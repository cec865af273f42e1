from aoc2024.day08 import part1, part2

TEST_INPUT = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""

T_INPUT = """T.........
...T......
.T........
..........
..........
..........
..........
..........
..........
.........."""


def test_part1_example():
    assert part1(TEST_INPUT) == 14


def test_part2_example():
    assert part2(TEST_INPUT) == 34


def test_part2_resonant_harmonics():
    assert part2(T_INPUT) == 9


def test_single_antenna_has_no_antinodes():
    assert part1("....\n.a..\n....") == 0
    assert part2("....\n.a..\n....") == 0


def test_pair_of_antennas():
    assert part1("a.a..") == 1