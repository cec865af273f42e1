from aoc2024.day16 import UNREACHABLE, part1, part2

EXAMPLE = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""

SECOND = """#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################"""

CORRIDOR = """######
#S..E#
######"""


def test_part1_example():
    assert part1(EXAMPLE) == 7036


def test_part2_example():
    assert part2(EXAMPLE) == 45


def test_part1_second_example():
    assert part1(SECOND) == 11048


def test_straight_corridor():
    assert part1(CORRIDOR) == 3
    assert part2(CORRIDOR) == 4


def test_walled_off_end_is_unreachable():
    maze = "#######\n#S.#E.#\n#######"
    assert part1(maze) == UNREACHABLE