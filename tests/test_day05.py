from aoc2024.day05 import part1, part2

TEST_INPUT = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


def test_part1():
    assert part1(TEST_INPUT) == 143


def test_part2():
    assert part2(TEST_INPUT) == 123


def test_single_valid_update_only_counts_in_part1():
    text = "1|2\n\n1,5,2"
    assert part1(text) == 5
    assert part2(text) == 0