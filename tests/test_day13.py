from aoc2024.day13 import part1

WINNABLE = """Button A: X+2, Y+1
Button B: X+1, Y+3
Prize: X=5, Y=5"""

UNWINNABLE = """Button A: X+3, Y+3
Button B: X+5, Y+5
Prize: X=4, Y=7"""


def test_part1_winnable_machine_costs_seven():
    assert part1(WINNABLE) == 7


def test_part1_unwinnable_machine_costs_nothing():
    assert part1(UNWINNABLE) == 0


def test_part1_sums_over_machines():
    assert part1(WINNABLE + "\n\n" + UNWINNABLE + "\n\n" + WINNABLE) == 14


def test_part1_handles_carriage_returns():
    text = WINNABLE + "\n\n" + UNWINNABLE
    assert part1(text.replace("\n", "\r\n")) == 7