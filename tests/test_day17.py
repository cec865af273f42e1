import pytest

from aoc2024.day17 import Machine, parse, part1, part2

EXAMPLE = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0"""


def test_part1_example():
    assert part1(EXAMPLE) == [4, 6, 3, 5, 6, 3, 5, 2, 1, 0]


def test_parse_splits_registers_and_memory():
    machine = parse(EXAMPLE)
    assert machine.registers == [729, 0, 0]
    assert machine.memory == [0, 1, 5, 4, 3, 0]
    assert machine.instruction_pointer == 0
    assert machine.output == []


def test_bst_uses_register_c():
    machine = Machine(memory=[2, 6], registers=[0, 0, 9])
    machine.run()
    assert machine.registers[1] == 1


def test_out_literals():
    machine = Machine(memory=[5, 0, 5, 1, 5, 4], registers=[10, 0, 0])
    assert machine.run() == [0, 1, 2]


def test_loop_until_a_is_zero():
    machine = Machine(memory=[0, 1, 5, 4, 3, 0], registers=[2024, 0, 0])
    assert machine.run() == [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]
    assert machine.registers[0] == 0


def test_bxl():
    machine = Machine(memory=[1, 7], registers=[0, 29, 0])
    machine.run()
    assert machine.registers[1] == 26


def test_bxc():
    machine = Machine(memory=[4, 0], registers=[0, 2024, 43690])
    machine.run()
    assert machine.registers[1] == 44354


def test_invalid_combo_operand_raises():
    machine = Machine(memory=[5, 7], registers=[0, 0, 0])
    with pytest.raises(ValueError):
        machine.run()


def test_part2_rejects_program_not_reproduced():
    assert part2(EXAMPLE) == -1