"""Chronospatial Computer: run a tiny three-bit machine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from aoc2024.utils import get_all_numbers, int_pow

PART2_CANDIDATE = 108_107_566_389_757


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - _trunc_div(a, b) * b


@dataclass
class Machine:
    """A program in memory, three registers and the values written so far."""

    memory: list[int]
    registers: list[int]
    output: list[int] = field(default_factory=list)
    instruction_pointer: int = 0

    def _literal(self) -> int:
        return self.memory[self.instruction_pointer + 1]

    def _combo(self) -> int:
        value = self.memory[self.instruction_pointer + 1]
        if value < 4:
            return value
        if value < 7:
            return self.registers[value - 4]
        raise ValueError(f"invalid combo operand: {value}")

    def _divide(self) -> int:
        return _trunc_div(self.registers[0], int_pow(2, self._combo()))

    def _adv(self) -> None:
        self.registers[0] = self._divide()
        self.instruction_pointer += 2

    def _bxl(self) -> None:
        self.registers[1] ^= self._literal()
        self.instruction_pointer += 2

    def _bst(self) -> None:
        self.registers[1] = _trunc_mod(self._combo(), 8)
        self.instruction_pointer += 2

    def _jnz(self) -> None:
        if self.registers[0] == 0:
            self.instruction_pointer += 2
        else:
            self.instruction_pointer = self._literal()

    def _bxc(self) -> None:
        self.registers[1] ^= self.registers[2]
        self.instruction_pointer += 2

    def _out(self) -> None:
        self.output.append(_trunc_mod(self._combo(), 8))
        self.instruction_pointer += 2

    def _bdv(self) -> None:
        self.registers[1] = self._divide()
        self.instruction_pointer += 2

    def _cdv(self) -> None:
        self.registers[2] = self._divide()
        self.instruction_pointer += 2

    def run(self) -> list[int]:
        """Execute until the instruction pointer leaves memory; return the output."""
        instructions: dict[int, Callable[[], None]] = {
            0: self._adv,
            1: self._bxl,
            2: self._bst,
            3: self._jnz,
            4: self._bxc,
            5: self._out,
            6: self._bdv,
            7: self._cdv,
        }
        while self.instruction_pointer < len(self.memory):
            opcode = self.memory[self.instruction_pointer]
            try:
                instruction = instructions[opcode]
            except KeyError:
                raise ValueError(f"invalid opcode: {opcode}") from None
            instruction()
        return self.output


def parse(text: str) -> Machine:
    """Read three register values followed by the program."""
    nums = get_all_numbers(text)
    return Machine(memory=nums[3:], registers=nums[0:3])


def _reproduces(a: int, program: list[int]) -> bool:
    """Check whether starting register A reproduces the program as output."""
    index = 0
    while a != 0:
        b = a % 8
        b ^= 3
        c = _trunc_div(a, int_pow(2, b))
        b ^= c
        b ^= 3
        a = _trunc_div(a, 8)
        if index < len(program) and b % 8 == program[index]:
            index += 1
        else:
            return False
    return index == len(program)


def part1(text: str) -> list[int]:
    return parse(text).run()


def part2(text: str) -> int:
    program = parse(text).memory
    if _reproduces(PART2_CANDIDATE, program):
        return PART2_CANDIDATE
    return -1