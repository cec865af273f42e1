"""Mull It Over: sum the valid multiplications in corrupted memory."""

import re

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_INSTRUCTION = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)|do\(\)|don't\(\)")


def part1(text: str) -> int:
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part2(text: str) -> int:
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total