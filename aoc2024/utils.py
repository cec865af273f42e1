"""Shared helpers: grid coordinates, number extraction, permutations and bits."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

_NUMBER = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class Coordinate2D:
    """An immutable point on a 2D integer grid."""

    x: int
    y: int

    def add(self, other: Coordinate2D) -> Coordinate2D:
        return Coordinate2D(self.x + other.x, self.y + other.y)

    def opposite(self) -> Coordinate2D:
        return Coordinate2D(-self.x, -self.y)


def get_2d_directions() -> list[Coordinate2D]:
    """Return the four orthogonal unit steps: left, right, down, up."""
    return [
        Coordinate2D(-1, 0),
        Coordinate2D(1, 0),
        Coordinate2D(0, 1),
        Coordinate2D(0, -1),
    ]


def get_all_numbers(text: str) -> list[int]:
    """Return every (optionally negative) integer found in the text, in order."""
    return [int(match) for match in _NUMBER.findall(text)]


def next_perm(p: Sequence[int]) -> list[int]:
    """Return the swap-index vector that follows ``p`` in enumeration order."""
    result = list(p)
    for i in reversed(range(len(result))):
        if i == 0 or result[i] < len(result) - i - 1:
            result[i] += 1
            break
        result[i] = 0
    return result


def get_perm(orig: Sequence[T], p: Sequence[int]) -> list[T]:
    """Apply the swap-index vector ``p`` to a copy of ``orig``."""
    result = list(orig)
    for i, offset in enumerate(p):
        result[i], result[i + offset] = result[i + offset], result[i]
    return result


def set_bit(n: int, pos: int) -> int:
    return n | (1 << pos)


def has_bit(n: int, pos: int) -> bool:
    return (n & (1 << pos)) > 0


def int_pow(n: int, m: int) -> int:
    """Integer power; exponents below one other than zero yield ``n`` itself."""
    if m == 0:
        return 1
    return n ** max(m, 1)