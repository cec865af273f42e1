"""Guard Gallivant: trace a patrolling guard and find loop-causing obstacles."""

from __future__ import annotations

from dataclasses import dataclass

_DIRECTIONS = [(0, -1), (1, 0), (0, 1), (-1, 0)]


@dataclass(frozen=True)
class _Lab:
    obstructions: frozenset[tuple[int, int]]
    free: tuple[tuple[int, int], ...]
    start: tuple[int, int]
    width: int
    height: int


def _parse(text: str) -> _Lab:
    lines = text.split("\n")
    obstructions = set()
    free = []
    start = (0, 0)
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch == "#":
                obstructions.add((x, y))
            elif ch == "^":
                start = (x, y)
            elif ch == ".":
                free.append((x, y))
    return _Lab(frozenset(obstructions), tuple(free), start, len(lines[0]), len(lines))


def _walk(lab: _Lab, extra: tuple[int, int] | None = None) -> tuple[set[tuple[int, int]], bool]:
    """Return the cells the guard visits and whether the patrol loops."""
    blocked = lab.obstructions | {extra} if extra is not None else lab.obstructions
    x, y = lab.start
    d = 0
    visited: set[tuple[int, int, int]] = set()
    looped = False
    while 0 <= x < lab.width and 0 <= y < lab.height:
        state = (x, y, d)
        if state in visited:
            looped = True
            break
        visited.add(state)
        for turns in range(4):
            nd = (d + turns) % 4
            dx, dy = _DIRECTIONS[nd]
            if (x + dx, y + dy) not in blocked:
                x, y, d = x + dx, y + dy, nd
                break
    return {(vx, vy) for vx, vy, _ in visited}, looped


def part1(text: str) -> int:
    positions, _ = _walk(_parse(text))
    return len(positions)


def part2(text: str) -> int:
    lab = _parse(text)
    return sum(1 for cell in lab.free if _walk(lab, cell)[1])