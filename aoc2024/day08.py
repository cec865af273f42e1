"""Resonant Collinearity: count antinodes of same-frequency antennas."""

from collections import defaultdict


def _solve(text: str, m_start: int, m_end: int) -> int:
    lines = text.split("\n")
    height = len(lines)
    width = len(lines[0])

    antennas: dict[str, list[tuple[int, int]]] = defaultdict(list)
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch != ".":
                antennas[ch].append((x, y))

    antinodes: set[tuple[int, int]] = set()
    for positions in antennas.values():
        for ax, ay in positions:
            for bx, by in positions:
                if (ax, ay) == (bx, by):
                    continue
                for m in range(m_start, m_end):
                    nx = (bx - ax) * m + bx
                    ny = (by - ay) * m + by
                    if not (0 <= nx < width and 0 <= ny < height):
                        break
                    antinodes.add((nx, ny))
    return len(antinodes)


def part1(text: str) -> int:
    return _solve(text, 1, 2)


def part2(text: str) -> int:
    return _solve(text, 0, 1000)