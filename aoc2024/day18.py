"""RAM Run: find paths through a memory grid as bytes fall into it."""

from __future__ import annotations

import sys
from collections import deque

from aoc2024.utils import Coordinate2D, get_2d_directions, get_all_numbers

UNREACHABLE = sys.maxsize


def part1(text: str, drops: int, ex: int, ey: int) -> int:
    """Shortest step count from the origin to (ex, ey) after ``drops`` bytes fall."""
    lines = text.split("\n")
    blocked = set()
    for line in lines[:drops] if drops <= len(lines) else [lines[drops]]:
        x, y = get_all_numbers(line)[:2]
        blocked.add(Coordinate2D(x, y))

    origin = Coordinate2D(0, 0)
    end = Coordinate2D(ex, ey)
    distances = {origin: 0}
    queue = deque([origin])
    shortest = UNREACHABLE
    while queue:
        current = queue.popleft()
        dist = distances[current]
        if current == end:
            shortest = min(shortest, dist)
        for d in get_2d_directions():
            n = current.add(d)
            if 0 <= n.x <= ex and 0 <= n.y <= ey and n not in distances and n not in blocked:
                distances[n] = dist + 1
                queue.append(n)
    return shortest


def part2(text: str, ex: int, ey: int) -> list[int]:
    """Coordinates of the first byte that cuts the exit off."""
    lines = text.split("\n")
    low, high = 0, len(lines)
    while high - low > 1:
        mid = low + (high - low) // 2
        if part1(text, mid, ex, ey) == UNREACHABLE:
            high = mid
        else:
            low = mid
    x, y = get_all_numbers(lines[low])[:2]
    return [x, y]