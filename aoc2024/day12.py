"""Garden Groups: price fences around garden regions."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from dataclasses import dataclass

Pos = tuple[int, int]

_DIRECTIONS: list[Pos] = [(-1, 0), (1, 0), (0, 1), (0, -1)]


@dataclass
class _Region:
    area: int
    perimeter: int
    edges: dict[Pos, set[Pos]]


def _regions(text: str) -> Iterator[_Region]:
    lines = text.replace("\r", "").split("\n")
    grid = {(x, y): ch for y, line in enumerate(lines) for x, ch in enumerate(line)}
    seen: set[Pos] = set()
    for start, plant in grid.items():
        if start in seen:
            continue
        region = {start}
        queue = deque([start])
        perimeter = 0
        edges: dict[Pos, set[Pos]] = defaultdict(set)
        while queue:
            x, y = queue.popleft()
            for d in _DIRECTIONS:
                neighbour = (x + d[0], y + d[1])
                if grid.get(neighbour) == plant:
                    if neighbour not in region:
                        region.add(neighbour)
                        queue.append(neighbour)
                else:
                    perimeter += 1
                    edges[d].add((x, y))
        seen |= region
        yield _Region(len(region), perimeter, edges)


def _count_sides(cells: set[Pos]) -> int:
    """Count the connected groups of edge cells facing one direction."""
    seen: set[Pos] = set()
    sides = 0
    for cell in cells:
        if cell in seen:
            continue
        sides += 1
        seen.add(cell)
        queue = deque([cell])
        while queue:
            x, y = queue.popleft()
            for dx, dy in _DIRECTIONS:
                neighbour = (x + dx, y + dy)
                if neighbour in cells and neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
    return sides


def part1(text: str) -> int:
    return sum(r.area * r.perimeter for r in _regions(text))


def part2(text: str) -> int:
    return sum(
        r.area * sum(_count_sides(cells) for cells in r.edges.values())
        for r in _regions(text)
    )