"""Reindeer Maze: find the cheapest path and the tiles on any cheapest path."""

from __future__ import annotations

import sys
from collections import defaultdict, deque

from aoc2024.utils import Coordinate2D, get_2d_directions

Pos = Coordinate2D
State = tuple[Coordinate2D, Coordinate2D]

_EAST = Coordinate2D(1, 0)
_TURN_COST = 1000
UNREACHABLE = sys.maxsize


def _parse(text: str) -> tuple[Pos, Pos, list[str]]:
    start = Coordinate2D(0, 0)
    end = Coordinate2D(0, 0)
    lines = text.split("\n")
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch == "S":
                start = Coordinate2D(x, y)
            elif ch == "E":
                end = Coordinate2D(x, y)
    return start, end, lines


def _search(lines: list[str], start: Pos, end: Pos) -> tuple[int, dict[State, int]]:
    """Return the best score to the end and the best score for every (pos, dir)."""
    best = UNREACHABLE
    closed: dict[State, int] = {(start, _EAST): 0}
    queue: deque[tuple[Pos, Pos, int]] = deque([(start, _EAST, 0)])
    while queue:
        pos, facing, score = queue.popleft()
        if pos == end and score < best:
            best = score

        for d in get_2d_directions():
            n = pos.add(d)
            if lines[n.y][n.x] == "#":
                continue
            next_score = score + 1 + (_TURN_COST if d != facing else 0)
            key = (n, d)
            if key not in closed or closed[key] > next_score:
                closed[key] = next_score
                queue.append((n, d, next_score))
    return best, closed


def _backtrack(start: Pos, end: Pos, best: int, scores: dict[State, int]) -> int:
    """Count tiles that lie on a score chain from the end back to the start."""
    nodes: dict[Pos, list[int]] = defaultdict(list)
    for (pos, _), score in scores.items():
        nodes[pos].append(score)

    origin = (end, best)
    successors: dict[tuple[Pos, int], list[tuple[Pos, int]]] = {}
    pending = deque([origin])
    seen = {origin}
    while pending:
        state = pending.popleft()
        pos, score = state
        if pos == start:
            successors[state] = []
            continue
        nexts = [
            (n, other)
            for d in get_2d_directions()
            for n in (pos.add(d),)
            for other in nodes.get(n, ())
            if other in (score - 1, score - 1 - _TURN_COST)
        ]
        successors[state] = nexts
        for nxt in nexts:
            if nxt not in seen:
                seen.add(nxt)
                pending.append(nxt)

    predecessors: dict[tuple[Pos, int], list[tuple[Pos, int]]] = defaultdict(list)
    for state, nexts in successors.items():
        for nxt in nexts:
            predecessors[nxt].append(state)

    found = {state for state in successors if state[0] == start}
    frontier = deque(found)
    while frontier:
        state = frontier.popleft()
        for prev in predecessors[state]:
            if prev not in found:
                found.add(prev)
                frontier.append(prev)

    tiles = {start, end} | {pos for pos, _ in found}
    return len(tiles)


def part1(text: str) -> int:
    start, end, lines = _parse(text)
    score, _ = _search(lines, start, end)
    return score


def part2(text: str) -> int:
    start, end, lines = _parse(text)
    score, scores = _search(lines, start, end)
    return _backtrack(start, end, score, scores)