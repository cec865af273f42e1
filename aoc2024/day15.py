"""Warehouse Woes: push boxes around a warehouse with a robot."""

from aoc2024.utils import Coordinate2D

Pos = Coordinate2D
Grid = dict[Coordinate2D, str]

_DIRECTIONS = {
    "^": Coordinate2D(0, -1),
    "v": Coordinate2D(0, 1),
    "<": Coordinate2D(-1, 0),
    ">": Coordinate2D(1, 0),
}
_RIGHT = Coordinate2D(1, 0)
_LEFT = Coordinate2D(-1, 0)


def _dir_to_pos(op: str) -> Pos:
    try:
        return _DIRECTIONS[op]
    except KeyError:
        raise ValueError(f"unknown move instruction: {op!r}") from None


def _parse_blocks(text: str) -> list[str]:
    return text.replace("\r", "").split("\n\n")


def _parse_map(block: str) -> tuple[Grid, Pos]:
    grid: Grid = {}
    robot = Coordinate2D(0, 0)
    for y, line in enumerate(block.split("\n")):
        for x, ch in enumerate(line):
            p = Coordinate2D(x, y)
            if ch == "@":
                robot = p
            grid[p] = ch
    return grid, robot


def _can_move(grid: Grid, obj: Pos, d: Pos) -> bool:
    tile = grid.get(obj, "")
    if tile == ".":
        return True
    if tile == "#":
        return False

    nxt = obj.add(d)
    if tile in ("@", "O") or d.y == 0:
        return _can_move(grid, nxt, d)
    if tile == "[":
        return _can_move(grid, nxt, d) and _can_move(grid, nxt.add(_RIGHT), d)
    if tile == "]":
        return _can_move(grid, nxt, d) and _can_move(grid, nxt.add(_LEFT), d)
    raise ValueError(f"unexpected tile: {tile!r}")


def _move(grid: Grid, obj: Pos, d: Pos, visited: set[Pos]) -> None:
    tile = grid.get(obj, "")
    if tile == "." or obj in visited:
        return
    visited.add(obj)

    nxt = obj.add(d)
    _move(grid, nxt, d, visited)

    if d.x == 0:
        if tile == "[":
            _move(grid, obj.add(_RIGHT), d, visited)
        elif tile == "]":
            _move(grid, obj.add(_LEFT), d, visited)

    grid[nxt] = grid.get(obj, "")
    grid[obj] = "."


def _run_instructions(block: str, grid: Grid, robot: Pos) -> None:
    for line in block.split("\n"):
        for op in line:
            d = _dir_to_pos(op)
            if _can_move(grid, robot, d):
                _move(grid, robot, d, set())
                robot = robot.add(d)


def _sum_of_gps(grid: Grid) -> int:
    return sum(p.x + p.y * 100 for p, tile in grid.items() if tile in ("O", "["))


def part1(text: str) -> int:
    blocks = _parse_blocks(text)
    grid, robot = _parse_map(blocks[0])
    _run_instructions(blocks[1], grid, robot)
    return _sum_of_gps(grid)


def part2(text: str) -> int:
    widened = (
        text.replace("#", "##")
        .replace("O", "[]")
        .replace(".", "..")
        .replace("@", "@.")
    )
    return part1(widened)