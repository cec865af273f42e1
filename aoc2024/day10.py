"""Hoof It: score and rate hiking trails on a topographic map."""

_STEPS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def _routes_from(
    grid: list[str],
    x: int,
    y: int,
    walked: set[tuple[int, int]] | None,
) -> int:
    """Count trail ends from (x, y); with ``walked`` each cell counts once."""
    if walked is not None:
        if (x, y) in walked:
            return 0
        walked.add((x, y))

    current = grid[y][x]
    if current == "9":
        return 1

    wanted = chr(ord(current) + 1)
    width = len(grid[0])
    routes = 0
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < len(grid) and grid[ny][nx] == wanted:
            routes += _routes_from(grid, nx, ny, walked)
    return routes


def _solve(text: str, distinct_ends: bool) -> int:
    grid = text.split("\n")
    return sum(
        _routes_from(grid, x, y, set() if distinct_ends else None)
        for y, line in enumerate(grid)
        for x, ch in enumerate(line)
        if ch == "0"
    )


def part1(text: str) -> int:
    return _solve(text, True)


def part2(text: str) -> int:
    return _solve(text, False)