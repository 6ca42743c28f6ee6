"""Depth-first search for the goal cell of a grid maze, and a text rendering of it."""

FREE = 0
WALL = 1
GOAL = 2
TRAIL = 3
CURRENT = 4

MAZE = (
    (0, 0, 0, 0, 0),
    (1, 1, 1, 0, 1),
    (1, 2, 1, 0, 0),
    (0, 0, 0, 1, 0),
    (0, 1, 0, 0, 0),
)

# (row step, column step): right, down, left, up
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))

_SYMBOLS = {FREE: " ", WALL: "#", GOAL: "X", TRAIL: ".", CURRENT: "@"}


def _check_grid(grid):
    if not grid or not grid[0]:
        raise ValueError("a maze needs at least one cell")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all maze rows must have the same length")


def _neighbours(grid, cell):
    row, col = cell
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] != WALL:
            yield (r, c)


def solve_maze(grid=MAZE, start=(0, 0)):
    """Return the path of (row, col) cells from ``start`` to the goal cell, or None.

    Moves are tried in the order right, down, left, up, and no cell is entered twice.
    """
    _check_grid(grid)
    row, col = start
    if not (0 <= row < len(grid) and 0 <= col < len(grid[0])):
        raise ValueError(f"start {start} is outside the maze")
    if grid[row][col] == WALL:
        raise ValueError(f"start {start} is a wall")
    start = (row, col)
    if grid[row][col] == GOAL:
        return [start]
    path = [start]
    visited = {start}
    frontier = [_neighbours(grid, start)]
    while frontier:
        step = next(frontier[-1], None)
        if step is None:
            frontier.pop()
            path.pop()
            continue
        if step in visited:
            continue
        path.append(step)
        if grid[step[0]][step[1]] == GOAL:
            return path
        visited.add(step)
        frontier.append(_neighbours(grid, step))
    return None


def render(grid):
    """Return the maze drawn as a text board.

    Walls show as ``#``, the goal as ``X``, a trail as ``.`` and the walker as ``@``.
    """
    _check_grid(grid)
    border = " " + " ".join("---" for _ in grid[0]) + " "
    lines = []
    for row in grid:
        lines.append(border)
        try:
            cells = "".join(f"| {_SYMBOLS[value]} " for value in row)
        except KeyError as error:
            raise ValueError(f"unknown maze cell value {error.args[0]!r}") from None
        lines.append(cells + "|")
    lines.append(border)
    return "\n".join(lines)