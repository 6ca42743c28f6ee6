"""Every placement of non-attacking queens on a square board, and a text rendering."""


def _check_square(x, y, size):
    if size < 1:
        raise ValueError(f"board size must be at least 1, got {size}")
    if not (0 <= x < size and 0 <= y < size):
        raise ValueError(f"square ({x}, {y}) is off a {size}x{size} board")


def attacked_squares(x, y, size=8):
    """Return the squares a queen on (x, y) attacks: its column, row and diagonals."""
    _check_square(x, y, size)
    squares = set()
    for i in range(size):
        squares.add((x, i))
        squares.add((i, y))
    for dx, dy in ((1, 1), (-1, -1), (1, -1), (-1, 1)):
        cx, cy = x + dx, y + dy
        while 0 <= cx < size and 0 <= cy < size:
            squares.add((cx, cy))
            cx += dx
            cy += dy
    squares.discard((x, y))
    return frozenset(squares)


def solve_queens(size=8):
    """Return every way to place ``size`` mutually safe queens, one per column.

    Each solution is a tuple of (x, y) squares ordered by column.
    """
    if size < 1:
        raise ValueError(f"board size must be at least 1, got {size}")
    solutions = []
    rows = []
    used_rows = set()
    used_diagonals = set()
    used_antidiagonals = set()

    def place(x):
        if x == size:
            solutions.append(tuple(enumerate(rows)))
            return
        for y in range(size):
            if y in used_rows or x - y in used_diagonals or x + y in used_antidiagonals:
                continue
            rows.append(y)
            used_rows.add(y)
            used_diagonals.add(x - y)
            used_antidiagonals.add(x + y)
            place(x + 1)
            rows.pop()
            used_rows.remove(y)
            used_diagonals.remove(x - y)
            used_antidiagonals.remove(x + y)

    place(0)
    return solutions


def render_board(queens, size=8):
    """Return the board as text with a ``Q`` on every queen's square."""
    placed = set()
    for x, y in queens:
        _check_square(x, y, size)
        placed.add((x, y))
    border = " " + " ".join("---" for _ in range(size)) + " "
    lines = [border]
    for y in range(size):
        cells = "".join("| Q " if (x, y) in placed else "|   " for x in range(size))
        lines.append(cells + "|")
        lines.append(border)
    return "\n".join(lines)