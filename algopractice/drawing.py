"""Text drawings: domino values, a square border and nested square borders."""


def domino_pairs():
    """Return every pair of pip values from 0 to 6, in the order they are listed."""
    return [(left, right) for left in range(7) for right in range(7)]


def border_square(size):
    """Return the rows of a square border of ``#`` with sides of ``size``."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    full = "#" * size
    inner = "#" + " " * (size - 2) + "#" if size > 1 else full
    return [full if row in (0, size - 1) else inner for row in range(size)]


def _inscribed_cell(row, col, side):
    if row % 2 == 0:
        if col % 2 == 0:
            return True
        return (row < col < side - row) or (side - row <= col < row)
    if col % 2 == 0:
        return (col < row < side - col) or (col > row and row >= side - col)
    return False


def inscribed_squares(size):
    """Return the rows of odd-sized square borders from ``size`` down to 1, nested."""
    if size % 2 == 0:
        raise ValueError(f"size must be odd, got {size}")
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return [
        "".join("#" if _inscribed_cell(row, col, size) else " " for col in range(size))
        for row in range(size)
    ]