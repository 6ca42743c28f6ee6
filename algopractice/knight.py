"""Knight's tour on a square board by backtracking, and a text rendering of a tour."""

_JUMPS = ((2, 1), (2, -1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2))


def _check_square(x, y, size):
    if size < 1:
        raise ValueError(f"board size must be at least 1, got {size}")
    if not (0 <= x < size and 0 <= y < size):
        raise ValueError(f"square ({x}, {y}) is off a {size}x{size} board")


def knight_moves(x, y, size=8):
    """Return the squares a knight on (x, y) can jump to, in a fixed order."""
    _check_square(x, y, size)
    return [
        (x + dx, y + dy)
        for dx, dy in _JUMPS
        if 0 <= x + dx < size and 0 <= y + dy < size
    ]


def knights_tour(size=8, start=(0, 0)):
    """Return a list of squares visiting every square once by knight moves, or None.

    The search backtracks, trying first the squares with the fewest onward moves.
    """
    x, y = start
    _check_square(x, y, size)
    start = (x, y)
    total = size * size
    tour = [start]
    visited = {start}

    def ordered(square):
        candidates = [m for m in knight_moves(*square, size) if m not in visited]
        candidates.sort(
            key=lambda m: sum(1 for n in knight_moves(*m, size) if n not in visited)
        )
        return iter(candidates)

    stack = [ordered(start)]
    while stack:
        if len(tour) == total:
            return tour
        step = next(stack[-1], None)
        if step is None:
            stack.pop()
            visited.remove(tour.pop())
            continue
        if step in visited:
            continue
        visited.add(step)
        tour.append(step)
        stack.append(ordered(step))
    return None


def render_board(tour, size=8):
    """Return the board as text: the knight's square as ``C``, squares passed as ``-``."""
    tour = list(tour)
    for x, y in tour:
        _check_square(x, y, size)
    passed = set(tour[:-1])
    knight = tour[-1] if tour else None
    border = " " + " ".join("---" for _ in range(size)) + " "
    lines = []
    for y in range(size):
        lines.append(border)
        cells = []
        for x in range(size):
            if (x, y) == knight:
                cells.append(" C |")
            elif (x, y) in passed:
                cells.append(" - |")
            else:
                cells.append("   |")
        lines.append("|" + "".join(cells))
    lines.append(border)
    return "\n".join(lines)