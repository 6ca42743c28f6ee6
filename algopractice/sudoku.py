"""Sudoku checking and solving by backtracking, with a command that solves a file."""

import argparse
import sys
from pathlib import Path

SIZE = 9
BOX = 3


def _check_shape(grid):
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a sudoku grid must have 9 rows of 9 cells")


def _box_cells(row, col):
    top, left = row - row % BOX, col - col % BOX
    return ((r, c) for r in range(top, top + BOX) for c in range(left, left + BOX))


def is_valid(grid, row, col, number):
    """Return True when ``number`` appears nowhere in the row, column or box of the cell."""
    if number in grid[row]:
        return False
    if any(line[col] == number for line in grid):
        return False
    return all(grid[r][c] != number for r, c in _box_cells(row, col))


def is_consistent(grid):
    """Return True when no filled value repeats in its row, column or box."""
    _check_shape(grid)
    for row in range(SIZE):
        for col in range(SIZE):
            value = grid[row][col]
            if value == 0:
                continue
            grid[row][col] = 0
            valid = is_valid(grid, row, col, value)
            grid[row][col] = value
            if not valid:
                return False
    return True


def solve(grid):
    """Return a solved copy of ``grid`` (0 marks an empty cell), or None if there is none."""
    _check_shape(grid)
    board = [list(row) for row in grid]
    if not is_consistent(board):
        return None
    empty = [(r, c) for r in range(SIZE) for c in range(SIZE) if board[r][c] == 0]

    def fill(index):
        if index == len(empty):
            return True
        row, col = empty[index]
        for number in range(1, SIZE + 1):
            if is_valid(board, row, col, number):
                board[row][col] = number
                if fill(index + 1):
                    return True
        board[row][col] = 0
        return False

    return board if fill(0) else None


def load(path):
    """Read a grid of 81 whitespace-separated digits from ``path``."""
    tokens = Path(path).read_text().split()
    if len(tokens) < SIZE * SIZE:
        raise ValueError(f"expected {SIZE * SIZE} values, found {len(tokens)}")
    values = [int(token) for token in tokens[: SIZE * SIZE]]
    if any(not 0 <= value <= SIZE for value in values):
        raise ValueError("sudoku values must be between 0 and 9")
    return [values[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]


def format_grid(grid):
    """Return the grid as lines of space-separated digits."""
    return "\n".join(" ".join(str(value) for value in row) for row in grid)


def main(argv=None):
    """Solve the sudoku in a file and print it; return the exit status."""
    parser = argparse.ArgumentParser(prog="algopractice-sudoku", description="Solve a sudoku.")
    parser.add_argument("path", nargs="?", default="sudoku.txt")
    args = parser.parse_args(argv)
    try:
        grid = load(args.path)
    except FileNotFoundError:
        print("No such file or directory", file=sys.stderr)
        return 1
    print("Sudoku to solve:")
    print(format_grid(grid))
    solution = solve(grid)
    if solution is not None:
        print("Solucion: ")
        print(format_grid(solution))
    return 0