"""Classic algorithm and data-structure exercises: sorting, recursion, backtracking and number puzzles."""

__version__ = "0.1.0"