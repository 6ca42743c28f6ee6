import pytest

from algopractice.sudoku import format_grid, is_consistent, is_valid, load, main, solve

PUZZLE_TEXT = """
5 3 0 0 7 0 0 0 0
6 0 0 1 9 5 0 0 0
0 9 8 0 0 0 0 6 0
8 0 0 0 6 0 0 0 3
4 0 0 8 0 3 0 0 1
7 0 0 0 2 0 0 0 6
0 6 0 0 0 0 2 8 0
0 0 0 4 1 9 0 0 5
0 0 0 0 8 0 0 7 9
"""


def _puzzle():
    values = [int(token) for token in PUZZLE_TEXT.split()]
    return [values[r * 9 : (r + 1) * 9] for r in range(9)]


def _empty():
    return [[0] * 9 for _ in range(9)]


def test_is_valid_row_conflict():
    grid = _puzzle()
    assert not is_valid(grid, 0, 2, 5)


def test_is_valid_column_conflict():
    grid = _puzzle()
    assert not is_valid(grid, 2, 0, 8)


def test_is_valid_box_conflict():
    grid = _puzzle()
    assert not is_valid(grid, 1, 1, 9)


def test_is_valid_free_number():
    grid = _empty()
    assert is_valid(grid, 4, 4, 1)


def test_is_consistent_puzzle():
    assert is_consistent(_puzzle())


def test_is_consistent_detects_repeat():
    grid = _empty()
    grid[0][0] = 4
    grid[0][8] = 4
    assert not is_consistent(grid)


def test_is_consistent_rejects_bad_shape():
    with pytest.raises(ValueError):
        is_consistent([[0] * 9])


def test_solve_fills_and_keeps_givens():
    puzzle = _puzzle()
    solution = solve(puzzle)
    assert solution is not None
    assert is_consistent(solution)
    assert all(value != 0 for row in solution for value in row)
    for r in range(9):
        for c in range(9):
            if puzzle[r][c]:
                assert solution[r][c] == puzzle[r][c]
    for row in solution:
        assert sorted(row) == list(range(1, 10))


def test_solve_does_not_modify_input():
    puzzle = _puzzle()
    solve(puzzle)
    assert puzzle == _puzzle()


def test_solve_unsolvable_returns_none():
    grid = _empty()
    grid[0][:8] = list(range(1, 9))
    grid[1][8] = 9
    assert is_consistent(grid)
    assert solve(grid) is None


def test_solve_inconsistent_returns_none():
    grid = _empty()
    grid[0][0] = grid[1][0] = 3
    assert solve(grid) is None


def test_format_and_load_round_trip(tmp_path):
    path = tmp_path / "sudoku.txt"
    path.write_text(format_grid(_puzzle()))
    assert load(path) == _puzzle()


def test_format_grid_first_line():
    assert format_grid(_puzzle()).splitlines()[0] == "5 3 0 0 7 0 0 0 0"


def test_load_too_short(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("1 2 3")
    with pytest.raises(ValueError):
        load(path)


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "No such file or directory" in capsys.readouterr().err


def test_main_prints_solution(tmp_path, capsys):
    path = tmp_path / "sudoku.txt"
    path.write_text(PUZZLE_TEXT)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Sudoku to solve:")
    assert "Solucion:" in out
    assert format_grid(solve(_puzzle())) in out