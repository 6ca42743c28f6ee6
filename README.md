# algopractice

Classic programming exercises as a small Python library, with two
command-line tools.

## Modules

- `algopractice.sorting`: in-place `selection_sort`, `bubble_sort`,
  `insertion_sort`, `merge_sort_iterative`, `merge_sort_recursive` and
  `quicksort` (last-element pivot, or a random pivot when given a
  `random.Random`), plus `merge`, `partition`, `generate_data` (random
  integers in `[0, count)` written one per line) and `sort_file`.
- `algopractice.power`: `recursive_power`, `iterative_power`,
  `binary_exponentiation_recursive`, `binary_exponentiation_iterative`,
  `modular_exponentiation`, `modular_exponentiation_iterative` and
  `float_power`. Negative exponents raise `ValueError`.
- `algopractice.linked_list`: `LinkedList`, a singly linked list with a
  header node and position-based access (`first`, `last`, `next`, `get`,
  `insert`, `delete`, `is_empty`), plus `len()` and iteration.
- `algopractice.counter`: `BaseCounter.increment` counts and prints
  `count = N`; `DerivedCounter` inherits it unchanged.
- `algopractice.numbers`: `reverse_number`, `reverse_four_digits`,
  `binary_to_decimal`, `is_palindrome`, `greater`, `in_interval`,
  `digit_count`, `parity_summary` (returns a `ParitySummary`),
  `fibonacci`, `fibonacci_shifted`, `fibonacci_recursive`,
  `fibonacci_terms` and `find_subpalindromes`.
- `algopractice.formulas`: `quadratic_roots`, `triangle_area`,
  `hypotenuse`, `clock_angle`, `elapsed_seconds` and `parking_fee`
  (100 for the first hour or fraction, 80 for each further one).
- `algopractice.drawing`: `domino_pairs`, `border_square` and
  `inscribed_squares`, returning rows of text.
- `algopractice.recursion`: `factorial`, `factorial_recursive`,
  `sum_first_odds`, `gcd`, `first_digit`, `palindromes_from_digits`,
  `knapsack_best`, `goldbach_pairs`, `count_up` and `count_down`.
- `algopractice.sudoku`: `is_valid`, `is_consistent`, `solve` (returns a
  solved copy or `None`), `load` and `format_grid`.
- `algopractice.maze`: `solve_maze` (depth-first path to the goal cell)
  and `render`.
- `algopractice.knight`: `knight_moves`, `knights_tour` and `render_board`.
- `algopractice.queens`: `attacked_squares`, `solve_queens` (every
  solution) and `render_board`.

## Installation

```console
pip install .
```

To run the tests:

```console
pip install ".[test]"
pytest
```

## Library use

```python
from algopractice.sorting import merge_sort_recursive
from algopractice.power import modular_exponentiation
from algopractice.numbers import fibonacci_terms, is_palindrome
from algopractice.recursion import gcd
from algopractice.queens import solve_queens, render_board

values = [4, 3, 1, 5, 2]
merge_sort_recursive(values)
print(values)                            # [1, 2, 3, 4, 5]

print(modular_exponentiation(3, 200, 13))
print(fibonacci_terms(8))                # [0, 1, 1, 2, 3, 5, 8, 13]
print(is_palindrome(12321))              # True
print(gcd(12, 18))                       # 6

solutions = solve_queens(8)
print(len(solutions))                    # 92
print(render_board(solutions[0], 8))
```

The linked list works with positions:

```python
from algopractice.linked_list import LinkedList

items = LinkedList()
items.insert(items.first(), 3)
print(items.get(items.first()))          # 3
print(len(items), list(items))           # 1 [3]
```

## Command-line tools

### `algopractice-sort`

```console
algopractice-sort generate [COUNT] [--output file.txt]
algopractice-sort sort ALGORITHM [--input file.txt] [--output output.txt] [--limit 100000]
algopractice-sort stdin
```

- `generate` writes `COUNT` (default 100000) random integers to the
  output file, one per line.
- `sort` reads at most `--limit` integers from the input file, sorts them
  with `ALGORITHM` (`bubble`, `insertion`, `merge`, `merge-recursive`,
  `quick`, `selection`) and writes them one per line.
- `stdin` reads a count and then that many integers from standard input
  and prints them sorted, separated by spaces.

### `algopractice-sudoku`

```console
algopractice-sudoku [PATH]
```

Reads nine rows of nine numbers (`0` for an empty cell) from `PATH`
(default `sudoku.txt`), prints the puzzle under `Sudoku to solve:`, and
prints the solution under `Solucion:` when there is one. A missing file
prints `No such file or directory` and exits with status 1.

## What it does not do

The maze, knight's tour and queens modules compute results and return
text drawings; they do not animate the search or clear the terminal. The
number and formula exercises are plain functions with no interactive
prompts.