"""Classic in-place sorting algorithms and a command to generate and sort data files."""

import argparse
import random
import sys
from pathlib import Path

DEFAULT_COUNT = 100000


def selection_sort(values):
    """Sort a list in place by repeatedly selecting the minimum."""
    n = len(values)
    for j in range(n - 1):
        pos_min = min(range(j, n), key=values.__getitem__)
        values[j], values[pos_min] = values[pos_min], values[j]


def bubble_sort(values):
    """Sort a list in place by bubbling, stopping early when a pass makes no swap."""
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if values[i] > values[i + 1]:
                values[i], values[i + 1] = values[i + 1], values[i]
                swapped = True
        if not swapped:
            break


def insertion_sort(values):
    """Sort a list in place by inserting each element into the sorted prefix."""
    for i in range(1, len(values)):
        value = values[i]
        hole = i
        while hole > 0 and values[hole - 1] > value:
            values[hole] = values[hole - 1]
            hole -= 1
        values[hole] = value


def merge(values, left, mid, right):
    """Merge the sorted runs values[left..mid] and values[mid+1..right] in place."""
    if not 0 <= left <= mid <= right < len(values):
        raise ValueError(f"invalid merge bounds {left}, {mid}, {right} for length {len(values)}")
    lower = values[left : mid + 1]
    upper = values[mid + 1 : right + 1]
    merged = []
    i = j = 0
    while i < len(lower) and j < len(upper):
        if lower[i] <= upper[j]:
            merged.append(lower[i])
            i += 1
        else:
            merged.append(upper[j])
            j += 1
    merged.extend(lower[i:])
    merged.extend(upper[j:])
    values[left : right + 1] = merged


def merge_sort_iterative(values):
    """Sort a list in place with bottom-up merge sort."""
    n = len(values)
    size = 1
    while size < n:
        for left in range(0, n - 1, 2 * size):
            mid = min(left + size - 1, n - 1)
            right = min(left + 2 * size - 1, n - 1)
            merge(values, left, mid, right)
        size *= 2


def merge_sort_recursive(values):
    """Sort a list in place with top-down merge sort."""

    def _sort(start, end):
        if start < end:
            mid = (start + end) // 2
            _sort(start, mid)
            _sort(mid + 1, end)
            merge(values, start, mid, end)

    _sort(0, len(values) - 1)


def partition(values, start, end):
    """Partition values[start..end] around values[end]; return the pivot's final index."""
    pivot = values[end]
    p_index = start
    for i in range(start, end):
        if values[i] <= pivot:
            values[i], values[p_index] = values[p_index], values[i]
            p_index += 1
    values[p_index], values[end] = values[end], values[p_index]
    return p_index


def quicksort(values, rng=None):
    """Sort a list in place with quicksort.

    With an ``rng`` (a ``random.Random``) the pivot is chosen at random;
    without one the last element of each range is the pivot.
    """
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        if rng is not None:
            pick = rng.randint(start, end)
            values[pick], values[end] = values[end], values[pick]
        p_index = partition(values, start, end)
        pending.append((start, p_index - 1))
        pending.append((p_index + 1, end))


def _random_quicksort(values):
    quicksort(values, random.Random())


ALGORITHMS = {
    "selection": selection_sort,
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "merge": merge_sort_iterative,
    "merge-recursive": merge_sort_recursive,
    "quick": _random_quicksort,
}


def generate_data(count=DEFAULT_COUNT, path="file.txt", rng=None):
    """Write ``count`` random integers in [0, count) to ``path``, one per line."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng if rng is not None else random.Random()
    values = [rng.randrange(count) for _ in range(count)]
    Path(path).write_text("".join(f"{value}\n" for value in values))
    return values


def sort_file(source="file.txt", target="output.txt", algorithm="quick", limit=None):
    """Read integers from ``source``, sort them and write them to ``target``.

    At most ``limit`` numbers are read when a limit is given. Returns the sorted list.
    """
    try:
        sorter = ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(f"unknown algorithm {algorithm!r}") from None
    values = [int(token) for token in Path(source).read_text().split()]
    if limit is not None:
        values = values[:limit]
    sorter(values)
    Path(target).write_text("".join(f"{value}\n" for value in values))
    return values


def _build_parser():
    parser = argparse.ArgumentParser(prog="algopractice-sort", description="Generate and sort integer data.")
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="write random integers to a file")
    generate.add_argument("count", nargs="?", type=int, default=DEFAULT_COUNT)
    generate.add_argument("--output", default="file.txt")

    sort = commands.add_parser("sort", help="sort integers from one file into another")
    sort.add_argument("algorithm", choices=sorted(ALGORITHMS))
    sort.add_argument("--input", default="file.txt")
    sort.add_argument("--output", default="output.txt")
    sort.add_argument("--limit", type=int, default=DEFAULT_COUNT)

    commands.add_parser("stdin", help="read a count and that many integers from standard input")
    return parser


def main(argv=None):
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    if args.command == "generate":
        print(f"generating {args.count} numbers")
        generate_data(args.count, args.output)
        print(f"Numbers saved >> {args.output}")
        print("Successful generation")
    elif args.command == "sort":
        sort_file(args.input, args.output, args.algorithm, args.limit)
    else:
        tokens = sys.stdin.read().split()
        if not tokens:
            raise SystemExit("expected a count on standard input")
        count = int(tokens[0])
        values = [int(token) for token in tokens[1 : 1 + count]]
        quicksort(values)
        sys.stdout.write("".join(f"{value} " for value in values))
    return 0