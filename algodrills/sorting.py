"""Bubble sort and merge sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using bubble sort.

    Every pass walks the whole list, ``len - 1`` passes in all.
    """
    items = list(values)
    last = len(items) - 1
    for _ in range(last):
        for j in range(last):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list, stable on ties."""
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read integers from stdin and print them sorted."""
    parser = argparse.ArgumentParser(
        prog="sort-numbers",
        description="Read a count and that many integers, then print them sorted.",
    )
    parser.add_argument(
        "--algorithm",
        choices=("bubble", "merge"),
        default="merge",
        help="sorting algorithm to use (default: merge)",
    )
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        sys.stdout.write("Enter no of elements in the array:")
        sys.stdout.flush()
        count = int(next(tokens))
        if count < 0:
            raise ValueError("element count must not be negative")
        sys.stdout.write("Enter array to be sorted:\n")
        sys.stdout.flush()
        values = [int(next(tokens)) for _ in range(count)]
    except (StopIteration, ValueError) as exc:
        message = str(exc) or "unexpected end of input"
        print(f"error: {message}", file=sys.stderr)
        return 1

    if args.algorithm == "bubble":
        result = bubble_sort(values)
        sys.stdout.write("Sorted array: \n")
        sys.stdout.write("".join(f"{value} " for value in result))
    else:
        result = merge_sort(values)
        sys.stdout.write("\nSorted array is \n")
        sys.stdout.write("".join(f"{value} " for value in result) + "\n")
    return 0