"""Matrix transposition."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix given as rows."""
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*rows)]


def format_transpose(matrix: Sequence[Sequence[int]]) -> str:
    """Render the transpose: a heading, then each column on its own line.

    Every column starts with a newline and each value is followed by a tab.
    """
    body = "".join(
        "\n" + "".join(f"{value}\t" for value in column)
        for column in transpose(matrix)
    )
    return "The transpose is\n" + body


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    return int(next(tokens))


def main(argv: list[str] | None = None) -> int:
    """Read a matrix from stdin and print its transpose."""
    parser = argparse.ArgumentParser(
        prog="matrix-transpose",
        description="Read a matrix from standard input and print its transpose.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        sys.stdout.write("Enter the rows of matrix ")
        sys.stdout.flush()
        rows = _read_int(tokens)
        sys.stdout.write("Enter the number of columns ")
        sys.stdout.flush()
        columns = _read_int(tokens)
        if rows < 0 or columns < 0:
            raise ValueError("dimensions must not be negative")
        sys.stdout.write("Enter the elements of the matrix\n")
        sys.stdout.flush()
        matrix = [[_read_int(tokens) for _ in range(columns)] for _ in range(rows)]
    except (StopIteration, ValueError) as exc:
        message = str(exc) or "unexpected end of input"
        print(f"error: {message}", file=sys.stderr)
        return 1

    sys.stdout.write(format_transpose(matrix))
    return 0