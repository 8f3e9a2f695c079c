"""Text patterns drawn with asterisks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


def inverted_pyramid(rows: int) -> str:
    """Return an inverted full pyramid of ``rows`` rows of ``"* "`` cells.

    Row ``r`` (counting from 0) is indented by ``r`` spaces and holds
    ``rows - r`` stars. A non-positive row count gives an empty string.
    """
    return "".join(
        " " * (rows - stars) + "* " * stars + "\n"
        for stars in range(rows, 0, -1)
    )


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Print an inverted pyramid; the row count comes from argv or stdin."""
    parser = argparse.ArgumentParser(
        prog="inverted-pyramid",
        description="Print an inverted full pyramid of stars.",
    )
    parser.add_argument("rows", nargs="?", type=int, help="number of rows")
    args = parser.parse_args(argv)

    rows = args.rows
    if rows is None:
        sys.stdout.write("Enter no. of rows ")
        sys.stdout.flush()
        try:
            rows = int(next(_tokens(sys.stdin)))
        except (StopIteration, ValueError):
            print("error: expected an integer row count", file=sys.stderr)
            return 1

    sys.stdout.write(inverted_pyramid(rows))
    return 0