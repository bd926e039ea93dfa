"""
Stream printers for quick inspection of vectors and matrices.

Unlike the CSV writers, every line written here ends with a newline,
the last one included.
"""

import sys

from .core import format_rows, format_sequence, format_grid, grid_rows


def _out(stream):
    return sys.stdout if stream is None else stream


def print_sequence(seq, stream=None) -> None:
    """Write one value per line."""
    _out(stream).write(format_sequence(seq))


def print_triples(seq, stream=None) -> None:
    """Write each 3-item group as "a,b,c" on its own line."""
    _out(stream).write(format_rows(grid_rows(seq, columns=3)))


def print_grid(grid, stream=None) -> None:
    """Write each row as comma-joined values on its own line."""
    _out(stream).write(format_grid(grid))
