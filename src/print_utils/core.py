"""
===========================================================
print_utils.core — row adapters and text formatting
===========================================================

Every writer and printer in the package is the same loop: walk an
addressable collection of rows, str() each value, join with a comma,
end each line with a newline. This module holds that loop once, plus
thin adapters that present each container shape as "rows":

  - GridRows      : explicit-count 2D block (rows x columns)
  - SequenceRows  : explicit-count 1D run, one value per row
  - PairedRows    : two 1D sequences zipped into two-column rows
  - grid_rows()   : GridRows with counts taken from the container
  - sequence_rows(): SequenceRows with the count taken from the container

Shape problems (ragged grids, short buffers, mismatched pairs) are
raised as ShapeError when the adapter is built, before any output
is produced.
"""

# --- Imports --------------------------------------------------------------

import numpy as np

from .exceptions import ShapeError


# --- Configuration --------------------------------------------------------

SEPARATOR = ","
NEWLINE = "\n"


# --- Shape checks ---------------------------------------------------------

def _check_count(name: str, value: int) -> int:
    value = int(value)
    if value < 0:
        raise ShapeError(f"{name} must be >= 0, got {value}")
    return value


def _check_ndim(M, ndim: int, what: str) -> None:
    """Reject NumPy arrays of the wrong rank (lists are checked row by row)."""
    if isinstance(M, np.ndarray) and M.ndim != ndim:
        raise ShapeError(f"{what} expects a {ndim}D array, got shape {M.shape}")


# --- Row adapters ---------------------------------------------------------

class GridRows:
    """
    Leading rows x columns block of a two-index container (M[i][j]).

    Parameters
    ----------
    M : sequence of sequences or np.ndarray
        Row-major data. Only the first `rows` rows and the first
        `columns` items of each are read.
    rows, columns : int
        Block size. Must not exceed the data.
    """

    def __init__(self, M, rows: int, columns: int):
        _check_ndim(M, 2, "GridRows")
        self.rows = _check_count("rows", rows)
        self.columns = _check_count("columns", columns)
        if len(M) < self.rows:
            raise ShapeError(f"grid has {len(M)} rows, {self.rows} requested")
        for i in range(self.rows):
            if len(M[i]) < self.columns:
                raise ShapeError(
                    f"row {i} has {len(M[i])} columns, {self.columns} requested")
        self._M = M

    def __len__(self) -> int:
        return self.rows

    def row(self, i: int):
        r = self._M[i]
        return [r[j] for j in range(self.columns)]


class SequenceRows:
    """First n items of a flat container, one value per row."""

    def __init__(self, M, n: int):
        _check_ndim(M, 1, "SequenceRows")
        self.n = _check_count("n", n)
        if len(M) < self.n:
            raise ShapeError(f"sequence has {len(M)} items, {self.n} requested")
        self._M = M

    def __len__(self) -> int:
        return self.n

    def row(self, i: int):
        return [self._M[i]]


class PairedRows:
    """Two equal-length sequences zipped into (x[i], y[i]) rows."""

    def __init__(self, x, y):
        _check_ndim(x, 1, "PairedRows")
        _check_ndim(y, 1, "PairedRows")
        if len(x) != len(y):
            raise ShapeError(
                f"paired sequences differ in length: {len(x)} != {len(y)}")
        self._x = x
        self._y = y

    def __len__(self) -> int:
        return len(self._x)

    def row(self, i: int):
        return [self._x[i], self._y[i]]


def grid_rows(M, columns: int = None) -> GridRows:
    """
    Present a nested container as a GridRows block.

    The first row's length is the column count unless `columns` is
    given; every row must then have exactly that many items.
    """
    _check_ndim(M, 2, "grid_rows")
    rows = len(M)
    if columns is None:
        columns = len(M[0]) if rows else 0
    for i in range(rows):
        if len(M[i]) != columns:
            raise ShapeError(
                f"ragged grid: row {i} has {len(M[i])} columns, expected {columns}")
    return GridRows(M, rows, columns)


def sequence_rows(M) -> SequenceRows:
    return SequenceRows(M, len(M))


# --- Formatting -----------------------------------------------------------

def format_value(v) -> str:
    """Default text of a scalar: str(), no fixed precision, no quoting."""
    return str(v)


def format_row(values) -> str:
    return SEPARATOR.join(format_value(v) for v in values)


def format_rows(rows, terminate_last: bool = True) -> str:
    """
    Render an addressable collection of rows as delimited text.

    Parameters
    ----------
    rows : GridRows | SequenceRows | PairedRows
        Anything with len() and row(i).
    terminate_last : bool
        If False, the final line carries no trailing newline (the
        1D and paired CSV layout). Grids and stream output use True.

    Returns
    -------
    text : str
        Lines joined by "\\n"; "" for zero rows.
    """
    lines = [format_row(rows.row(i)) for i in range(len(rows))]
    text = NEWLINE.join(lines)
    if terminate_last and lines:
        text += NEWLINE
    return text


def format_sequence(seq) -> str:
    """One value per line, newline after every value including the last."""
    return format_rows(sequence_rows(seq), terminate_last=True)


def format_grid(grid) -> str:
    """Comma-joined rows, newline after every row including the last."""
    return format_rows(grid_rows(grid), terminate_last=True)
