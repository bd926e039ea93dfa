"""
===========================================================
print_utils.io — write arrays, vectors and matrices as CSV
===========================================================

Output format (fixed, not configurable):
  - comma separator, no header, no quoting or escaping
  - values rendered with str()
  - ".csv" is always appended to the base name; existing files are
    overwritten, never appended to

Line terminators differ by shape:
  - grids    (save_grid_csv, save_matrix_csv): newline after EVERY row
  - 1D/paired (save_array_csv, save_vector_csv, save_xy_csv): no newline
    after the final line
"""

# --- Imports --------------------------------------------------------------

from pathlib import Path

from .core import (
    GridRows,
    PairedRows,
    SequenceRows,
    format_rows,
    grid_rows,
    sequence_rows,
)
from .exceptions import CSVWriteError
from .logging_config import get_logger


# --- Configuration --------------------------------------------------------

CSV_SUFFIX = ".csv"

logger = get_logger("io")


# --- Helpers --------------------------------------------------------------

def csv_path(name) -> Path:
    """Base name -> output path. The suffix is appended unconditionally."""
    return Path(f"{name}{CSV_SUFFIX}")


def _write_rows(name, rows, terminate_last: bool) -> Path:
    text = format_rows(rows, terminate_last=terminate_last)
    path = csv_path(name)
    try:
        # text mode: "\n" becomes the platform line terminator
        with open(path, "w") as f:
            f.write(text)
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        raise CSVWriteError(path, e.strerror or str(e)) from e
    logger.debug("Wrote %d line(s) to %s", len(rows), path)
    return path


# --- Grids ----------------------------------------------------------------

def save_grid_csv(name, M, rows: int, columns: int) -> Path:
    """
    Save the leading rows x columns block of a 2D container.

    Parameters
    ----------
    name : str or Path
        Output base name, ".csv" is appended.
    M : sequence of sequences or np.ndarray
        Row-major values addressed as M[i][j].
    rows, columns : int
        Block size to write. Data beyond it is ignored.

    Returns
    -------
    path : Path
        The file written.

    Raises
    ------
    ShapeError
        Negative counts, or fewer rows/columns than requested.
    CSVWriteError
        The file could not be opened or written.
    """
    return _write_rows(name, GridRows(M, rows, columns), terminate_last=True)


def save_matrix_csv(name, M) -> Path:
    """
    Save a nested sequence (or 2D array) as a grid.

    Row count is len(M), column count is len(M[0]); every row must
    match it (ragged input raises ShapeError). Each row, the last one
    included, ends with a newline.
    """
    return _write_rows(name, grid_rows(M), terminate_last=True)


# --- Sequences ------------------------------------------------------------

def save_array_csv(name, M, n: int) -> Path:
    """
    Save the first n items of a flat container, one per line.

    No newline follows the final value.
    """
    return _write_rows(name, SequenceRows(M, n), terminate_last=False)


def save_vector_csv(name, M) -> Path:
    """Save a whole 1D sequence, one value per line, no trailing newline."""
    return _write_rows(name, sequence_rows(M), terminate_last=False)


def save_xy_csv(name, x, y) -> Path:
    """
    Save paired (x, y) values as a two-column CSV.

    Parameters
    ----------
    name : str or Path
        Output base name, ".csv" is appended.
    x, y : array-like
        Sequences of equal length.

    Notes
    -----
    Line i is "x[i],y[i]"; the last line has no trailing newline.
    Mismatched lengths raise ShapeError before the file is touched.
    """
    return _write_rows(name, PairedRows(x, y), terminate_last=False)
