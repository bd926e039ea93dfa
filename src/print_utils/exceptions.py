"""
Exception classes for print_utils.

Shape problems are caught before any file is opened; I/O problems are
wrapped so callers can catch a single library error type.
"""

from pathlib import Path


class PrintUtilsError(Exception):
    """Base exception for all print_utils errors."""

    pass


class ShapeError(PrintUtilsError, ValueError):
    """Input container does not have the shape the writer expects.

    Raised for ragged grids, mismatched paired sequences, counts that
    exceed the data, and arrays of the wrong dimensionality.
    """

    pass


class CSVWriteError(PrintUtilsError, OSError):
    """Target file could not be opened or written.

    Attributes:
        path: The file that could not be written
        message: Description of the underlying failure
    """

    def __init__(self, path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")
