"""
===========================================================
print_utils — write numeric arrays and matrices as CSV
===========================================================

A small, write-only toolkit for dumping in-memory vectors and matrices
to comma-separated files, plus stream printers for debugging.

Main functions
--------------
- save_grid_csv(name, M, rows, columns)
- save_matrix_csv(name, M)
- save_array_csv(name, M, n)
- save_vector_csv(name, M)
- save_xy_csv(name, x, y)
- print_sequence(seq, stream=None)
- print_triples(seq, stream=None)
- print_grid(grid, stream=None)

Typical workflow
----------------
    from print_utils import *
    save_matrix_csv("matrix", [[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    # matrix.csv -> "1,2,3\\n4,5,6\\n7,8,9\\n"
    print_sequence([1, 2, 3, 4, 5])
"""

# --- Public Imports -------------------------------------------------------

from .io import (
    save_grid_csv,
    save_matrix_csv,
    save_array_csv,
    save_vector_csv,
    save_xy_csv,
)
from .printing import print_sequence, print_triples, print_grid
from .exceptions import PrintUtilsError, ShapeError, CSVWriteError

__all__ = [
    "save_grid_csv",
    "save_matrix_csv",
    "save_array_csv",
    "save_vector_csv",
    "save_xy_csv",
    "print_sequence",
    "print_triples",
    "print_grid",
    "PrintUtilsError",
    "ShapeError",
    "CSVWriteError",
]
