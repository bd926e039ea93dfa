"""
===========================================================
print_utils Demo (CLI version)
===========================================================

Usage
-----
    python3 examples/demo_cli.py [-v] [base_name]

Prints a vector and a matrix to stdout, then writes the matrix to
<base_name>.csv (default: matrix.csv).
"""

# --- Imports --------------------------------------------------------------

import sys
from print_utils import print_sequence, print_grid, save_matrix_csv
from print_utils.logging_config import setup_logging


# --- Main routine ---------------------------------------------------------

def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)
    if "-v" in argv:
        argv.remove("-v")
        setup_logging("DEBUG")
    if len(argv) > 1:
        print("Usage: demo_cli.py [-v] [base_name]")
        return 1
    name = argv[0] if argv else "matrix"

    v = [1, 2, 3, 4, 5]
    print("Vector v = ")
    print_sequence(v)
    print()

    vv = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    print("Matrix vv = ")
    print_grid(vv)
    print()

    path = save_matrix_csv(name, vv)
    print(f"Exported '{path}'")
    return 0


# --- Entrypoint -----------------------------------------------------------

if __name__ == "__main__":
    raise SystemExit(main())
