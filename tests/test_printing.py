"""
===========================================================
Test suite for print_utils.printing (stream printers)
===========================================================
"""

import io

import numpy as np
import pytest

from print_utils import ShapeError, print_grid, print_sequence, print_triples


def test_print_sequence_terminates_last_line():
    """Stream output keeps the newline the 1D CSV writer drops."""
    buf = io.StringIO()
    print_sequence([1, 2, 3, 4, 5], buf)
    assert buf.getvalue() == "1\n2\n3\n4\n5\n"


def test_print_grid():
    buf = io.StringIO()
    print_grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]], buf)
    assert buf.getvalue() == "1,2,3\n4,5,6\n7,8,9\n"


def test_print_triples():
    buf = io.StringIO()
    print_triples([(0.0, 1.0, 2.0), np.array([3, 4, 5])], buf)
    assert buf.getvalue() == "0.0,1.0,2.0\n3,4,5\n"


def test_print_triples_requires_three_items():
    with pytest.raises(ShapeError):
        print_triples([(1, 2)], io.StringIO())


def test_default_stream_is_stdout(capsys):
    print_sequence([7, 8])
    assert capsys.readouterr().out == "7\n8\n"
