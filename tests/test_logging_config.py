"""
===========================================================
Test suite for print_utils.logging_config
===========================================================
"""

import logging
from pathlib import Path

import pytest

from print_utils import save_matrix_csv
from print_utils.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("print_utils")
    yield logger
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_get_logger_children():
    assert get_logger().name == "print_utils"
    assert get_logger("io").name == "print_utils.io"


def test_setup_logging_file_handler(tmp_path: Path, restore_logger):
    log_file = tmp_path / "run.log"
    logger = setup_logging("DEBUG", log_file=log_file, verbose=True)
    assert logger is restore_logger
    assert logger.level == logging.DEBUG
    assert not logger.propagate

    save_matrix_csv(tmp_path / "m", [[1, 2]])
    for h in logger.handlers:
        h.flush()
    text = log_file.read_text()
    assert "print_utils.io" in text
    assert "Wrote 1 line(s)" in text


def test_setup_logging_unknown_level_falls_back(restore_logger):
    logger = setup_logging("nonsense")
    assert logger.level == logging.INFO
