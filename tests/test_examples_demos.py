"""
===========================================================
Examples (CLI) Smoke Test
===========================================================

Smoke-test the CLI example to make sure it prints and writes the CSV.
"""

import importlib.util
from pathlib import Path


# --- Helper ---------------------------------------------------------------

def _import_demo_cli():
    """
    Dynamically import examples/demo_cli.py using its absolute path.
    Works even when pytest runs in a tmpdir.
    """
    project_root = Path(__file__).resolve().parents[1]
    demo_path = project_root / "examples" / "demo_cli.py"
    spec = importlib.util.spec_from_file_location("demo_cli", demo_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


# --- Tests ----------------------------------------------------------------

def test_demo_cli_exports(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    demo = _import_demo_cli()

    exit_code = demo.main([])
    assert exit_code == 0

    out = capsys.readouterr().out
    assert "Vector v = \n1\n2\n3\n4\n5\n\n" in out
    assert "Matrix vv = \n1,2,3\n4,5,6\n7,8,9\n\n" in out

    matrix_csv = tmp_path / "matrix.csv"
    assert matrix_csv.exists(), "matrix.csv not created"
    assert matrix_csv.read_text() == "1,2,3\n4,5,6\n7,8,9\n"


def test_demo_cli_custom_name(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    demo = _import_demo_cli()
    assert demo.main(["grid"]) == 0
    assert (tmp_path / "grid.csv").exists()


def test_demo_cli_usage_error(capsys):
    demo = _import_demo_cli()
    assert demo.main(["a", "b"]) == 1
    assert "Usage" in capsys.readouterr().out
