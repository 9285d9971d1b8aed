# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FILES = Path(__file__).resolve().parent / "files"


@pytest.fixture
def files_dir() -> Path:
    return FILES


@pytest.fixture
def load():
    """Read a puzzle from tests/files; givens are locked unless locked=False."""
    from solver.gridfile import parse_file

    def _load(name: str, locked: bool = True):
        return parse_file(FILES / f"{name}.sudoku", locked=locked)

    return _load


@pytest.fixture
def pattern():
    def _pattern(name: str) -> str:
        return (FILES / f"{name}.sudoku").read_text(encoding="utf-8")

    return _pattern
