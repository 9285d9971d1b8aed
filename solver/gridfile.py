"""Read and write Sudoku patterns: 9 lines of 9 characters, '1'..'9' for values and '.' for empty cells."""

# gridfile.py
# Pattern format:
#   - lines starting with '#' are comments, blank lines are ignored
#   - exactly 9 remaining lines, each exactly 9 characters long
#   - '.' is an empty cell, '1'..'9' a value
# Writing produces the same 9x9 layout; lock state is not represented.

from __future__ import annotations

from pathlib import Path

from .errors import GridFormatError, SudokuError
from .grid import Grid
from .peers import GRID_SIZE

COMMENT_PREFIX = "#"
EMPTY_CELL = "."


def parse(text: str, locked: bool = True) -> Grid:
    """Build a grid from pattern text. Non-empty cells are locked unless ``locked`` is False."""
    grid = Grid()
    row = 0
    for line in text.splitlines():
        if line.startswith(COMMENT_PREFIX) or not line.strip():
            continue
        row += 1
        if row > GRID_SIZE:
            raise GridFormatError("Too many rows")
        _parse_line(grid, row, line, locked)
    if row < GRID_SIZE:
        raise GridFormatError("Too few rows")
    return grid


def _parse_line(grid: Grid, row: int, line: str, locked: bool) -> None:
    if len(line) != GRID_SIZE:
        raise GridFormatError(f"Unexpected line length: {len(line)} (row {row})")
    for col, ch in enumerate(line, 1):
        if ch == EMPTY_CELL:
            continue
        if ch not in "123456789":
            raise GridFormatError(f"Invalid character {ch!r} (column {col}, row {row})")
        try:
            if locked:
                grid.lock(col, row, int(ch))
            else:
                grid.set(col, row, int(ch))
        except SudokuError as e:
            raise GridFormatError(f"Invalid value at column {col}, row {row}: {e}") from e


def parse_file(path: str | Path, locked: bool = True) -> Grid:
    with Path(path).open("r", encoding="utf-8") as f:
        return parse(f.read(), locked=locked)


def write(grid: Grid) -> str:
    lines = []
    for row in range(1, GRID_SIZE + 1):
        lines.append(
            "".join(
                str(grid.get(col, row)) if not grid.empty(col, row) else EMPTY_CELL
                for col in range(1, GRID_SIZE + 1)
            )
        )
    return "\n".join(lines)


def write_file(path: str | Path, grid: Grid) -> None:
    Path(path).write_text(write(grid) + "\n", encoding="utf-8")
