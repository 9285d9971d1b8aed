"""Index math for the 9x9 board: cell indices, box numbering, and the shared peer table used by rule checks and candidate computation."""

# peers.py
# Cells are addressed 1-based as (column, row). Internally a cell lives at a
# flat index in 0..80, laid out column-major: index = (col-1)*9 + (row-1).
# The peer table is built once at import and shared by every Grid.

from __future__ import annotations

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE

EMPTY_VALUE = 0
MIN_VALUE = 1
MAX_VALUE = 9
VALUES = tuple(range(MIN_VALUE, MAX_VALUE + 1))


def to_index(col: int, row: int) -> int:
    return (col - 1) * GRID_SIZE + (row - 1)


def to_cell(index: int) -> tuple[int, int]:
    return index // GRID_SIZE + 1, index % GRID_SIZE + 1


def rc_to_key(row: int, col: int) -> str:
    return f"r{row}c{col}"


def box_start(i: int) -> int:
    """First column (or row) of the box containing column (or row) ``i``."""
    return ((i - 1) // BOX_SIZE) * BOX_SIZE + 1


def which_box(col: int, row: int) -> int:
    """Box number 1..9, counted left to right, top to bottom."""
    return BOX_SIZE * ((row - 1) // BOX_SIZE) + ((col - 1) // BOX_SIZE) + 1


def _build_peers(col: int, row: int) -> tuple[int, ...]:
    ps = []
    # Row-mates first, then column-mates: conflict_scope reports a row before a column or box.
    # row-mates
    for c in range(1, GRID_SIZE + 1):
        if c != col:
            ps.append(to_index(c, row))
    # column-mates
    for r in range(1, GRID_SIZE + 1):
        if r != row:
            ps.append(to_index(col, r))
    # box-mates not already covered by row or column
    c0 = box_start(col)
    r0 = box_start(row)
    for c in range(c0, c0 + BOX_SIZE):
        for r in range(r0, r0 + BOX_SIZE):
            if c != col and r != row:
                ps.append(to_index(c, r))
    return tuple(ps)


PEERS: tuple[tuple[int, ...], ...] = tuple(
    _build_peers(*to_cell(i)) for i in range(CELL_COUNT)
)
"""For each flat cell index, the 20 peer indices: row-mates, column-mates, then remaining box-mates."""


def conflict_scope(index: int, peer: int) -> tuple[str, int]:
    """Name the unit shared by a cell and one of its peers as (scope, number).

    Row wins over column, column over box, so a row-mate inside the same box
    is reported as a row conflict.
    """
    col, row = to_cell(index)
    pc, pr = to_cell(peer)
    if pr == row:
        return "row", row
    if pc == col:
        return "column", col
    return "box", which_box(col, row)
