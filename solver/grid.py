"""The 9x9 Sudoku grid: a rule-checked cell store with locked givens and per-cell candidate queries."""

# grid.py
# Every successful mutation leaves the grid rule-consistent: a non-empty cell
# never shares its value with any of its 20 peers.
# Cell storage is a flat list of 81 ints; a negative value marks a locked cell.

from __future__ import annotations

from .errors import InvalidValueError, LockedCellError, OutOfRangeError, RuleViolationError
from .peers import (
    BOX_SIZE,
    CELL_COUNT,
    EMPTY_VALUE,
    GRID_SIZE,
    MAX_VALUE,
    MIN_VALUE,
    PEERS,
    VALUES,
    conflict_scope,
    to_index,
)

RULE_LINE = "-" * (GRID_SIZE * 3 + GRID_SIZE // BOX_SIZE + 1)


def _is_int(n) -> bool:
    return isinstance(n, int) and not isinstance(n, bool)


def _valid_index(col: int, row: int) -> int:
    if not _is_int(col) or col < 1 or col > GRID_SIZE:
        raise OutOfRangeError(f"Invalid column: {col}")
    if not _is_int(row) or row < 1 or row > GRID_SIZE:
        raise OutOfRangeError(f"Invalid row: {row}")
    return to_index(col, row)


def _valid_value(value: int) -> int:
    if not _is_int(value):
        raise InvalidValueError(f"Invalid value: {value!r}")
    if value != EMPTY_VALUE and (value < MIN_VALUE or value > MAX_VALUE):
        raise InvalidValueError(f"Invalid value: {value}")
    return value


class Grid:
    """A 9x9 Sudoku grid addressed by 1-based ``(col, row)``.

    A new grid is empty. Use :meth:`of` / :meth:`of_locked` to build one from
    a text pattern, and :meth:`copy` for an independent clone.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells = [EMPTY_VALUE] * CELL_COUNT

    @staticmethod
    def of(pattern: str) -> Grid:
        """Grid from a pattern; givens are set but not locked."""
        from .gridfile import parse

        return parse(pattern, locked=False)

    @staticmethod
    def of_locked(pattern: str) -> Grid:
        """Grid from a pattern with every given locked."""
        from .gridfile import parse

        return parse(pattern, locked=True)

    def copy(self) -> Grid:
        clone = Grid.__new__(Grid)
        clone._cells = self._cells[:]
        return clone

    # --------------------------
    # Cell access
    # --------------------------
    def get(self, col: int, row: int) -> int:
        return abs(self._cells[_valid_index(col, row)])

    def set(self, col: int, row: int, value: int) -> None:
        """Replace the value of a cell; 0 clears it.

        Writing the value a cell already holds is a no-op, even for a locked
        cell. Raises LockedCellError for any other write to a locked cell and
        RuleViolationError when a peer already holds ``value``.
        """
        i = _valid_index(col, row)
        _valid_value(value)
        current = self._cells[i]
        if abs(current) == value:
            return
        if current < 0:
            raise LockedCellError(f"Cannot change locked cell ({col}, {row})")
        if value != EMPTY_VALUE:
            self._check_rules(i, value)
        self._cells[i] = value

    def clear(self, col: int, row: int) -> None:
        self.set(col, row, EMPTY_VALUE)

    def lock(self, col: int, row: int, value: int) -> None:
        """Set a cell to ``value`` and mark it as a given."""
        i = _valid_index(col, row)
        if _valid_value(value) == EMPTY_VALUE:
            raise InvalidValueError("Cannot lock empty cell")
        current = self._cells[i]
        if abs(current) != value:
            if current < 0:
                raise LockedCellError(f"Cannot change locked cell ({col}, {row})")
            self._check_rules(i, value)
        self._cells[i] = -value

    def unlock(self, col: int, row: int) -> None:
        i = _valid_index(col, row)
        if self._cells[i] < 0:
            self._cells[i] = -self._cells[i]

    def locked(self, col: int, row: int) -> bool:
        return self._cells[_valid_index(col, row)] < 0

    def empty(self, col: int, row: int) -> bool:
        return self._cells[_valid_index(col, row)] == EMPTY_VALUE

    # --------------------------
    # Rules & candidates
    # --------------------------
    def candidates(self, col: int, row: int) -> list[int]:
        """Values 1..9 that can go into an empty cell, ascending. Empty list for a filled cell."""
        i = _valid_index(col, row)
        cells = self._cells
        if cells[i] != EMPTY_VALUE:
            return []
        used = {abs(cells[p]) for p in PEERS[i]}
        return [v for v in VALUES if v not in used]

    def solved(self) -> bool:
        return EMPTY_VALUE not in self._cells

    def _check_rules(self, index: int, value: int) -> None:
        cells = self._cells
        for p in PEERS[index]:
            if abs(cells[p]) == value:
                scope, number = conflict_scope(index, p)
                raise RuleViolationError(value, scope, number)

    # --------------------------
    # Comparison & display
    # --------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        from .gridfile import write

        return f"Grid({write(self)!r})"

    def __str__(self) -> str:
        lines = [RULE_LINE]
        for row in range(1, GRID_SIZE + 1):
            parts = ["|"]
            for col in range(1, GRID_SIZE + 1):
                raw = self._cells[to_index(col, row)]
                digit = str(abs(raw)) if raw != EMPTY_VALUE else "."
                parts.append(f"<{digit}>" if raw < 0 else f" {digit} ")
                if col % BOX_SIZE == 0:
                    parts.append("|")
            lines.append("".join(parts))
            if row % BOX_SIZE == 0:
                lines.append(RULE_LINE)
        return "\n".join(lines) + "\n"
