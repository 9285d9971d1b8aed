"""Exception hierarchy for grid mutation, pattern parsing, and rule checks.

Every error raised by the solver package inherits from :class:`SudokuError`
so callers can catch a single base class when the specific failure does not
matter.
"""

# errors.py

from __future__ import annotations


class SudokuError(Exception):
    """Base exception for all grid and solver operations."""


class OutOfRangeError(SudokuError, IndexError):
    """Raised when a column or row lies outside 1..9."""


class InvalidValueError(SudokuError, ValueError):
    """Raised for a value outside 0..9, or when locking a cell with 0."""


class LockedCellError(SudokuError):
    """Raised when the value of a locked (given) cell would change."""


class RuleViolationError(SudokuError):
    """Raised when a placement repeats a value already present among the cell's peers.

    ``scope`` is one of ``"row"``, ``"column"`` or ``"box"``; ``index`` is the
    row number, column number or box number (1..9) of the conflicting unit.
    """

    def __init__(self, value: int, scope: str, index: int) -> None:
        super().__init__(f"value {value} already exists in {scope} {index}")
        self.value = value
        self.scope = scope
        self.index = index


class GridFormatError(SudokuError, ValueError):
    """Raised when a grid pattern cannot be parsed."""
