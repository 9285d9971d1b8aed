# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Cell = tuple[int, int]
"""A cell address as 1-based (column, row)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c2') to the candidate digits (1..9) of that empty cell."""


class SolveReport(TypedDict):
    """Outcome of one solve run as returned by the tool layer and printed by `solve_cli --json`."""

    solution_count: int
    solution_time_ms: float
    capped: bool  # True if the search stopped at max_solutions
    solutions: list[str]  # each solution in pattern form (9 lines of 9 digits)
