"""Tool-friendly wrappers around Grid and Solver: whole-grid candidate maps and JSON-ready solve reports, used by the CLI and the HTTP API."""

# sudoku_tools.py

from __future__ import annotations

from typing import Optional

from types_sudoku import Candidates, SolveReport

from .grid import Grid
from .gridfile import parse, write
from .peers import GRID_SIZE, rc_to_key
from .search import Solver


def compute_candidates(grid: Grid) -> Candidates:
    cand = {}
    for r in range(1, GRID_SIZE + 1):
        for c in range(1, GRID_SIZE + 1):
            if grid.empty(c, r):
                cand[rc_to_key(r, c)] = grid.candidates(c, r)
    return cand


def compute_candidates_tool(pattern: str) -> dict:
    """Compute candidate digits for each empty cell of a pattern. Returns {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    return {"candidates": compute_candidates(parse(pattern, locked=True))}


def report(solver: Solver) -> SolveReport:
    return {
        "solution_count": solver.solution_count(),
        "solution_time_ms": round(solver.solution_time(), 3),
        "capped": solver.capped(),
        "solutions": [write(g) for g in solver.solutions()],
    }


def solve_tool(pattern: str, max_solutions: Optional[int] = None, workers: int = 1) -> SolveReport:
    """Parse a pattern (givens locked), solve it, and return a SolveReport."""
    solver = Solver(parse(pattern, locked=True), max_solutions=max_solutions, workers=workers)
    solver.solve()
    return report(solver)
