"""Solution search: forced-single propagation plus fewest-candidates branching over independent grid copies, optionally fanned out to a thread pool."""

# search.py
# Each search node owns its own Grid. A node is expanded by
#   1) placing forced singles (first found, column-major, rescan after each)
#   2) recording the grid if it is full
#   3) otherwise branching on the empty cell with the fewest candidates
# The tree is walked with an explicit stack, never with recursion.
# The solution cap is checked before a node is expanded; with several workers
# tasks that are already running may still record solutions past the cap.

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional

from .errors import RuleViolationError
from .grid import Grid
from .peers import GRID_SIZE


class SolutionCollector:
    """Append-only, thread-safe list of solved grids with an optional cap."""

    def __init__(self, limit: Optional[int] = None) -> None:
        self.limit = limit
        self._items: list[Grid] = []
        self._lock = threading.Lock()

    def add(self, grid: Grid) -> None:
        with self._lock:
            self._items.append(grid)

    def full(self) -> bool:
        if self.limit is None:
            return False
        with self._lock:
            return len(self._items) >= self.limit

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def items(self) -> list[Grid]:
        with self._lock:
            return list(self._items)


def expand(grid: Grid, collector: SolutionCollector) -> list[Grid]:
    """Expand one search node in place; returns child grids in exploration order.

    A solved grid is handed to the collector and yields no children; a grid
    with an empty cell that has no candidates is a dead end and yields none
    either.
    """
    while True:
        if grid.solved():
            collector.add(grid)
            return []

        fewest: Optional[list[int]] = None
        fewest_cell = (0, 0)
        placed = False
        for col in range(1, GRID_SIZE + 1):
            for row in range(1, GRID_SIZE + 1):
                if not grid.empty(col, row):
                    continue
                cands = grid.candidates(col, row)
                if not cands:
                    return []  # dead end
                if len(cands) == 1:
                    _place(grid, col, row, cands[0])
                    placed = True
                    break
                if fewest is None or len(cands) < len(fewest):
                    fewest, fewest_cell = cands, (col, row)
            if placed:
                break
        if not placed:
            break

    col, row = fewest_cell
    children = []
    for value in fewest:
        child = grid.copy()
        _place(child, col, row, value)
        children.append(child)
    return children


def _place(grid: Grid, col: int, row: int, value: int) -> None:
    # value always comes from grid.candidates(col, row)
    try:
        grid.set(col, row, value)
    except RuleViolationError as e:
        raise AssertionError(
            f"candidate {value} for ({col}, {row}) violates the rules: {e}"
        ) from e


def search(root: Grid, collector: SolutionCollector) -> None:
    """Depth-first search of ``root``'s subtree; children are tried in ascending candidate order."""
    stack = [root]
    while stack and not collector.full():
        node = stack.pop()
        stack.extend(reversed(expand(node, collector)))


class Solver:
    """Enumerates every completion of a grid.

    Parameters
    ----------
    grid: Grid
        Starting position. It is copied; the caller's grid is never changed.
    max_solutions: int, optional
        Stop starting new branches once this many solutions are known.
    workers: int
        Number of threads; 1 runs the search inline.
    """

    def __init__(self, grid: Grid, max_solutions: Optional[int] = None, workers: int = 1) -> None:
        if grid is None:
            raise ValueError("grid must not be None")
        if max_solutions is not None and max_solutions < 1:
            raise ValueError(f"max_solutions must be >= 1, got {max_solutions}")
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.grid = grid
        self.max_solutions = max_solutions
        self.workers = workers
        self._solutions: list[Grid] = []
        self._solution_time = 0.0

    @classmethod
    def from_config(cls, grid: Grid, cfg) -> Solver:
        return cls(grid, max_solutions=cfg.max_solutions, workers=cfg.workers)

    # --------------------------
    # Public API
    # --------------------------
    def solve(self) -> list[Grid]:
        collector = SolutionCollector(self.max_solutions)
        t0 = time.perf_counter()
        if self.workers == 1:
            search(self.grid.copy(), collector)
        else:
            self._solve_parallel(collector)
        self._solution_time = (time.perf_counter() - t0) * 1000.0
        self._solutions = collector.items()
        return list(self._solutions)

    def solutions(self) -> list[Grid]:
        return list(self._solutions)

    def solution_count(self) -> int:
        return len(self._solutions)

    def solution_time(self) -> float:
        """Duration of the last :meth:`solve` call in milliseconds."""
        return self._solution_time

    def capped(self) -> bool:
        return self.max_solutions is not None and len(self._solutions) >= self.max_solutions

    # --------------------------
    # Internals
    # --------------------------
    def _solve_parallel(self, collector: SolutionCollector) -> None:
        # Breadth-first until there is enough work to hand out, then one
        # depth-first task per open node.
        frontier = [self.grid.copy()]
        while frontier and len(frontier) < self.workers and not collector.full():
            node = frontier.pop(0)
            frontier.extend(expand(node, collector))
        if not frontier or collector.full():
            return
        with ThreadPoolExecutor(max_workers=self.workers) as ex:
            futures = [ex.submit(search, node, collector) for node in frontier]
            for fut in as_completed(futures):
                fut.result()
