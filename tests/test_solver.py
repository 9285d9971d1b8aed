# tests/test_solver.py
import itertools

import pytest

from solver.config import SolverConfig
from solver.errors import RuleViolationError
from solver.grid import Grid
from solver.gridfile import write
from solver.search import SolutionCollector, Solver, expand, search

ALL_CELLS = list(itertools.product(range(1, 10), range(1, 10)))


def assert_consistent(grid):
    """Every filled value must be accepted again after clearing its cell."""
    for col, row in ALL_CELLS:
        value = grid.get(col, row)
        if value == 0 or grid.locked(col, row):
            continue
        probe = grid.copy()
        probe.clear(col, row)
        assert value in probe.candidates(col, row)


@pytest.mark.parametrize("name", ["wiki", "diagonal"])
def test_unique_solution(name, load):
    initial = load(name)
    solutions = Solver(initial).solve()
    assert len(solutions) == 1
    assert write(solutions[0]) == write(load("wiki_solved"))


def test_solution_keeps_locked_givens(load):
    initial = load("wiki")
    (solution,) = Solver(initial).solve()
    for col, row in ALL_CELLS:
        assert solution.locked(col, row) == initial.locked(col, row)
        if not initial.empty(col, row):
            assert solution.get(col, row) == initial.get(col, row)
    assert_consistent(solution)


def test_input_grid_is_not_modified(load):
    initial = load("wiki")
    before = initial.copy()
    Solver(initial).solve()
    assert initial == before


def test_two_solutions(load):
    initial = load("two_solutions")
    solutions = Solver(initial).solve()
    assert len(solutions) == 2
    assert solutions[0] != solutions[1]
    for solution in solutions:
        assert solution.solved()
        assert_consistent(solution)
        for col, row in ALL_CELLS:
            if not initial.empty(col, row):
                assert solution.get(col, row) == initial.get(col, row)
    corners = {tuple(s.get(c, r) for c, r in [(6, 4), (9, 4), (6, 5), (9, 5)]) for s in solutions}
    assert corners == {(1, 3, 3, 1), (3, 1, 1, 3)}


def test_already_solved(load):
    grid = load("wiki_solved")
    solutions = Solver(grid).solve()
    assert solutions == [grid]


def test_contradiction_has_no_solution():
    grid = Grid()
    # column 1 rows 1..8 take 1..8; row 9 already has 9 -> (1, 9) has no candidates
    for row in range(1, 9):
        grid.lock(1, row, row)
    grid.lock(5, 9, 9)
    assert grid.candidates(1, 9) == []
    solver = Solver(grid)
    assert solver.solve() == []
    assert solver.solution_count() == 0


def test_cap_on_open_grid():
    solver = Solver(Grid(), max_solutions=5)
    solutions = solver.solve()
    assert len(solutions) == 5
    assert solver.capped()
    assert len({write(s) for s in solutions}) == 5
    for s in solutions:
        assert s.solved()
        assert_consistent(s)


def test_cap_parallel_may_overshoot_but_is_bounded():
    solver = Solver(Grid(), max_solutions=3, workers=4)
    solutions = solver.solve()
    assert len(solutions) >= 3
    assert solver.capped()
    for s in solutions:
        assert s.solved()


def test_cap_not_reached(load):
    solver = Solver(load("two_solutions"), max_solutions=10)
    assert len(solver.solve()) == 2
    assert not solver.capped()


@pytest.mark.parametrize("workers", [2, 4, 16])
def test_parallel_matches_sequential(workers, load):
    initial = load("two_solutions")
    sequential = {write(s) for s in Solver(initial).solve()}
    parallel = {write(s) for s in Solver(initial, workers=workers).solve()}
    assert parallel == sequential


def test_parallel_unique(load):
    solutions = Solver(load("wiki"), workers=3).solve()
    assert [write(s) for s in solutions] == [write(load("wiki_solved"))]


def test_solver_bookkeeping(load):
    solver = Solver(load("two_solutions"))
    assert solver.solution_count() == 0
    assert solver.solutions() == []
    solutions = solver.solve()
    assert solver.solution_count() == 2
    assert solver.solutions() == solutions
    assert solver.solution_time() >= 0.0
    # returned lists are copies
    solver.solutions().clear()
    assert solver.solution_count() == 2


def test_solve_twice_resets(load):
    solver = Solver(load("two_solutions"))
    solver.solve()
    assert len(solver.solve()) == 2


def test_from_config(load):
    cfg = SolverConfig(max_solutions=1, workers=1)
    solver = Solver.from_config(load("two_solutions"), cfg)
    assert len(solver.solve()) == 1
    assert solver.capped()


@pytest.mark.parametrize("kwargs", [{"max_solutions": 0}, {"workers": 0}])
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        Solver(Grid(), **kwargs)


def test_expand_places_singles_and_branches_on_fewest(load):
    grid = load("two_solutions")
    collector = SolutionCollector()
    children = expand(grid, collector)
    assert len(collector) == 0
    # first cell in column-major order with two candidates is (6, 4)
    assert [c.get(6, 4) for c in children] == [1, 3]
    for child in children:
        assert child.empty(9, 4)


def test_expand_records_solution(load):
    grid = load("diagonal")
    collector = SolutionCollector()
    assert expand(grid, collector) == []
    assert collector.items() == [grid]
    assert grid.solved()


def test_search_respects_full_collector():
    collector = SolutionCollector(limit=1)
    collector.add(Grid())
    search(Grid(), collector)
    assert len(collector) == 1


def test_internal_rule_violation_is_an_assertion(monkeypatch, load):
    def broken_candidates(self, col, row):
        return [1] if self.empty(col, row) else []

    monkeypatch.setattr(Grid, "candidates", broken_candidates)
    with pytest.raises(AssertionError) as info:
        Solver(load("wiki")).solve()
    assert isinstance(info.value.__cause__, RuleViolationError)
