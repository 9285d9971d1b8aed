"""Command-line solver: reads one puzzle file, solves it, and prints the number of solutions, the solve time, and every solution."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli puzzles/hard.sudoku
#   python -m apps.cli.solve_cli puzzles/open.sudoku --max-solutions 100 --workers 4
#   python -m apps.cli.solve_cli puzzles/hard.sudoku --json --config solver.yaml
#
# Exit code: 0 on success, 1 on any usage, parse or I/O error.
# Progress lines go to stderr so stdout carries only the result.

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, TextIO

import yaml

from solver.config import SolverConfig
from solver.errors import GridFormatError
from solver.gridfile import parse_file
from solver.messages import msg
from solver.search import Solver
from solver.sudoku_tools import report


def ts() -> str:
    # Local time timestamp for logs
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(message: str, *, quiet: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {message}", file=sys.stderr, flush=True)


class UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(prog="solve_cli", description="Solve a 9x9 Sudoku puzzle file.")
    ap.add_argument("files", nargs="*", help="puzzle file (9 lines of 9 characters, '.' = empty)")
    ap.add_argument("--max-solutions", type=int, default=None, help="stop after this many solutions")
    ap.add_argument("--workers", type=int, default=None, help="search threads (default 1)")
    ap.add_argument("--locale", type=str, default=None, help="message language, e.g. en or de")
    ap.add_argument("--config", type=str, default=None, help="YAML file with solver settings")
    ap.add_argument("--json", action="store_true", help="print a JSON report instead of text")
    ap.add_argument("--quiet", action="store_true", help="no progress lines on stderr")
    return ap


def load_config(args) -> SolverConfig:
    overrides = {
        "max_solutions": args.max_solutions,
        "workers": args.workers,
        "locale": args.locale,
    }
    if args.config:
        return SolverConfig.from_yaml(args.config, **overrides)
    return SolverConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[Sequence[str]] = None, out: TextIO = None) -> int:
    out = out or sys.stdout
    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        print(e, file=out)
        return 1

    try:
        cfg = load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(e, file=out)
        return 1
    locale = cfg.locale

    if not args.files:
        print(msg("cli.noSourceFileSpecified", locale=locale), file=out)
        return 1
    if len(args.files) > 1:
        print(msg("cli.unexpectedArgument", args.files[1], locale=locale), file=out)
        return 1
    name = args.files[0]
    if "\0" in name:
        print(msg("cli.invalidFileName", name, locale=locale), file=out)
        return 1

    try:
        grid = parse_file(Path(name), locked=cfg.lock_givens)
    except (OSError, GridFormatError) as e:
        print(msg("cli.parseGridFileError", e, locale=locale), file=out)
        return 1

    log(f"Solving {name} (workers={cfg.workers}, max_solutions={cfg.max_solutions})", quiet=args.quiet)
    solver = Solver.from_config(grid, cfg)
    solver.solve()
    log(f"Done: {solver.solution_count()} solution(s) in {solver.solution_time():.1f} ms", quiet=args.quiet)

    if args.json:
        print(json.dumps(report(solver), indent=2), file=out)
        return 0

    print(msg("cli.numberOfSolutions", solver.solution_count(), locale=locale), file=out)
    print(msg("cli.solutionTime", solver.solution_time(), locale=locale), file=out)
    if solver.capped():
        print(msg("cli.capReached", solver.solution_count(), locale=locale), file=out)
    for solution in solver.solutions():
        print(solution, file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
