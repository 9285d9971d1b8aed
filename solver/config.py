"""Solver settings: a dataclass with YAML loading and command-line overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass
class SolverConfig:
    """Configuration for a solve run."""

    # Stop starting new branches after this many solutions (None = all)
    max_solutions: Optional[int] = None
    # Threads used for the search; 1 = inline
    workers: int = 1
    # Message language; empty falls back to $SUDOKU_LOCALE, then English
    locale: str = "en"
    # Lock the givens read from a puzzle file
    lock_givens: bool = True

    def __post_init__(self):
        if not self.locale:
            self.locale = os.getenv("SUDOKU_LOCALE", "en")
        if self.max_solutions is not None and not _is_int(self.max_solutions):
            raise ValueError(f"max_solutions must be an integer, got {self.max_solutions!r}")
        if not _is_int(self.workers):
            raise ValueError(f"workers must be an integer, got {self.workers!r}")
        if not isinstance(self.locale, str):
            raise ValueError(f"locale must be a string, got {self.locale!r}")
        if not isinstance(self.lock_givens, bool):
            raise ValueError(f"lock_givens must be true or false, got {self.lock_givens!r}")
        if self.max_solutions is not None and self.max_solutions < 1:
            raise ValueError(f"max_solutions must be >= 1, got {self.max_solutions}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

    @classmethod
    def from_yaml(cls, path: str | Path, **overrides) -> SolverConfig:
        cfg = merge_overrides(load_yaml(path), **overrides)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(cfg) - known)
        if unknown:
            raise ValueError(f"{path}: unknown settings: {', '.join(unknown)}")
        return cls(**cfg)
