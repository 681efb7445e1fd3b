"""Puzzle analysis: deduction-first solving with a search fallback, difficulty estimation, and tool-friendly wrappers (validation report, candidate map) for the API and CLI."""

# sudoku_tools.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from rich.console import Console

from types_sudoku import AnalysisResult, BacktrackingFillStep, Grid, Step

from .config import DEFAULTS
from .search import solve_by_backtracking
from .solver_core import (
    build_all_candidates, compute_candidates, grid_to_string, is_solved,
    is_valid_grid, iter_units, parse_puzzle,
)
from .techniques import Eliminations, apply_hidden_singles, apply_naked_pairs, apply_naked_singles

TECHNIQUE_RANK = {
    "naked_single": 1,
    "hidden_single": 2,
    "naked_pair": 3,
}

DIFFICULTY_LABELS = ("Easy", "Medium", "Hard", "Extreme")

# 0, 1 or "2 or more"; `max_solutions` in the config only applies to the timed search.
ANALYSIS_SOLUTION_CAP = 2


@dataclass
class HumanSolveResult:
    status: str  # invalid | solved | no_solution | multiple_solutions | stopped
    grid: Grid
    steps: List[Step] = field(default_factory=list)
    used_backtracking: bool = False


def _log(console: Optional[Console], msg: str) -> None:
    if console is not None:
        console.print(msg, style="bold cyan")


def _candidates_with_eliminations(grid: Grid, eliminated: Eliminations):
    cand = build_all_candidates(grid)
    for (r, c), removed in eliminated.items():
        if cand[r][c]:
            cand[r][c] = [d for d in cand[r][c] if d not in removed]
    return cand


def human_solve(grid: Grid, max_steps: int = DEFAULTS["max_steps"], verbose: bool = False) -> HumanSolveResult:
    """Solve `grid` in place the way a person would, guessing only when stuck.

    Each iteration rebuilds candidates and tries naked singles, hidden singles
    and naked pairs in that order, restarting from the top after any progress.
    When no rule applies, the remaining grid goes to backtracking search.
    Naked-pair eliminations are remembered for the rest of the run.
    """
    console = Console() if verbose else None
    if not is_valid_grid(grid):
        return HumanSolveResult("invalid", grid)

    steps: List[Step] = []
    eliminated: Eliminations = {}
    for _ in range(max_steps):
        if is_solved(grid):
            return HumanSolveResult("solved", grid, steps)

        cand = _candidates_with_eliminations(grid, eliminated)
        if apply_naked_singles(grid, cand, steps):
            _log(console, "naked singles placed")
            continue
        if apply_hidden_singles(grid, cand, steps):
            _log(console, "hidden singles placed")
            continue
        if apply_naked_pairs(grid, cand, steps, eliminated):
            _log(console, "naked pairs narrowed candidates")
            continue

        _log(console, "deduction stuck, falling back to search")
        found = solve_by_backtracking(grid, ANALYSIS_SOLUTION_CAP, verbose=verbose)
        if found.count == 1 and found.solution:
            for r in range(9):
                grid[r][:] = found.solution[r]
            steps.append(BacktrackingFillStep())
            return HumanSolveResult("solved", grid, steps, used_backtracking=True)
        if found.count == 0:
            return HumanSolveResult("no_solution", grid, steps, used_backtracking=True)
        return HumanSolveResult("multiple_solutions", grid, steps, used_backtracking=True)

    _log(console, f"stopped after {max_steps} iterations")
    return HumanSolveResult("stopped", grid, steps)


def estimate_difficulty(techniques, used_backtracking: bool) -> str:
    if used_backtracking:
        return "Extreme"
    top = max((TECHNIQUE_RANK.get(t, 0) for t in techniques), default=0)
    if top <= 1:
        return "Easy"
    if top == 2:
        return "Medium"
    return "Hard"


def _techniques_used(steps: List[Step]) -> List[str]:
    return list(dict.fromkeys(s.technique for s in steps))


def analyze_puzzle(puzzle: str, config: Optional[Dict] = None, verbose: bool = False) -> AnalysisResult:
    """Full analysis of one puzzle string.

    Raises FormatError for malformed text. Solution counting always comes
    from an independent search over the original grid; the trace and the
    difficulty come from `human_solve` on a fresh copy.
    """
    cfg = dict(DEFAULTS)
    cfg.update(config or {})
    grid = parse_puzzle(puzzle)

    result: AnalysisResult = {
        "input": puzzle,
        "validity": "valid",
        "solutions": 0,
        "solved": False,
        "status": "",
        "difficulty": "",
        "techniques": [],
        "steps": [],
        "solution": None,
    }
    if not is_valid_grid(grid):
        result.update(validity="invalid", status="invalid", difficulty="Invalid")
        return result

    counted = solve_by_backtracking(grid, ANALYSIS_SOLUTION_CAP, verbose=verbose)
    if counted.count == 0:
        result.update(status="unsolvable", difficulty="Unsolvable")
        return result

    human = human_solve(parse_puzzle(puzzle), cfg["max_steps"], verbose=verbose)
    techniques = _techniques_used(human.steps)
    result.update(
        solutions=counted.count,
        solved=human.status == "solved",
        status=human.status,
        difficulty=estimate_difficulty(techniques, human.used_backtracking),
        techniques=techniques,
        steps=[s.to_dict() for s in human.steps[: cfg["max_trace_steps"]]],
        solution=grid_to_string(counted.solution) if counted.count == 1 else None,
    )
    return result


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report overwritten givens and per-unit duplicate digits in `current`."""
    issues = []
    for r in range(9):
        for c in range(9):
            if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
                issues.append({"type": "given_overwritten", "cell": f"r{r + 1}c{c + 1}",
                               "given": original[r][c], "found": current[r][c]})

    prefix = {"row": "r", "col": "c", "box": "b"}
    for unit, cells in iter_units():
        seen = set()
        dups = set()
        for r, c in cells:
            v = current[r][c]
            if v == 0:
                continue
            if v in seen:
                dups.add(v)
            seen.add(v)
        if dups:
            bad = [f"r{r + 1}c{c + 1}" for r, c in cells if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"{prefix[unit.kind]}{unit.index + 1}",
                           "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2': [1,2,5], ...}}."""
    return {"candidates": compute_candidates(current)}
