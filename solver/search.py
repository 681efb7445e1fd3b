# search.py
"""Exhaustive depth-first search with MRV ordering and capped solution counting.

`solve_by_backtracking` runs to completion. `solve_by_backtracking_timed`
is the same search bounded by a wall-clock deadline; it never raises on
timeout, it reports status 'timeout' with whatever it found so far.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from rich.console import Console

from types_sudoku import Grid

from .solver_core import candidates_for, clone_grid, is_valid_grid

POLL_EVERY_NODES = 5000


@dataclass(frozen=True)
class SearchResult:
    count: int
    solution: Optional[Grid]


@dataclass(frozen=True)
class TimedSearchResult:
    status: Literal["done", "timeout"]
    count: int
    solution: Optional[Grid]
    nodes: int


@dataclass(frozen=True)
class Deadline:
    """Wall-clock budget measured from construction."""

    limit_ms: float
    started: float = field(default_factory=time.monotonic)

    def expired(self) -> bool:
        return (time.monotonic() - self.started) * 1000.0 > self.limit_ms


def pick_next_cell_mrv(grid: Grid) -> Optional[Tuple[int, int, list[int]]]:
    """Empty cell with the fewest candidates, scanning row-major.

    A cell with no candidates is returned at once (dead end); a cell with a
    single candidate ends the scan early. Returns None when the grid is full.
    """
    best = None
    for r in range(9):
        for c in range(9):
            if grid[r][c]:
                continue
            cand = candidates_for(grid, r, c)
            if not cand:
                return r, c, []
            if best is None or len(cand) < len(best[2]):
                best = (r, c, cand)
                if len(cand) == 1:
                    return best
    return best


def _placement_ok(grid: Grid, r: int, c: int) -> bool:
    """Only the cell just placed can introduce a conflict."""
    v = grid[r][c]
    r0 = (r // 3) * 3
    c0 = (c // 3) * 3
    for k in range(9):
        if k != c and grid[r][k] == v:
            return False
        if k != r and grid[k][c] == v:
            return False
        rr, cc = r0 + k // 3, c0 + k % 3
        if (rr, cc) != (r, c) and grid[rr][cc] == v:
            return False
    return True


class _Backtracker:
    """Owns its working grid; one placement is live per recursion depth."""

    def __init__(self, grid: Grid, max_solutions: int, deadline: Optional[Deadline] = None,
                 poll_every: int = POLL_EVERY_NODES):
        self.grid = clone_grid(grid)
        self.max_solutions = max_solutions
        self.deadline = deadline
        self.poll_every = max(1, poll_every)
        self.count = 0
        self.solution: Optional[Grid] = None
        self.nodes = 0

    def run(self) -> bool:
        """Return False if the deadline cut the search short."""
        if not is_valid_grid(self.grid):
            return True
        return self._dfs()

    def _dfs(self) -> bool:
        if self.count >= self.max_solutions:
            return True
        if self.deadline is not None and self.deadline.expired():
            return False
        self.nodes += 1
        if self.deadline is not None and self.nodes % self.poll_every == 0 and self.deadline.expired():
            return False

        nxt = pick_next_cell_mrv(self.grid)
        if nxt is None:
            self.count += 1
            if self.count == 1:
                self.solution = clone_grid(self.grid)
            return True
        r, c, cand = nxt
        if not cand:
            return True

        g = self.grid
        for v in cand:
            g[r][c] = v
            ok = self._dfs() if _placement_ok(g, r, c) else True
            g[r][c] = 0
            if not ok:
                return False
            if self.count >= self.max_solutions:
                return True
        return True


def solve_by_backtracking(grid: Grid, max_solutions: int = 2, verbose: bool = False) -> SearchResult:
    """Count completions of `grid` up to `max_solutions`; keep the first one found.

    The caller's grid is never modified.
    """
    bt = _Backtracker(grid, max_solutions)
    bt.run()
    if verbose:
        Console().print(f"search: {bt.count} solution(s) after {bt.nodes} nodes", style="bold cyan")
    return SearchResult(bt.count, bt.solution)


def solve_by_backtracking_timed(
    grid: Grid,
    max_solutions: int = 2,
    time_limit_ms: float = 800,
    poll_every: int = POLL_EVERY_NODES,
    verbose: bool = False,
) -> TimedSearchResult:
    """Same search as `solve_by_backtracking`, aborted once `time_limit_ms` elapses.

    On timeout the partial count, the first solution found (if any) and the
    visited node count are still reported.
    """
    bt = _Backtracker(grid, max_solutions, Deadline(time_limit_ms), poll_every)
    finished = bt.run()
    status = "done" if finished else "timeout"
    if verbose:
        Console().print(f"timed search: {status}, {bt.count} solution(s), {bt.nodes} nodes", style="bold cyan")
    return TimedSearchResult(status, bt.count, bt.solution, bt.nodes)
