"""Human-style deductive rules: naked singles, hidden singles (placements) and naked pairs (eliminations).

Each rule works against a candidate snapshot built by `build_all_candidates`,
appends the steps it takes to `steps`, and returns True if it made progress.
"""

from __future__ import annotations

from collections import defaultdict

from types_sudoku import CandidateTable, Grid, HiddenSingleStep, NakedPairStep, NakedSingleStep, Step

from .solver_core import Cell, can_place, iter_units

Eliminations = dict[Cell, set[int]]


def apply_naked_singles(grid: Grid, cand: CandidateTable, steps: list[Step]) -> bool:
    changed = False
    for r in range(9):
        for c in range(9):
            if grid[r][c]:
                continue
            if len(cand[r][c]) == 1:
                v = cand[r][c][0]
                grid[r][c] = v
                steps.append(NakedSingleStep(r, c, v))
                changed = True
    return changed


def apply_hidden_singles(grid: Grid, cand: CandidateTable, steps: list[Step]) -> bool:
    """Place a digit that fits exactly one empty cell of a unit.

    Snapshot candidates are filtered through the live grid: a cell filled
    earlier in this pass, or one that now sees `d` in a peer, is not a place
    for `d`.
    """
    changed = False
    for unit, cells in iter_units():
        places: dict[int, list[Cell]] = {d: [] for d in range(1, 10)}
        for r, c in cells:
            if grid[r][c]:
                continue
            for d in cand[r][c]:
                if can_place(grid, r, c, d):
                    places[d].append((r, c))
        for d in range(1, 10):
            if len(places[d]) != 1:
                continue
            r, c = places[d][0]
            if grid[r][c]:
                continue
            grid[r][c] = d
            steps.append(HiddenSingleStep(unit, r, c, d))
            changed = True
    return changed


def apply_naked_pairs(
    grid: Grid,
    cand: CandidateTable,
    steps: list[Step],
    eliminated: Eliminations | None = None,
) -> bool:
    """Two cells of a unit sharing the same two candidates claim both digits;
    remove them from every other empty cell of that unit.

    Narrows `cand` in place and never places a value. When `eliminated` is
    given, every removal is recorded there too so callers can carry it over
    to the next candidate rebuild.
    """
    changed = False
    for unit, cells in iter_units():
        pairs: dict[tuple[int, ...], list[Cell]] = defaultdict(list)
        for r, c in cells:
            if grid[r][c] or len(cand[r][c]) != 2:
                continue
            pairs[tuple(sorted(cand[r][c]))].append((r, c))

        for pair, owners in pairs.items():
            if len(owners) != 2:
                continue
            for r, c in cells:
                if grid[r][c] or (r, c) in owners:
                    continue
                removed = tuple(sorted(d for d in cand[r][c] if d in pair))
                if not removed:
                    continue
                cand[r][c] = [d for d in cand[r][c] if d not in pair]
                if eliminated is not None:
                    eliminated.setdefault((r, c), set()).update(removed)
                steps.append(NakedPairStep(unit, pair, r, c, removed))
                changed = True
    return changed
