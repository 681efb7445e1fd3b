"""Core Sudoku utilities used by higher-level techniques: puzzle text codec, validation, index math, unit iterators, and candidate computation."""

# solver_core.py
# - puzzle text <-> grid
# - validity / solved checks (27 unit sets, one pass)
# - units (rows, cols, boxes) in fixed scan order
# - candidates per cell and full candidate tables
# Grid is 9x9 list of lists of ints (0..9). 0 = blank. Coordinates are 0-based.

import re

from types_sudoku import CandidateTable, Candidates, Grid, Unit, cell_key

Cell = tuple[int, int]  # (row, col) 0-based

DIGITS = range(1, 10)


class FormatError(ValueError):
    """Puzzle text is not 81 characters from the alphabet {'.', '0'-'9'}."""


def normalize_input(text: str) -> str:
    """Drop all whitespace so pasted multi-line grids collapse to one line."""
    return re.sub(r"\s+", "", str(text or ""))


def parse_puzzle(text: str) -> Grid:
    s = str(text or "").strip()
    if len(s) != 81:
        raise FormatError("Puzzle must be 81 characters.")
    grid = [[0] * 9 for _ in range(9)]
    for i, ch in enumerate(s):
        if ch in ".0":
            continue
        if "1" <= ch <= "9":
            grid[i // 9][i % 9] = int(ch)
        else:
            raise FormatError("Puzzle may only contain digits 0-9 or '.'")
    return grid


def grid_to_string(grid: Grid) -> str:
    return "".join(str(v) if v else "." for row in grid for v in row)


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_index(r: int, c: int) -> int:
    return (r // 3) * 3 + (c // 3)


def unit_cells_row(r: int) -> list[Cell]:
    return [(r, c) for c in range(9)]


def unit_cells_col(c: int) -> list[Cell]:
    return [(r, c) for r in range(9)]


def unit_cells_box(b: int) -> list[Cell]:
    r0 = (b // 3) * 3
    c0 = (b % 3) * 3
    return [(r0 + i, c0 + j) for i in range(3) for j in range(3)]


def iter_units():
    """Yield (Unit, cells) for rows 0-8, then columns 0-8, then boxes 0-8."""
    for r in range(9):
        yield Unit("row", r), unit_cells_row(r)
    for c in range(9):
        yield Unit("col", c), unit_cells_col(c)
    for b in range(9):
        yield Unit("box", b), unit_cells_box(b)


def is_valid_grid(grid: Grid) -> bool:
    """True if every placed value is in 1..9 and no row, column or box repeats a value."""
    row_seen = [set() for _ in range(9)]
    col_seen = [set() for _ in range(9)]
    box_seen = [set() for _ in range(9)]
    for r in range(9):
        for c in range(9):
            v = grid[r][c]
            if not v:
                continue
            if v < 1 or v > 9:
                return False
            b = box_index(r, c)
            if v in row_seen[r] or v in col_seen[c] or v in box_seen[b]:
                return False
            row_seen[r].add(v)
            col_seen[c].add(v)
            box_seen[b].add(v)
    return True


def is_solved(grid: Grid) -> bool:
    return all(v for row in grid for v in row) and is_valid_grid(grid)


def candidates_for(grid: Grid, r: int, c: int) -> list[int]:
    if grid[r][c]:
        return []
    used = set()
    for k in range(9):
        used.add(grid[r][k])
        used.add(grid[k][c])
    r0 = (r // 3) * 3
    c0 = (c // 3) * 3
    for rr in range(r0, r0 + 3):
        used.update(grid[rr][c0:c0 + 3])
    return [d for d in DIGITS if d not in used]


def can_place(grid: Grid, r: int, c: int, d: int) -> bool:
    """True if `d` is not already in the row, column or box of (r, c)."""
    r0 = (r // 3) * 3
    c0 = (c // 3) * 3
    for k in range(9):
        if grid[r][k] == d or grid[k][c] == d or grid[r0 + k // 3][c0 + k % 3] == d:
            return False
    return True


def build_all_candidates(grid: Grid) -> CandidateTable:
    """Snapshot of candidates for every cell. Stale after any grid mutation."""
    return [[candidates_for(grid, r, c) for c in range(9)] for r in range(9)]


def compute_candidates(grid: Grid) -> Candidates:
    """Candidates of empty cells keyed like 'r1c2'."""
    cand = {}
    for r in range(9):
        for c in range(9):
            if grid[r][c] == 0:
                cand[cell_key(r, c)] = candidates_for(grid, r, c)
    return cand
