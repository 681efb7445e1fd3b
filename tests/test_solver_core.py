# tests/test_solver_core.py
import pytest

from solver.solver_core import (
    FormatError, box_index, build_all_candidates, candidates_for, compute_candidates,
    grid_to_string, is_solved, is_valid_grid, iter_units, normalize_input, parse_puzzle,
)


def test_parse_reads_givens_and_blanks(wiki_puzzle):
    grid = parse_puzzle(wiki_puzzle)
    assert grid[0][:5] == [5, 3, 0, 0, 7]
    assert grid[8][8] == 9
    assert sum(1 for row in grid for v in row if v) == 30


def test_parse_trims_surrounding_whitespace(wiki_puzzle):
    assert parse_puzzle(f"  {wiki_puzzle}\n") == parse_puzzle(wiki_puzzle)


def test_parse_rejects_wrong_length():
    with pytest.raises(FormatError, match="Puzzle must be 81 characters."):
        parse_puzzle("." * 80)


def test_parse_rejects_78_character_example():
    with pytest.raises(FormatError, match="81 characters"):
        parse_puzzle("53..7....6..195....98....6.8...6...34..8..6...2...1.6....28....419..5....8..79")


def test_parse_rejects_letters():
    with pytest.raises(FormatError) as exc:
        parse_puzzle("x" + "." * 80)
    assert str(exc.value) == "Puzzle may only contain digits 0-9 or '.'"


def test_format_error_is_value_error():
    assert issubclass(FormatError, ValueError)


def test_round_trip_maps_zero_to_dot(wiki_puzzle):
    zeros = wiki_puzzle.replace(".", "0")
    assert grid_to_string(parse_puzzle(zeros)) == wiki_puzzle
    assert grid_to_string(parse_puzzle(wiki_puzzle)) == wiki_puzzle


def test_normalize_input_drops_inner_whitespace(wiki_puzzle):
    rows = [wiki_puzzle[i:i + 9] for i in range(0, 81, 9)]
    assert normalize_input("\n".join(rows) + "\n") == wiki_puzzle
    assert normalize_input(None) == ""


def test_box_index():
    assert box_index(0, 0) == 0
    assert box_index(4, 4) == 4
    assert box_index(2, 8) == 2
    assert box_index(8, 0) == 6


def test_units_scan_rows_then_cols_then_boxes():
    units = list(iter_units())
    assert len(units) == 27
    assert [u.kind for u, _ in units[:9]] == ["row"] * 9
    assert [u.kind for u, _ in units[9:18]] == ["col"] * 9
    assert [u.kind for u, _ in units[18:]] == ["box"] * 9
    unit, cells = units[18 + 5]
    assert unit.index == 5
    assert cells[0] == (3, 6) and cells[-1] == (5, 8)


@pytest.mark.parametrize("cells", [
    [(0, 0), (0, 7)],  # row
    [(1, 4), (6, 4)],  # column
    [(3, 3), (5, 5)],  # box
])
def test_duplicate_in_any_unit_is_invalid(cells):
    grid = [[0] * 9 for _ in range(9)]
    for r, c in cells:
        grid[r][c] = 5
    assert not is_valid_grid(grid)


def test_out_of_range_value_is_invalid():
    grid = [[0] * 9 for _ in range(9)]
    grid[2][2] = 10
    assert not is_valid_grid(grid)


def test_empty_and_partial_grids_are_valid(wiki_puzzle):
    assert is_valid_grid([[0] * 9 for _ in range(9)])
    assert is_valid_grid(parse_puzzle(wiki_puzzle))


def test_is_solved(wiki_puzzle, wiki_solution):
    assert is_solved(parse_puzzle(wiki_solution))
    assert not is_solved(parse_puzzle(wiki_puzzle))
    broken = parse_puzzle(wiki_solution)
    broken[0][0], broken[0][1] = broken[0][1], broken[0][0]
    assert not is_solved(broken)


def test_candidates_for(wiki_puzzle):
    grid = parse_puzzle(wiki_puzzle)
    assert candidates_for(grid, 0, 0) == []
    # r1c3: row has 5,3,7; column has 8; box has 5,3,6,9,8
    assert candidates_for(grid, 0, 2) == [1, 2, 4]
    # r5c5 sees every digit but 5 across its row, column and box
    assert candidates_for(grid, 4, 4) == [5]


def test_build_all_candidates_is_a_snapshot(wiki_puzzle):
    grid = parse_puzzle(wiki_puzzle)
    table = build_all_candidates(grid)
    assert table[0][2] == [1, 2, 4]
    grid[0][2] = 4
    assert table[0][2] == [1, 2, 4]
    assert build_all_candidates(grid)[0][2] == []


def test_compute_candidates_keys_are_one_based(wiki_puzzle):
    cand = compute_candidates(parse_puzzle(wiki_puzzle))
    assert "r1c1" not in cand
    assert cand["r1c3"] == [1, 2, 4]
    assert len(cand) == 51
