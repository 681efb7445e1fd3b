"""
Sudoku Analysis Package

Validation, candidate generation, human-style deduction, MRV backtracking
(plain and time-bounded) and difficulty estimation for 9x9 puzzles.
"""

from .solver_core import FormatError, parse_puzzle, grid_to_string, is_valid_grid, is_solved
from .search import solve_by_backtracking, solve_by_backtracking_timed
from .sudoku_tools import analyze_puzzle, human_solve, estimate_difficulty
from .worker import SearchWorker, handle_search_request

__version__ = "1.0.0"
__all__ = [
    'FormatError',
    'parse_puzzle',
    'grid_to_string',
    'is_valid_grid',
    'is_solved',
    'solve_by_backtracking',
    'solve_by_backtracking_timed',
    'analyze_puzzle',
    'human_solve',
    'estimate_difficulty',
    'SearchWorker',
    'handle_search_request',
]
