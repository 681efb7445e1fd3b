# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

WIKI_PUZZLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
WIKI_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def wiki_puzzle():
    return WIKI_PUZZLE


@pytest.fixture
def wiki_solution():
    return WIKI_SOLUTION


@pytest.fixture
def naked_singles_puzzle():
    # WIKI_SOLUTION with one blank per row, column and box: every blank is forced.
    return (
        ".34678912"
        "672.95348"
        "198342.67"
        "8.9761423"
        "4268.3791"
        "7139248.6"
        "96.537284"
        "28741.635"
        "34528617."
    )


@pytest.fixture
def dead_end_puzzle():
    # Valid placements, but r1c9 has no candidate left.
    return "12345678." + "........9" + "." * 63
