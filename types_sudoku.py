# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypedDict, Union

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

CandidateTable = list[list[list[int]]]
"""9x9 table of ascending candidate lists; filled cells hold an empty list."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""

UnitKind = Literal["row", "col", "box"]


def cell_key(r: int, c: int) -> str:
    """0-based (r, c) -> 1-based key like 'r1c1'."""
    return f"r{r + 1}c{c + 1}"


@dataclass(frozen=True)
class Unit:
    """A row, column or box, addressed by kind and 0-based index."""

    kind: UnitKind
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "index": self.index}


@dataclass(frozen=True)
class NakedSingleStep:
    r: int
    c: int
    value: int
    technique: Literal["naked_single"] = "naked_single"

    def to_dict(self) -> dict[str, Any]:
        return {"technique": self.technique, "cell": cell_key(self.r, self.c),
                "r": self.r, "c": self.c, "value": self.value}


@dataclass(frozen=True)
class HiddenSingleStep:
    unit: Unit
    r: int
    c: int
    value: int
    technique: Literal["hidden_single"] = "hidden_single"

    def to_dict(self) -> dict[str, Any]:
        return {"technique": self.technique, "unit": self.unit.to_dict(),
                "cell": cell_key(self.r, self.c), "r": self.r, "c": self.c, "value": self.value}


@dataclass(frozen=True)
class NakedPairStep:
    unit: Unit
    pair: tuple[int, int]
    r: int
    c: int
    removed: tuple[int, ...]
    technique: Literal["naked_pair"] = "naked_pair"

    def to_dict(self) -> dict[str, Any]:
        return {"technique": self.technique, "unit": self.unit.to_dict(), "pair": list(self.pair),
                "cell": cell_key(self.r, self.c), "r": self.r, "c": self.c,
                "removed": list(self.removed)}


@dataclass(frozen=True)
class BacktrackingFillStep:
    technique: Literal["backtracking_fill"] = "backtracking_fill"

    def to_dict(self) -> dict[str, Any]:
        return {"technique": self.technique}


Step = Union[NakedSingleStep, HiddenSingleStep, NakedPairStep, BacktrackingFillStep]
"""One entry of the solving trace. Steps are append-only and never mutated."""


class AnalysisResult(TypedDict):
    """Terminal output of a full puzzle analysis."""

    input: str  # puzzle text as received
    validity: str  # 'valid' or 'invalid'
    solutions: int  # 0, 1 or 2 (2 means "two or more")
    solved: bool  # deductive pass (+ fallback) reached a full grid
    status: str  # orchestrator terminal status, or 'invalid' / 'unsolvable'
    difficulty: str  # Easy / Medium / Hard / Extreme, or Invalid / Unsolvable
    techniques: list[str]  # deduplicated, in first-use order
    steps: list[dict[str, Any]]  # serialized trace, bounded length
    solution: str | None  # canonical solution text when unique
