# worker.py
"""Message-passing boundary for the time-bounded search.

A request is a plain dict (puzzle text, solution cap, time budget); the reply
is exactly one plain dict. Nothing mutable is shared with the caller: the
worker parses its own grid from the request text.
"""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import DEFAULTS
from .search import solve_by_backtracking_timed
from .solver_core import FormatError, grid_to_string, parse_puzzle


class SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    puzzle: str
    max_solutions: int = Field(DEFAULTS["max_solutions"], ge=1)
    time_limit_ms: int = Field(DEFAULTS["time_limit_ms"], gt=0)


class SearchResponse(BaseModel):
    ok: bool
    status: Optional[Literal["done", "timeout"]] = None
    count: int = 0
    nodes: int = 0
    solution: Optional[str] = None
    error: Optional[str] = None


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    where = ".".join(str(p) for p in err.get("loc", ()))
    return f"{where}: {err.get('msg')}" if where else str(err.get("msg"))


def handle_search_request(message: Any, poll_every: int = DEFAULTS["poll_every_nodes"]) -> Dict[str, Any]:
    """Run one timed search for `message` and build the single reply."""
    try:
        req = SearchRequest.model_validate(message)
        grid = parse_puzzle(req.puzzle)
    except ValidationError as e:
        return SearchResponse(ok=False, error=_first_error(e)).model_dump(exclude_none=True)
    except FormatError as e:
        return SearchResponse(ok=False, error=str(e)).model_dump(exclude_none=True)

    res = solve_by_backtracking_timed(grid, req.max_solutions, req.time_limit_ms, poll_every)
    return SearchResponse(
        ok=True,
        status=res.status,
        count=res.count,
        nodes=res.nodes,
        solution=grid_to_string(res.solution) if res.solution else None,
    ).model_dump(exclude={"error"})


class SearchWorker:
    """Runs timed searches off the caller's thread.

    `submit` returns a future that resolves to the reply dict; it never
    resolves with an exception for bad input.
    """

    def __init__(self, executor: Optional[Executor] = None, poll_every: int = DEFAULTS["poll_every_nodes"]):
        self._own_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="sudoku-search")
        self.poll_every = poll_every

    def submit(self, message: Dict[str, Any]) -> "Future[Dict[str, Any]]":
        return self._executor.submit(handle_search_request, message, self.poll_every)

    def close(self) -> None:
        if self._own_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "SearchWorker":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
