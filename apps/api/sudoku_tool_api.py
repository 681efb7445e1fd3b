# sudoku_tool_api.py
# Optional FastAPI wrapper for the analysis tools.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from typing import Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from solver.solver_core import FormatError, normalize_input
from solver.sudoku_tools import analyze_puzzle, compute_candidates_tool, sanity_check
from solver.worker import handle_search_request

app = FastAPI(title="Sudoku Analysis Tool API")

class PuzzleModel(BaseModel):
    puzzle: str

class GridModel(BaseModel):
    grid: List[List[int]]

@app.post("/analyze")
def api_analyze(payload: PuzzleModel):
    try:
        return analyze_puzzle(normalize_input(payload.puzzle))
    except FormatError as e:
        raise HTTPException(status_code=422, detail=str(e))

@app.post("/search")
def api_search(payload: Dict):
    # Plain def: FastAPI runs it in its threadpool, off the event loop.
    return handle_search_request(payload)

@app.post("/sanity_check")
def api_sanity(payload: Dict[str, List[List[int]]]):
    return sanity_check(payload["original"], payload["current"])

@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)
