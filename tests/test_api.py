# tests/test_api.py
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import app

client = TestClient(app)


def test_analyze_accepts_multiline_paste(wiki_puzzle, wiki_solution):
    pasted = "\n".join(wiki_puzzle[i:i + 9] for i in range(0, 81, 9))
    resp = client.post("/analyze", json={"puzzle": pasted})
    assert resp.status_code == 200
    body = resp.json()
    assert body["input"] == wiki_puzzle
    assert body["solutions"] == 1
    assert body["solution"] == wiki_solution


def test_analyze_format_error_is_422():
    resp = client.post("/analyze", json={"puzzle": "123"})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Puzzle must be 81 characters."


def test_search_endpoint(wiki_puzzle):
    resp = client.post("/search", json={"puzzle": wiki_puzzle, "time_limit_ms": 5000})
    assert resp.status_code == 200
    assert resp.json()["status"] == "done"

    bad = client.post("/search", json={"puzzle": "x"})
    assert bad.json()["ok"] is False


def test_compute_candidates_endpoint(wiki_puzzle):
    from solver.solver_core import parse_puzzle

    resp = client.post("/compute_candidates", json={"grid": parse_puzzle(wiki_puzzle)})
    assert resp.json()["candidates"]["r1c3"] == [1, 2, 4]


def test_sanity_check_endpoint(wiki_puzzle):
    from solver.solver_core import parse_puzzle

    grid = parse_puzzle(wiki_puzzle)
    resp = client.post("/sanity_check", json={"original": grid, "current": grid})
    assert resp.json() == {"ok": True, "issues": []}
