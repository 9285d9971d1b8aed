# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from solver.errors import GridFormatError
from solver.sudoku_tools import compute_candidates_tool, solve_tool

app = FastAPI(title="Sudoku Solver Tool API")

# keep a single request from monopolising the server
MAX_WORKERS = 4
DEFAULT_MAX_SOLUTIONS = 1000


class PatternModel(BaseModel):
    pattern: str


class SolveRequest(BaseModel):
    pattern: str
    max_solutions: int = Field(default=DEFAULT_MAX_SOLUTIONS, ge=1)
    workers: int = Field(default=1, ge=1, le=MAX_WORKERS)


@app.post("/compute_candidates")
def api_cands(payload: PatternModel):
    try:
        return compute_candidates_tool(payload.pattern)
    except GridFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/solve")
def api_solve(req: SolveRequest):
    try:
        return solve_tool(req.pattern, max_solutions=req.max_solutions, workers=req.workers)
    except GridFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
