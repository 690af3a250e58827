from fastapi import FastAPI, HTTPException, Query
from pathlib import Path
from typing import List

from oracle.core.position import Position, InvalidMoveError
from oracle.core.solver import Solver
from driver.app.core.benchmark_registry import registry
from driver.app.core.settings import WORKERS, MIN_SOLVE_MOVES, configure_logging
from driver.app.schemas.benchmark_schema import SolveResponse, BenchmarkSummary, LevelResponse
from driver.app.services.benchmark_reader import load_records, BenchmarkFormatError
from driver.app.services.benchmark_runner import benchmark_runner

configure_logging()

app = FastAPI(title="Connect Four Oracle")


@app.get("/solve", response_model=SolveResponse)
def solve_position(moves: str = Query(..., min_length=MIN_SOLVE_MOVES, max_length=42,
                                       description="1-indexed columns, e.g. 4453")):
    """Scores the position reached by `moves` for the player to move."""
    try:
        position = Position.from_sequence(moves)
    except InvalidMoveError as e:
        raise HTTPException(status_code=422, detail=str(e))

    result = Solver().solve(position)
    return SolveResponse(moves=moves, board=position.to_matrix(), **result)


@app.get("/benchmarks", response_model=List[LevelResponse])
async def list_benchmarks():
    """Returns the configured difficulty levels and whether their data is on disk."""
    return [
        LevelResponse(id=key, label=val.label, description=val.description,
                      available=Path(val.path).is_file())
        for key, val in registry.list_all().items()
    ]


@app.post("/benchmarks/{level}/run", response_model=BenchmarkSummary)
async def run_benchmark(level: str, limit: int = 0, workers: int = WORKERS, mirror: bool = False):
    config = registry.get(level)
    if not config:
        raise HTTPException(status_code=404, detail="Benchmark level not found")

    try:
        records = load_records(config.path)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"Benchmark data missing: {Path(config.path).name}")
    except BenchmarkFormatError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if limit > 0:
        records = records[:limit]

    try:
        return await benchmark_runner.run_parallel(records, workers=workers, level=level, mirror=mirror)
    except InvalidMoveError as e:
        raise HTTPException(status_code=500, detail=str(e))
