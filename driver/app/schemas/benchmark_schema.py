from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class BenchmarkRecord(BaseModel):
    moves: str
    expected_score: int
    line_number: Optional[int] = None


class SolveResponse(BaseModel):
    moves: str
    score: int
    outcome: str  # WIN / LOSS / DRAW for the player to move
    plies_to_outcome: int
    num_moves: int
    nodes_explored: int
    board: List[List[int]]  # 6 rows x 7 cols, Row 0 = Top


class RecordResult(BaseModel):
    moves: str
    expected_score: int
    score: int
    nodes_explored: int
    duration: float = 0.0

    @property
    def passed(self) -> bool:
        return self.score == self.expected_score


class BenchmarkSummary(BaseModel):
    # Ignore extra fields so older result dumps still load
    model_config = ConfigDict(extra='ignore')

    level: Optional[str] = None
    count: int
    passed: int
    failed: int
    mismatches: List[RecordResult] = []
    total_seconds: float
    mean_seconds: float
    mean_nodes: float


class LevelResponse(BaseModel):
    id: str
    label: str
    description: Optional[str] = None
    available: bool
