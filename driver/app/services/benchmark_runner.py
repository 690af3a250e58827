"""
Benchmark Runner - Batch Oracle Checks

Solves every position of a benchmark and compares the engine's score with the
expected one. Positions are independent, so a batch can also be fanned out to
worker processes without changing any single result.
"""

import asyncio
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence

from oracle.core.position import Position
from oracle.core.solver import Solver
from driver.app.core.settings import WORKERS
from driver.app.schemas.benchmark_schema import BenchmarkRecord, RecordResult, BenchmarkSummary

logger = logging.getLogger(__name__)


def solve_record(record: BenchmarkRecord, mirror: bool = False) -> RecordResult:
    """Solves one record. Module-level so worker processes can pickle it."""
    position = Position.from_sequence(record.moves)
    if mirror:
        position = position.mirrored()

    solver = Solver()
    start = time.perf_counter()
    result = solver.solve(position)
    duration = time.perf_counter() - start

    return RecordResult(
        moves=record.moves,
        expected_score=record.expected_score,
        score=result["score"],
        nodes_explored=result["nodes_explored"],
        duration=duration,
    )


def clamp_workers(workers: int) -> int:
    """Keeps a requested worker count between 1 and the machine's CPU count."""
    return max(1, min(workers, os.cpu_count() or 1))


class BenchmarkRunner:
    def run(self, records: Sequence[BenchmarkRecord], level: Optional[str] = None,
            mirror: bool = False) -> BenchmarkSummary:
        """Solves the records one after another in this process."""
        start = time.perf_counter()
        results = [solve_record(record, mirror) for record in records]
        return self._summarize(results, time.perf_counter() - start, level)

    async def run_parallel(self, records: Sequence[BenchmarkRecord], workers: int = WORKERS,
                           level: Optional[str] = None, mirror: bool = False) -> BenchmarkSummary:
        """Same results as run(), with records spread over `workers` processes."""
        loop = asyncio.get_running_loop()
        workers = clamp_workers(workers)
        if workers == 1:
            # Off the event loop, so the server keeps answering while we solve
            return await loop.run_in_executor(None, self.run, records, level, mirror)

        start = time.perf_counter()
        with ProcessPoolExecutor(max_workers=workers) as pool:
            tasks = [loop.run_in_executor(pool, solve_record, record, mirror) for record in records]
            results = await asyncio.gather(*tasks)
        return self._summarize(list(results), time.perf_counter() - start, level)

    def _summarize(self, results: List[RecordResult], elapsed: float,
                   level: Optional[str]) -> BenchmarkSummary:
        mismatches = [r for r in results if not r.passed]
        for r in mismatches:
            logger.warning("Mismatch on %s: expected %d, got %d", r.moves, r.expected_score, r.score)

        count = len(results)
        summary = BenchmarkSummary(
            level=level,
            count=count,
            passed=count - len(mismatches),
            failed=len(mismatches),
            mismatches=mismatches,
            total_seconds=elapsed,
            mean_seconds=(sum(r.duration for r in results) / count) if count > 0 else 0.0,
            mean_nodes=(sum(r.nodes_explored for r in results) / count) if count > 0 else 0.0,
        )
        logger.info("Benchmark %s: %d/%d passed in %.3fs",
                    level or "<adhoc>", summary.passed, count, elapsed)
        return summary


# Singleton
benchmark_runner = BenchmarkRunner()
