"""
Benchmark File Reader

A benchmark file holds one position per line: `<moves> <expected score>`,
where `<moves>` is the 1-indexed column sequence replayed from the empty board
and the score is from the point of view of the player to move.
Blank lines and `#` comments are skipped.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from driver.app.schemas.benchmark_schema import BenchmarkRecord

logger = logging.getLogger(__name__)


class BenchmarkFormatError(ValueError):
    def __init__(self, source: str, line_number: int, line: str, reason: str):
        super().__init__(f"{source}:{line_number}: {reason}: {line!r}")
        self.source = source
        self.line_number = line_number


def parse_lines(lines: Iterable[str], source: str = "<benchmark>") -> Iterator[BenchmarkRecord]:
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split()
        if len(parts) != 2:
            raise BenchmarkFormatError(source, line_number, line, "expected '<moves> <score>'")

        moves, score = parts
        try:
            expected = int(score)
        except ValueError:
            raise BenchmarkFormatError(source, line_number, line, "score is not an integer") from None

        yield BenchmarkRecord(moves=moves, expected_score=expected, line_number=line_number)


def load_records(path: Union[str, Path]) -> List[BenchmarkRecord]:
    """Reads every record of a benchmark file. File errors propagate as OSError."""
    path = Path(path)
    with open(path, "r") as f:
        records = list(parse_lines(f, source=path.name))
    logger.info("Loaded %d positions from %s", len(records), path)
    return records
