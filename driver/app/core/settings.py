import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

DEFAULT_BENCHMARK_CONFIG = Path(__file__).resolve().parents[2] / "config" / "benchmarks.yaml"

BENCHMARK_CONFIG = os.getenv("ORACLE_BENCHMARK_CONFIG", str(DEFAULT_BENCHMARK_CONFIG))
LOG_LEVEL = os.getenv("ORACLE_LOG_LEVEL", "INFO").upper()
WORKERS = int(os.getenv("ORACLE_WORKERS", "1"))
# Shortest move sequence /solve accepts; shallow positions take hours without a cache
MIN_SOLVE_MOVES = int(os.getenv("ORACLE_MIN_SOLVE_MOVES", "1"))


def configure_logging(level: str = LOG_LEVEL):
    """Shared logging setup for the console and the API."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
