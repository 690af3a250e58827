import argparse
import asyncio

from oracle.core.position import Position, InvalidMoveError
from oracle.core.solver import Solver
from driver.app.core.benchmark_registry import registry
from driver.app.core.settings import WORKERS, configure_logging
from driver.app.services.benchmark_reader import load_records
from driver.app.services.benchmark_runner import benchmark_runner


def ask_level() -> str:
    """Interactive difficulty prompt, only offers levels with data on disk."""
    levels = registry.available()
    if not levels:
        raise SystemExit("No benchmark data found. Check ORACLE_BENCHMARK_CONFIG.")

    print("Available levels:")
    for key, val in levels.items():
        print(f"  {key:<14} {val.label}")

    while True:
        choice = input(f"\nDifficulty level ({'/'.join(levels)}): ").strip()
        if choice in levels:
            return choice
        print("Unknown level. Try again.")


def solve_one(moves: str):
    try:
        position = Position.from_sequence(moves)
    except InvalidMoveError as e:
        raise SystemExit(f"Invalid moves: {e}")

    print(position)
    result = Solver().solve(position)
    print(f"\nScore: {result['score']}  ({result['outcome']}"
          f" in {result['plies_to_outcome']} plies, {result['nodes_explored']} nodes)")


def run_level(level: str, path: str, workers: int, limit: int, mirror: bool):
    records = load_records(path)
    if limit > 0:
        records = records[:limit]

    print(f"\nSolving {len(records)} positions ({level})...")
    summary = asyncio.run(benchmark_runner.run_parallel(records, workers=workers, level=level, mirror=mirror))

    print("=======================================")
    print(f"  Passed:     {summary.passed}/{summary.count}")
    print(f"  Total time: {summary.total_seconds:.3f}s")
    print(f"  Mean time:  {summary.mean_seconds * 1e6:.1f}us per position")
    print(f"  Mean nodes: {summary.mean_nodes:.1f}")
    print("=======================================")
    for miss in summary.mismatches:
        print(f"  MISMATCH {miss.moves}: expected {miss.expected_score}, got {miss.score}")

    return summary.failed == 0


def main():
    parser = argparse.ArgumentParser(description="Connect Four oracle: exact scores for 7x6 positions.")
    parser.add_argument("--moves", help="solve a single position given as 1-indexed columns")
    parser.add_argument("--level", help="benchmark level from the registry")
    parser.add_argument("--file", help="benchmark file to run instead of a registered level")
    parser.add_argument("--workers", type=int, default=WORKERS)
    parser.add_argument("--limit", type=int, default=0, help="only run the first N positions")
    parser.add_argument("--mirror", action="store_true", help="solve the mirror image of each position")
    args = parser.parse_args()

    configure_logging()

    if args.moves is not None:
        solve_one(args.moves)
        return

    if args.file:
        ok = run_level(args.file, args.file, args.workers, args.limit, args.mirror)
    else:
        level = args.level or ask_level()
        config = registry.get(level)
        if not config:
            raise SystemExit(f"Unknown level: {level}")
        ok = run_level(level, config.path, args.workers, args.limit, args.mirror)

    raise SystemExit(0 if ok else 1)


if __name__ == "__main__":
    main()
