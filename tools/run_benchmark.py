#!/usr/bin/env python3
"""
CoverageBot Benchmark Runner

Runs the Bratko-Kopec positions through the greedy bot and measures raw
evaluation throughput.

Usage:
    python tools/run_benchmark.py [--workers 4] [--iterations 2000] [--verbose]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import chess

sys.path.insert(0, str(Path(__file__).parent.parent))

from coverage_bot.evaluation import CoverageEvaluator, EvaluatorConfig
from coverage_bot.utils.testing import run_bratko_kopec


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def measure_throughput(evaluator: CoverageEvaluator, iterations: int) -> float:
    """
    Evaluate every legal move of the starting position repeatedly.

    Returns:
        Move evaluations per second
    """
    board = chess.Board()
    moves = list(board.legal_moves)

    start = time.time()
    for i in range(iterations):
        evaluator.evaluate_move(board, moves[i % len(moves)])
    elapsed = time.time() - start

    return iterations / elapsed if elapsed > 0 else float("inf")


def run_benchmark(config: EvaluatorConfig, workers: int, iterations: int):
    """
    Run the suite and the throughput measurement.

    Args:
        config: Evaluator configuration
        workers: Worker processes for move scoring
        iterations: Move evaluations for the throughput measurement
    """
    logger = logging.getLogger(__name__)
    evaluator = CoverageEvaluator(config)

    print("=" * 80)
    print("BRATKO-KOPEC BENCHMARK - CoverageBot")
    print("=" * 80)
    print(f"Evaluator: {evaluator!r}")
    print(f"Search: one ply, {workers} worker(s)")
    print("=" * 80)

    result = run_bratko_kopec(evaluator, workers=workers)

    print(f"\n  Correct: {result['score']}/{result['total']} ({result['percentage']:.1f}%)")
    print(f"  Total time: {format_time(result['total_time'])}")
    print(f"  Avg time per position: {format_time(result['avg_time'])}")

    print(f"\n{'Id':<8} {'Found':<8} {'Expected':<16} {'Score':>8}")
    print("-" * 80)
    for r in result['results']:
        mark = "ok" if r.correct else ""
        print(f"{r.position.id:<8} {r.found_move:<8} {','.join(r.position.best_moves):<16} {r.score:>8} {mark}")

    logger.info(f"Measuring throughput over {iterations:,} evaluations")
    per_second = measure_throughput(evaluator, iterations)
    print(f"\n  Move evaluations/sec: {per_second:,.0f}")

    print("\n" + "=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return result


def main():
    parser = argparse.ArgumentParser(
        description="Run the Bratko-Kopec positions through CoverageBot"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes for move scoring (default: 1)"
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=2000,
        help="Move evaluations for the throughput measurement (default: 2000)"
    )
    parser.add_argument(
        "--legacy-bounds",
        action="store_true",
        help="Use the legacy 0 < index < 63 bounds check"
    )
    parser.add_argument(
        "--legacy-pawn-scan",
        action="store_true",
        help="Scan the forward-right pawn diagonal twice (legacy pawn scan)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging (every move score)"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        config = EvaluatorConfig(
            legacy_bounds=args.legacy_bounds,
            legacy_pawn_scan=args.legacy_pawn_scan,
        )
        run_benchmark(config, workers=max(1, args.workers), iterations=max(1, args.iterations))
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
