"""
Move-Selection Benchmarking

This module runs the greedy bot over positions with a known best move and
reports how often it plays that move.

Test Suite:
    Bratko-Kopec Test: tactical positions by Danny Kopec and Ivan Bratko
    (1982). Most of them need several plies of search, so a one-ply bot
    is expected to score low; the suite is mainly a regression check and a
    throughput measurement for the evaluator.

Evaluation Metrics:
    - Correct Moves: positions where the bot played a listed best move
    - Time per Position
    - Moves Evaluated

References:
    - Bratko-Kopec: https://www.chessprogramming.org/Bratko-Kopec_Test
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import chess
from tqdm import tqdm

from coverage_bot.evaluation.base import Evaluator
from coverage_bot.search.greedy import find_best_move

logger = logging.getLogger(__name__)


@dataclass
class TestPosition:
    """
    A test position with expected best move(s).

    Attributes:
        fen: Board position in FEN notation
        best_moves: List of acceptable best moves (UCI format)
        description: Human-readable description of the position
        id: Position identifier (e.g., "BK.01")
    """
    __test__ = False

    fen: str
    best_moves: List[str]
    description: str = ""
    id: str = ""


@dataclass
class TestResult:
    """
    Result of running the bot on a single position.

    Attributes:
        position: The test position
        found_move: Move the bot played (UCI format)
        score: Evaluation score of that move
        correct: Whether the bot played a best move
        time_taken: Time spent (seconds)
        moves_evaluated: Number of candidate moves scored
    """
    __test__ = False

    position: TestPosition
    found_move: str
    score: int
    correct: bool
    time_taken: float
    moves_evaluated: int = 0


BRATKO_KOPEC_POSITIONS = [
    TestPosition(
        id="BK.01",
        fen="1k1r4/pp1b1R2/3q2pp/4p3/2B5/4Q3/PPP2B2/2K5 b - - 0 1",
        best_moves=["d6d1"],
        description="Qd1+ forces mate"
    ),
    TestPosition(
        id="BK.02",
        fen="3r1k2/4npp1/1ppr3p/p6P/P2PPPP1/1NR5/5K2/2R5 w - - 0 1",
        best_moves=["d4d5"],
        description="Pawn break d5"
    ),
    TestPosition(
        id="BK.04",
        fen="rnbqkb1r/p3pppp/1p6/2ppP3/3N4/2P5/PPP1QPPP/R1B1KB1R w KQkq - 0 1",
        best_moves=["e5e6"],
        description="Pawn break e6"
    ),
    TestPosition(
        id="BK.05",
        fen="r1b2rk1/2q1b1pp/p2ppn2/1p6/3QP3/1BN1B3/PPP3PP/R4RK1 w - - 0 1",
        best_moves=["c3d5", "a2a4"],
        description="Nd5 or a4"
    ),
    TestPosition(
        id="BK.06",
        fen="2r3k1/pppR1pp1/4p3/4P1P1/5P2/1P4K1/P1P5/8 w - - 0 1",
        best_moves=["g5g6"],
        description="Pawn push g6"
    ),
    TestPosition(
        id="BK.07",
        fen="1nk1r1r1/pp2n1pp/4p3/q2pPp1N/b1pP1P2/B1P2R2/2P1B1PP/R2Q2K1 w - - 0 1",
        best_moves=["h5f6"],
        description="Knight jump Nf6"
    ),
    TestPosition(
        id="BK.10",
        fen="3rr1k1/pp3pp1/1qn2np1/8/3p4/PP1R1P2/2P1NQPP/R1B3K1 b - - 0 1",
        best_moves=["c6e5"],
        description="Knight centralization Ne5"
    ),
    TestPosition(
        id="BK.12",
        fen="r3r1k1/ppqb1ppp/8/4p1NQ/8/2P5/PP3PPP/R3R1K1 b - - 0 1",
        best_moves=["d7f5"],
        description="Defence Bf5"
    ),
    TestPosition(
        id="BK.15",
        fen="2r3k1/1p2q1pp/2b1pr2/p1pp4/6Q1/1P1PP1R1/P1PN2PP/5RK1 w - - 0 1",
        best_moves=["g4g7"],
        description="Queen sacrifice Qxg7+"
    ),
    TestPosition(
        id="BK.19",
        fen="3rr3/2pq2pk/p2p1pnp/8/2QBPP2/1P6/P5PP/4RRK1 b - - 0 1",
        best_moves=["e8e4"],
        description="Exchange sacrifice Rxe4"
    ),
    TestPosition(
        id="BK.21",
        fen="3rn2k/ppb2rpp/2ppqp2/5N2/2P1P3/1P5Q/PB3PPP/3RR1K1 w - - 0 1",
        best_moves=["h3h7"],
        description="Queen sacrifice Qxh7+"
    ),
    TestPosition(
        id="BK.22",
        fen="2r2rk1/1bqnbpp1/1p1ppn1p/pP6/N1P1P3/P2B1N1P/1B2QPP1/R2R2K1 b - - 0 1",
        best_moves=["b7e4"],
        description="Bishop capture Bxe4"
    ),
]


def evaluate_position(
    position: TestPosition,
    evaluator: Evaluator,
    workers: int = 1,
) -> TestResult:
    """
    Run the bot on a single test position.

    Args:
        position: Test position to evaluate
        evaluator: Position evaluator
        workers: Worker processes for move scoring

    Returns:
        TestResult with the bot's move and whether it was correct
    """
    board = chess.Board(position.fen)

    start_time = time.time()
    best_move, score, moves_evaluated = find_best_move(board, evaluator, workers=workers)
    time_taken = time.time() - start_time

    found_move_uci = best_move.uci()
    correct = found_move_uci in position.best_moves

    logger.debug(
        f"{position.id}: found {found_move_uci} (score {score}), "
        f"expected {position.best_moves}, {'correct' if correct else 'wrong'}"
    )

    return TestResult(
        position=position,
        found_move=found_move_uci,
        score=score,
        correct=correct,
        time_taken=time_taken,
        moves_evaluated=moves_evaluated,
    )


def run_bratko_kopec(
    evaluator: Evaluator,
    positions: Optional[Sequence[TestPosition]] = None,
    workers: int = 1,
    show_progress: bool = True,
) -> Dict[str, Any]:
    """
    Run the Bratko-Kopec test suite.

    Args:
        evaluator: Position evaluator
        positions: Positions to run (default: BRATKO_KOPEC_POSITIONS)
        workers: Worker processes for move scoring
        show_progress: Show a tqdm progress bar

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of TestResult objects
            - avg_time: Average time per position
            - total_time: Sum of time per position
    """
    if positions is None:
        positions = BRATKO_KOPEC_POSITIONS

    results = []
    for position in tqdm(positions, desc="Bratko-Kopec", disable=not show_progress):
        results.append(evaluate_position(position, evaluator, workers=workers))

    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)
    avg_time = total_time / len(positions) if positions else 0
    percentage = (correct_count / len(positions) * 100) if positions else 0

    logger.info(f"Bratko-Kopec: {correct_count}/{len(positions)} ({percentage:.1f}%)")

    return {
        'score': correct_count,
        'total': len(positions),
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }
