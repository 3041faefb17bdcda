"""
One-Ply Greedy Move Selection

The bot does not search: it plays every legal move once, scores the
resulting position with the evaluator, and picks the highest score.

Algorithm:
    1. Generate all legal moves
    2. For each move: apply, evaluate, undo (Evaluator.evaluate_move)
    3. Return the move with the maximum score (first one on ties)

The maximum is taken for either side to move. Scores are White-biased,
so a Black bot prefers moves that look good for White. This is kept
until the scoring perspective is decided.

Parallel Scoring:
    With workers > 1 the moves are split into chunks and each chunk is
    scored in a worker process on its own copy of the position. The
    caller's board is never shared with the workers. A stop request is
    checked as each chunk finishes; chunks not yet started are cancelled.
"""

import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, List, Optional, Sequence, Tuple

import chess
from coverage_bot.evaluation.base import Evaluator

logger = logging.getLogger(__name__)


def _score_chunk(args: tuple) -> List[Tuple[int, int]]:
    """
    Worker function for parallel scoring.

    Rebuilds the position from FEN so every worker owns its board.
    Returns list of (move_index, score) tuples.
    """
    fen, chess960, chunk, evaluator = args
    board = chess.Board(fen, chess960=chess960)
    return [(index, evaluator.evaluate_move(board, move)) for index, move in chunk]


def _score_moves_parallel(
    board: chess.Board,
    evaluator: Evaluator,
    moves: Sequence[chess.Move],
    workers: int,
    should_stop: Optional[Callable[[], bool]] = None,
) -> List[Tuple[chess.Move, int]]:
    chunk_size = max(1, math.ceil(len(moves) / workers))
    indexed_moves = list(enumerate(moves))
    fen = board.fen()

    chunks = [
        (fen, board.chess960, indexed_moves[i:i + chunk_size], evaluator)
        for i in range(0, len(indexed_moves), chunk_size)
    ]

    results = {}
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_score_chunk, chunk) for chunk in chunks]

        # Chunks are collected in order, so a stop keeps a prefix of moves
        for future in futures:
            results.update(future.result())

            if should_stop is not None and should_stop():
                for pending in futures:
                    pending.cancel()
                logger.info(f"Scoring stopped after {len(results)}/{len(moves)} moves")
                break

    return [(move, results[i]) for i, move in enumerate(moves) if i in results]


def score_moves(
    board: chess.Board,
    evaluator: Evaluator,
    moves: Optional[Sequence[chess.Move]] = None,
    workers: int = 1,
    should_stop: Optional[Callable[[], bool]] = None,
) -> List[Tuple[chess.Move, int]]:
    """
    Score candidate moves with the evaluator.

    Args:
        board: Current position (restored after every move)
        evaluator: Position evaluator
        moves: Moves to score (default: all legal moves)
        workers: Worker processes; 1 scores in this process
        should_stop: Optional callable polled after each move (after each
            chunk with workers > 1); scoring ends early when it returns True

    Returns:
        List of (move, score) in the order the moves were given
    """
    if moves is None:
        moves = list(board.legal_moves)

    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    if workers > 1 and len(moves) > 1:
        logger.debug(f"Scoring {len(moves)} moves with {workers} workers")
        return _score_moves_parallel(board, evaluator, moves, workers, should_stop)

    scored = []
    for move in moves:
        score = evaluator.evaluate_move(board, move)
        scored.append((move, score))
        logger.debug(f"Move: {move.uci()}, Score: {score}")

        if should_stop is not None and should_stop():
            logger.info(f"Scoring stopped after {len(scored)}/{len(moves)} moves")
            break

    return scored


def find_best_move(
    board: chess.Board,
    evaluator: Evaluator,
    workers: int = 1,
    should_stop: Optional[Callable[[], bool]] = None,
    verbose: bool = False,
) -> Tuple[chess.Move, int, int]:
    """
    Find the highest-scoring move in the current position.

    Args:
        board: Current chess position
        evaluator: Position evaluation function
        workers: Worker processes for scoring (1 = sequential)
        should_stop: Optional stop flag callback (see score_moves)
        verbose: If True, print every move score

    Returns:
        Tuple of (best_move, score, nodes)
            - best_move: The first move reaching the maximum score
            - score: Score of the best move
            - nodes: Number of moves evaluated

    Raises:
        ValueError: If no legal moves available (game over)
    """
    legal_moves = list(board.legal_moves)
    if not legal_moves:
        raise ValueError("No legal moves available")

    start_time = time.time()
    scored = score_moves(board, evaluator, legal_moves, workers, should_stop)

    best_move, best_score = scored[0]
    for move, score in scored[1:]:
        if score > best_score:
            best_move = move
            best_score = score

    if verbose:
        for move, score in scored:
            print(f"Move: {move}, Score: {score}")
        print(f"\nMoves evaluated: {len(scored)}")
        print(f"Best move: {best_move}, Score: {best_score}")

    logger.info(
        f"Best move {best_move.uci()} score={best_score} "
        f"moves={len(scored)} time={time.time() - start_time:.3f}s"
    )
    return best_move, best_score, len(scored)
