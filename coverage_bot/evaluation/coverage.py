"""
Material + Coverage Evaluation

This module implements the bot's evaluation function:
    1. Material counting (piece values, scaled x100)
    2. Coverage: squares each piece reaches along its movement directions
    3. Threat: value of the pieces (friend or foe) those scans run into

    score = material_diff * 100 + coverage + threat * 2

Material dominates: a pawn is worth more than any realistic coverage swing.

Piece Scans:
    - Pawn: the two forward diagonals, 1 step
    - Knight: the 8 knight jumps, 1 step
    - Bishop: 4 diagonals, up to 8 steps
    - Rook: 4 orthogonals, up to 8 steps
    - Queen: 4 orthogonals + 4 diagonals, up to 8 steps
    - King: 4 orthogonals + 4 diagonals, 1 step

Coverage is computed for White only by default, whichever side is to move.
Whether this is intended is still open; see EvaluatorConfig.coverage_color.
"""

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Tuple

import chess
import numpy as np
from coverage_bot.board.representation import (
    BLACK_OFFSET,
    PIECE_TYPES,
    WHITE_OFFSET,
    BoardPiece,
    get_all_piece_lists,
    piece_counts,
)
from coverage_bot.evaluation.base import Evaluator
from coverage_bot.evaluation.config import DEFAULT_CONFIG, EvaluatorConfig
from coverage_bot.evaluation.scanner import (
    DIAGONAL,
    KNIGHT_OFFSETS,
    ORTHOGONAL,
    pawn_directions,
    scan_direction,
)

#fmt: off
PIECE_VALUES = {
    chess.PAWN: 1,
    chess.KNIGHT: 3,
    chess.BISHOP: 3,
    chess.ROOK: 5,
    chess.QUEEN: 9,
    chess.KING: 100,
}
#fmt: on

# Values in PIECE_LIST_ORDER group order, for dotting with piece_counts()
MATERIAL_VECTOR = np.array([PIECE_VALUES[piece_type] for piece_type in PIECE_TYPES], dtype=np.int64)

# (rank_delta, file_delta, max_steps)
Ray = Tuple[int, int, int]


class InvalidPieceTypeError(ValueError):
    """A piece type outside pawn..king reached coverage dispatch."""


class PieceCoverage(NamedTuple):
    """
    Coverage of a single piece.

    Attributes:
        coverage: Total steps over all of the piece's scans
        threatened: Occupant reported by each scan (sentinels included)
    """
    coverage: int
    threatened: Tuple[BoardPiece, ...]

    @property
    def threat(self) -> int:
        return sum(piece_value(piece.piece_type) for piece in self.threatened)


class CoverageTotals(NamedTuple):
    """Coverage and threat summed over every piece of one side."""
    coverage: int
    threat: int


@dataclass(frozen=True)
class EvaluationBreakdown:
    """
    Components of one evaluation.

    Attributes:
        material_diff: White material minus Black material (unscaled)
        coverage: Coverage total of the scored side
        threat: Threat total of the scored side (unweighted)
        score: Final combined score
    """
    material_diff: int
    coverage: int
    threat: int
    score: int


def piece_value(piece_type: int) -> int:
    """
    Material value of a piece type.

    Returns:
        Value from PIECE_VALUES, 0 for the sentinel or anything unknown
    """
    return PIECE_VALUES.get(piece_type, 0)


def material_score(board: chess.Board, color: chess.Color) -> int:
    """
    Sum of piece values for one side.

    Args:
        board: Board to count
        color: chess.WHITE or chess.BLACK

    Returns:
        int: e.g. 139 for either side in the starting position
    """
    offset = WHITE_OFFSET if color == chess.WHITE else BLACK_OFFSET
    counts = piece_counts(board)[offset:offset + len(PIECE_TYPES)]
    return int(counts @ MATERIAL_VECTOR)


def material_diff(board: chess.Board) -> int:
    """White material minus Black material."""
    return material_score(board, chess.WHITE) - material_score(board, chess.BLACK)


def _single_steps(directions: Iterable[Tuple[int, int]]) -> List[Ray]:
    return [(rank_delta, file_delta, 1) for rank_delta, file_delta in directions]


def _slides(directions: Iterable[Tuple[int, int]], max_steps: int) -> List[Ray]:
    return [(rank_delta, file_delta, max_steps) for rank_delta, file_delta in directions]


_RAYS_BY_TYPE = {
    chess.PAWN: lambda piece, config: _single_steps(
        pawn_directions(piece.color, legacy=config.legacy_pawn_scan)
    ),
    chess.KNIGHT: lambda piece, config: _single_steps(KNIGHT_OFFSETS),
    chess.BISHOP: lambda piece, config: _slides(DIAGONAL, config.slider_range),
    chess.ROOK: lambda piece, config: _slides(ORTHOGONAL, config.slider_range),
    chess.QUEEN: lambda piece, config: _slides(ORTHOGONAL + DIAGONAL, config.slider_range),
    chess.KING: lambda piece, config: _single_steps(ORTHOGONAL + DIAGONAL),
}


def piece_rays(piece: BoardPiece, config: EvaluatorConfig = DEFAULT_CONFIG) -> List[Ray]:
    """
    Scans to run for a piece.

    Args:
        piece: Piece to scan for
        config: Evaluator configuration (slider range, pawn scan mode)

    Returns:
        List of (rank_delta, file_delta, max_steps)

    Raises:
        InvalidPieceTypeError: If piece is the sentinel or of an unknown type
    """
    try:
        build = _RAYS_BY_TYPE[piece.piece_type]
    except KeyError:
        raise InvalidPieceTypeError(
            f"Invalid piece type {piece.piece_type!r} on {chess.square_name(piece.square)}"
        ) from None
    return build(piece, config)


def piece_coverage(
    board: chess.Board, piece: BoardPiece, config: EvaluatorConfig = DEFAULT_CONFIG
) -> PieceCoverage:
    """
    Run every scan for one piece.

    Args:
        board: Board to read
        piece: Piece to evaluate
        config: Evaluator configuration

    Returns:
        PieceCoverage with summed steps and the occupant of each scan
    """
    coverage = 0
    threatened = []

    for rank_delta, file_delta, max_steps in piece_rays(piece, config):
        result = scan_direction(
            board, piece, rank_delta, file_delta, max_steps, legacy_bounds=config.legacy_bounds
        )
        coverage += result.steps
        threatened.append(result.occupant)

    return PieceCoverage(coverage, tuple(threatened))


def coverage_totals(
    board: chess.Board, color: chess.Color, config: EvaluatorConfig = DEFAULT_CONFIG
) -> CoverageTotals:
    """Sum piece coverage and threat over every piece of one side."""
    coverage = 0
    threat = 0

    for pieces in get_all_piece_lists(board):
        for piece in pieces:
            if piece.color != color:
                continue
            result = piece_coverage(board, piece, config)
            coverage += result.coverage
            threat += result.threat

    return CoverageTotals(coverage, threat)


def coverage_score(
    board: chess.Board, color: chess.Color, config: EvaluatorConfig = DEFAULT_CONFIG
) -> int:
    """
    Coverage plus weighted threat for one side.

    Returns:
        int: coverage + threat * config.threat_weight
    """
    totals = coverage_totals(board, color, config)
    return totals.coverage + totals.threat * config.threat_weight


class CoverageEvaluator(Evaluator):
    """
    Material and coverage evaluation.

    Attributes:
        config: EvaluatorConfig with weights and scan options
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        """Initialize the evaluator (default configuration if none given)."""
        self.config = config if config is not None else DEFAULT_CONFIG

    def breakdown(self, board: chess.Board) -> EvaluationBreakdown:
        """
        Evaluate the current position and keep the components.

        Args:
            board: Board to evaluate

        Returns:
            EvaluationBreakdown (score is the value evaluate() returns)
        """
        diff = material_diff(board)
        totals = coverage_totals(board, self.config.coverage_color, self.config)
        score = (
            diff * self.config.material_scale
            + totals.coverage
            + totals.threat * self.config.threat_weight
        )
        return EvaluationBreakdown(diff, totals.coverage, totals.threat, score)

    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate position using material + coverage.

        Args:
            board: Chess board to evaluate

        Returns:
            int: Score (White's perspective for material)
        """
        return self.breakdown(board).score

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.config!r})"
