"""
Evaluation Module

This module provides the position evaluation used by the bot. Evaluators
are SWAPPABLE - the greedy driver and the UCI front end work with any
evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - CoverageEvaluator: Material + directional coverage evaluation
    - EvaluatorConfig: Weights and scan options
    - scan_direction: Directional ray scanner used for coverage

Data Flow:
    chess.Board + chess.Move → evaluator.evaluate_move() → int
                                                          Higher = better for White
"""

from coverage_bot.evaluation.base import Evaluator
from coverage_bot.evaluation.config import DEFAULT_CONFIG, EvaluatorConfig
from coverage_bot.evaluation.coverage import (
    PIECE_VALUES,
    CoverageEvaluator,
    EvaluationBreakdown,
    InvalidPieceTypeError,
    PieceCoverage,
    coverage_score,
    material_diff,
    material_score,
    piece_coverage,
    piece_value,
)
from coverage_bot.evaluation.scanner import ScanResult, scan_direction

__all__ = [
    'DEFAULT_CONFIG',
    'PIECE_VALUES',
    'CoverageEvaluator',
    'EvaluationBreakdown',
    'Evaluator',
    'EvaluatorConfig',
    'InvalidPieceTypeError',
    'PieceCoverage',
    'ScanResult',
    'coverage_score',
    'material_diff',
    'material_score',
    'piece_coverage',
    'piece_value',
    'scan_direction',
]
