"""
Utilities Module

Benchmarking helpers for the bot.

Key Components:
    - Bratko-Kopec test positions
    - run_bratko_kopec: run the greedy bot over the suite
    - evaluate_position: run the bot on one test position
"""

from coverage_bot.utils.testing import (
    BRATKO_KOPEC_POSITIONS,
    TestPosition,
    TestResult,
    evaluate_position,
    run_bratko_kopec,
)

__all__ = [
    'BRATKO_KOPEC_POSITIONS',
    'TestPosition',
    'TestResult',
    'evaluate_position',
    'run_bratko_kopec',
]
