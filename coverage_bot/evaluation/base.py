"""
Abstract Evaluator Interface

This module defines the abstract base class for position evaluators.
The greedy driver and the UCI front end only talk to this interface, so
evaluators can be swapped without touching them.

Key Principles:
    1. Evaluators hold no state between calls (configuration only)
    2. evaluate() scores the current position from White's perspective
    3. evaluate_move() scores the position after a candidate move and
       leaves the board exactly as it found it
"""

from abc import ABC, abstractmethod

import chess
from coverage_bot.board.representation import applied_move


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Subclasses implement evaluate(); evaluate_move() is built on top of it.
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate a chess position from White's perspective.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            int: Evaluation score (positive = good for White)
        """
        pass

    def evaluate_move(self, board: chess.Board, move: chess.Move) -> int:
        """
        Score the position reached by playing move.

        The move is applied in place and undone before returning, on every
        exit path. Do not call this concurrently on the same board.

        Args:
            board: Position to play the move in
            move: Candidate move (must be legal in board)

        Returns:
            int: evaluate() of the resulting position
        """
        with applied_move(board, move):
            return self.evaluate(board)

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
