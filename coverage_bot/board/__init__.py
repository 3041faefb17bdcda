"""
Board Module

This module adapts python-chess boards to the evaluator's view of a position.

Key Components:
    - BoardPiece: piece on a square, with an empty-square sentinel
    - get_all_piece_lists: the 12 piece groups in fixed order
    - get_piece: piece lookup that returns the sentinel for empty squares
    - applied_move: apply a move and always undo it on exit
    - is_on_board / legacy_is_on_board: square bounds checks

Data Flow:
    python-chess Board → get_all_piece_lists() → 12 groups → evaluator
"""

from coverage_bot.board.representation import (
    BLACK_OFFSET,
    NO_PIECE,
    PIECE_LIST_ORDER,
    WHITE_OFFSET,
    BoardPiece,
    applied_move,
    empty_piece,
    get_all_piece_lists,
    get_piece,
    is_on_board,
    legacy_is_on_board,
    piece_counts,
    square_index,
)

__all__ = [
    'BLACK_OFFSET',
    'NO_PIECE',
    'PIECE_LIST_ORDER',
    'WHITE_OFFSET',
    'BoardPiece',
    'applied_move',
    'empty_piece',
    'get_all_piece_lists',
    'get_piece',
    'is_on_board',
    'legacy_is_on_board',
    'piece_counts',
    'square_index',
]
