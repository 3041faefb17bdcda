"""
Board Access for the Coverage Evaluator

This module adapts python-chess Board objects to the view the evaluator
works with: ordered piece groups, a piece lookup that never returns None,
and a scoped helper for applying a candidate move.

12 Piece Groups (fixed order):
    0: White Pawns      6: Black Pawns
    1: White Knights    7: Black Knights
    2: White Bishops    8: Black Bishops
    3: White Rooks      9: Black Rooks
    4: White Queens    10: Black Queens
    5: White King      11: Black King

Material is counted by slicing this order at WHITE_OFFSET and BLACK_OFFSET,
so the order must never change.

Square Indexing:
    index = rank * 8 + file, where 0 = A1 and 63 = H8
"""

from contextlib import contextmanager
from typing import Iterator, List, NamedTuple

import chess
import numpy as np

# Sentinel piece type for an empty square (python-chess types start at 1)
NO_PIECE = 0

PIECE_TYPES = (chess.PAWN, chess.KNIGHT, chess.BISHOP, chess.ROOK, chess.QUEEN, chess.KING)

PIECE_LIST_ORDER = [
    (piece_type, color)
    for color in (chess.WHITE, chess.BLACK)
    for piece_type in PIECE_TYPES
]

WHITE_OFFSET = 0
BLACK_OFFSET = 6


class BoardPiece(NamedTuple):
    """
    A piece standing on a square, or the empty-square sentinel.

    Attributes:
        piece_type: chess.PAWN ... chess.KING, or NO_PIECE for an empty square
        color: chess.WHITE or chess.BLACK (WHITE for the sentinel)
        square: Square index (0-63)
    """
    piece_type: int
    color: chess.Color
    square: chess.Square

    @property
    def is_none(self) -> bool:
        return self.piece_type == NO_PIECE

    @property
    def is_white(self) -> bool:
        return self.color == chess.WHITE

    def __str__(self) -> str:
        if self.is_none:
            return f"-@{chess.square_name(self.square)}"
        symbol = chess.Piece(self.piece_type, self.color).symbol()
        return f"{symbol}@{chess.square_name(self.square)}"


def empty_piece(square: chess.Square) -> BoardPiece:
    """Sentinel for an empty square."""
    return BoardPiece(NO_PIECE, chess.WHITE, square)


def get_piece(board: chess.Board, square: chess.Square) -> BoardPiece:
    """
    Look up the piece on a square.

    Args:
        board: python-chess Board object
        square: Square index (0-63)

    Returns:
        BoardPiece on that square, or the sentinel if the square is empty
    """
    piece = board.piece_at(square)
    if piece is None:
        return empty_piece(square)
    return BoardPiece(piece.piece_type, piece.color, square)


def get_all_piece_lists(board: chess.Board) -> List[List[BoardPiece]]:
    """
    Collect every piece on the board into the 12 ordered groups.

    Args:
        board: python-chess Board object

    Returns:
        List of 12 lists, ordered as PIECE_LIST_ORDER. Pieces within a group
        are sorted by square index.
    """
    return [
        [BoardPiece(piece_type, color, square) for square in board.pieces(piece_type, color)]
        for piece_type, color in PIECE_LIST_ORDER
    ]


def piece_counts(board: chess.Board) -> np.ndarray:
    """
    Count the pieces in each of the 12 groups.

    Returns:
        numpy array of shape (12,) with dtype int64, ordered as PIECE_LIST_ORDER
    """
    return np.array(
        [len(board.pieces(piece_type, color)) for piece_type, color in PIECE_LIST_ORDER],
        dtype=np.int64,
    )


def square_index(file: int, rank: int) -> int:
    """Linear index of (file, rank) without any range check."""
    return rank * 8 + file


def is_on_board(file: int, rank: int) -> bool:
    """True if file and rank are both in [0, 7]."""
    return 0 <= file < 8 and 0 <= rank < 8


def legacy_is_on_board(index: int) -> bool:
    """
    Legacy linear-index bounds check.

    Accepts 0 < index < 63, so A1 and H8 are rejected and a file step off
    the left or right edge wraps onto the neighbouring rank.
    """
    return 0 < index < 63


@contextmanager
def applied_move(board: chess.Board, move: chess.Move) -> Iterator[chess.Board]:
    """
    Apply a move for the duration of a with-block.

    The move is pushed on entry and popped on every exit path, including
    exceptions, so the board always comes back to its previous state.

    Example:
        with applied_move(board, move):
            score = evaluator.evaluate(board)
    """
    board.push(move)
    try:
        yield board
    finally:
        board.pop()
