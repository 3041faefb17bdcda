"""
Directional Ray Scanner

Walks the board from a piece's square along one direction and reports how
far it got and what (if anything) stopped it. All coverage and threat
numbers in the evaluator are built from these scans.

Directions are (rank_delta, file_delta) pairs. A scan stops when:
    1. The next square is off the board (nothing counted for it)
    2. The next square is occupied (counted, occupant reported)
    3. max_steps squares have been walked
"""

from typing import NamedTuple, Optional, Tuple

import chess
from coverage_bot.board.representation import (
    BoardPiece,
    empty_piece,
    get_piece,
    is_on_board,
    legacy_is_on_board,
    square_index,
)

# Board size; sliding pieces are never limited below this
MAX_STEPS = 8

ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL = ((1, 1), (1, -1), (-1, 1), (-1, -1))
KNIGHT_OFFSETS = (
    (2, 1), (2, -1), (1, 2), (-1, 2),
    (-2, 1), (-2, -1), (1, -2), (-1, -2),
)


class ScanResult(NamedTuple):
    """
    Outcome of a single ray scan.

    Attributes:
        steps: Squares walked, including the blocking square if any
        occupant: Piece that stopped the scan, or the sentinel
    """
    steps: int
    occupant: BoardPiece


def pawn_directions(color: chess.Color, legacy: bool = False) -> Tuple[Tuple[int, int], ...]:
    """
    Forward-diagonal directions for a pawn of the given color.

    With legacy=True the legacy directions are returned: the same
    forward-right diagonal twice.
    """
    forward = 1 if color == chess.WHITE else -1
    if legacy:
        return ((forward, 1), (forward, 1))
    return ((forward, 1), (forward, -1))


def next_square(
    square: chess.Square, rank_delta: int, file_delta: int, legacy_bounds: bool = False
) -> Optional[chess.Square]:
    """
    Square one step away in the given direction.

    Returns:
        The new square index, or None if the step leaves the board
    """
    file = chess.square_file(square) + file_delta
    rank = chess.square_rank(square) + rank_delta

    if legacy_bounds:
        index = square_index(file, rank)
        return index if legacy_is_on_board(index) else None

    if not is_on_board(file, rank):
        return None
    return chess.square(file, rank)


def scan_direction(
    board: chess.Board,
    origin: BoardPiece,
    rank_delta: int,
    file_delta: int,
    max_steps: int = MAX_STEPS,
    legacy_bounds: bool = False,
) -> ScanResult:
    """
    Walk from origin's square along (rank_delta, file_delta).

    Args:
        board: Board to read (never modified)
        origin: Piece whose square the scan starts from
        rank_delta: Rank change per step
        file_delta: File change per step
        max_steps: Maximum squares to walk (1 for pawns, knights and kings)
        legacy_bounds: Use the linear-index bounds check instead of the
            file/rank check

    Returns:
        ScanResult(steps, occupant). occupant is the sentinel when the scan
        ran out of budget or hit the edge without meeting a piece.
    """
    square = origin.square
    occupant = empty_piece(square)
    steps = 0

    while steps < max_steps:
        target = next_square(square, rank_delta, file_delta, legacy_bounds)
        if target is None:
            break

        square = target
        steps += 1
        occupant = get_piece(board, square)

        if not occupant.is_none:
            break

    return ScanResult(steps, occupant)
