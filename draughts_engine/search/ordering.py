"""
Move Ordering

Searching likely-good moves first makes alpha-beta cut off more branches.
Ordering changes how much work the search does and which of several
equal-valued moves it reports, never the value it finds.
"""

from typing import List, Optional, Sequence

from draughts_engine.board.representation import Board, Color, Move
from draughts_engine.evaluation.heuristic import EvaluationWeights
from draughts_engine.moves.applier import apply_move, is_promotion
from draughts_engine.moves.generator import all_capture_moves

CAPTURE_BONUS = 1000
FOLLOW_UP_CAPTURE_BONUS = 100
KING_MOVE_BONUS = 100
PROMOTION_BONUS = 200
CENTER_BONUS = 10
ADVANCEMENT_BONUS = 50


def score_move(board: Board, move: Move, perspective: Color) -> float:
    """
    Assign a score to a move for ordering purposes.
    Higher score = searched earlier.

    Ordering Priority:
        Captures, more so when the resulting position offers further captures,
        then promotions, king moves, central and advanced destinations.
    """
    score = 0.0

    if move.is_capture:
        score += CAPTURE_BONUS
        next_board = apply_move(board, move)
        score += len(all_capture_moves(next_board, perspective)) * FOLLOW_UP_CAPTURE_BONUS

    piece = board.piece_at(move.from_row, move.from_col)
    if piece is not None and piece.is_king:
        score += KING_MOVE_BONUS

    if is_promotion(board, move):
        score += PROMOTION_BONUS

    center_distance = abs(move.to_col - 3.5) + abs(move.to_row - 3.5)
    score += (7 - center_distance) * CENTER_BONUS
    score += perspective.advancement(move.to_row) * ADVANCEMENT_BONUS

    return score


def order_moves(
    board: Board,
    moves: Sequence[Move],
    perspective: Color,
    weights: Optional[EvaluationWeights] = None,
) -> List[Move]:
    """
    Sort moves by score (descending).

    `weights` is accepted so callers can pass the profile weights alongside
    the position; ordering scores are fixed bonuses and do not use them.

    sorted() is stable, so equally scored moves keep their generation order.
    """
    return sorted(moves, key=lambda move: score_move(board, move, perspective), reverse=True)
