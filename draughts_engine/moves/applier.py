"""
Move Application

apply_move() derives a new Board from a Board and a Move. The input board is
never modified.

Multi-jump chains are not resolved here: after a capture, callers check
continuation_captures() on the landing square and keep the turn while it
returns moves.
"""

from draughts_engine.board.representation import Board, Move


def apply_move(board: Board, move: Move) -> Board:
    """
    Play `move` on `board`.

    Steps:
        1. Lift the piece from the origin
        2. If capturing, remove the single piece between origin and destination
        3. Place the piece on the destination, promoting a man that reached
           its promotion row (kings are never demoted)

    Args:
        board: Current position
        move: Move to play (assumed legal)

    Returns:
        The resulting Board

    Raises:
        ValueError: If there is no piece on the origin square
    """
    piece = board.piece_at(move.from_row, move.from_col)
    if piece is None:
        raise ValueError(f"No piece to move at {move.origin}")

    changes = {move.origin: None}

    if move.is_capture:
        dr = 1 if move.to_row > move.from_row else -1
        dc = 1 if move.to_col > move.from_col else -1
        r, c = move.from_row + dr, move.from_col + dc
        while (r, c) != move.destination:
            if board.piece_at(r, c) is not None:
                changes[(r, c)] = None
                break
            r += dr
            c += dc

    if not piece.is_king and move.to_row == piece.color.promotion_row:
        piece = piece.promoted()

    changes[move.destination] = piece
    return board.with_pieces(changes)


def is_promotion(board: Board, move: Move) -> bool:
    """True if `move` turns a man into a king."""
    piece = board.piece_at(move.from_row, move.from_col)
    return piece is not None and not piece.is_king and move.to_row == piece.color.promotion_row
