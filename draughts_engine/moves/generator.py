"""
Legal Move Generation

Pure functions enumerating the legal moves of a position under the
forced-capture rule.

Rules:
    - Men step one cell diagonally forward, and capture by jumping an
      adjacent opposing piece diagonally forward onto the empty cell behind it.
    - Kings fly: they move any distance along an empty diagonal, and capture
      by passing exactly one opposing piece on a ray, landing on any empty
      cell beyond it.
    - If any piece of the side to move can capture, only captures are legal
      (across all capturing pieces, not just the one with the longest chain).

Enumeration order is deterministic: origins row-major, then rays in
DIRECTIONS order, then increasing distance.
"""

from typing import List, Optional

from draughts_engine.board.representation import (
    DIRECTIONS,
    Board,
    Color,
    Move,
    Square,
    in_bounds,
)


def _forward_directions(color: Color):
    step = color.forward
    return ((step, -1), (step, 1))


def capture_moves(board: Board, square: Square) -> List[Move]:
    """
    Capturing moves for the piece on `square`.

    A king ray is scanned outward: own pieces end the ray, the first opposing
    piece arms it, and every empty cell after that is a landing until the
    next occupied cell. Two opposing pieces with no gap between them therefore
    yield no landing.

    Args:
        board: Position to inspect (never modified)
        square: (row, col) of the moving piece

    Returns:
        List of capturing moves; empty if the square is empty
    """
    row, col = square
    piece = board.piece_at(row, col)
    if piece is None:
        return []

    moves = []
    if piece.is_king:
        for dr, dc in DIRECTIONS:
            jumped: Optional[Square] = None
            r, c = row + dr, col + dc
            while in_bounds(r, c):
                target = board.piece_at(r, c)
                if target is None:
                    if jumped is not None:
                        moves.append(Move(row, col, r, c, True))
                elif target.color is piece.color or jumped is not None:
                    break
                else:
                    jumped = (r, c)
                r += dr
                c += dc
    else:
        for dr, dc in _forward_directions(piece.color):
            mid_r, mid_c = row + dr, col + dc
            land_r, land_c = row + 2 * dr, col + 2 * dc
            if not in_bounds(land_r, land_c) or not board.is_empty(land_r, land_c):
                continue
            target = board.piece_at(mid_r, mid_c)
            if target is not None and target.color is not piece.color:
                moves.append(Move(row, col, land_r, land_c, True))

    return moves


def simple_moves(board: Board, square: Square) -> List[Move]:
    """Non-capturing moves for the piece on `square`."""
    row, col = square
    piece = board.piece_at(row, col)
    if piece is None:
        return []

    moves = []
    if piece.is_king:
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            while board.is_empty(r, c):
                moves.append(Move(row, col, r, c, False))
                r += dr
                c += dc
    else:
        for dr, dc in _forward_directions(piece.color):
            r, c = row + dr, col + dc
            if board.is_empty(r, c):
                moves.append(Move(row, col, r, c, False))

    return moves


def all_capture_moves(board: Board, color: Color) -> List[Move]:
    moves = []
    for row, col, _ in board.pieces(color):
        moves.extend(capture_moves(board, (row, col)))
    return moves


def all_simple_moves(board: Board, color: Color) -> List[Move]:
    moves = []
    for row, col, _ in board.pieces(color):
        moves.extend(simple_moves(board, (row, col)))
    return moves


def all_moves(board: Board, color: Color) -> List[Move]:
    """
    Legal moves for `color` under the forced-capture rule.

    Returns only captures whenever any piece of `color` can capture,
    otherwise every simple move. An empty list means `color` has lost.
    """
    captures = all_capture_moves(board, color)
    if captures:
        return captures
    return all_simple_moves(board, color)


def has_capture(board: Board, color: Color) -> bool:
    for row, col, _ in board.pieces(color):
        if capture_moves(board, (row, col)):
            return True
    return False


def continuation_captures(board: Board, square: Square) -> List[Move]:
    """
    Captures that continue a multi-jump chain.

    `board` must be the position right after a jump landed on `square`.
    The chain ends when this returns an empty list.
    """
    return capture_moves(board, square)
