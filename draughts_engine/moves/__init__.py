"""
Moves Module

Pure rules functions: legal move generation under the forced-capture rule
and move application producing new boards.

Key Components:
    - all_moves: legal moves for a side (captures only, when any exist)
    - capture_moves / simple_moves: per-piece generation
    - continuation_captures: multi-jump chain detection after a jump
    - apply_move: Board + Move -> new Board (capture removal, promotion)

Data Flow:
    Board → all_moves() → [Move] → apply_move() → Board
"""

from draughts_engine.moves.applier import apply_move, is_promotion
from draughts_engine.moves.generator import (
    all_capture_moves,
    all_moves,
    all_simple_moves,
    capture_moves,
    continuation_captures,
    has_capture,
    simple_moves,
)

__all__ = [
    'all_capture_moves',
    'all_moves',
    'all_simple_moves',
    'apply_move',
    'capture_moves',
    'continuation_captures',
    'has_capture',
    'is_promotion',
    'simple_moves',
]
