"""
Board Representation Module

Immutable value types for the 8x8 draughts board.

Key Components:
    - Board: immutable grid with validating constructors and text notation
    - Piece, Color, Rank: what stands on a cell
    - Move: a single step or a single jump
    - board_to_tensor: 4-channel numpy view used by the evaluator
"""

from draughts_engine.board.representation import (
    BOARD_SIZE,
    Board,
    Color,
    InvalidBoardError,
    Move,
    Piece,
    Rank,
    Square,
    board_to_tensor,
    tensor_to_board,
)

__all__ = [
    'BOARD_SIZE',
    'Board',
    'Color',
    'InvalidBoardError',
    'Move',
    'Piece',
    'Rank',
    'Square',
    'board_to_tensor',
    'tensor_to_board',
]
