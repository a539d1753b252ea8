"""
Game Module

Immutable game state for hosts that play whole games: turn passing,
multi-jump chains, capture tallies and the win/draw result.
"""

from draughts_engine.game.state import (
    MAX_MOVES_WITHOUT_CAPTURE,
    GameResult,
    GameState,
    IllegalMoveError,
)

__all__ = [
    'MAX_MOVES_WITHOUT_CAPTURE',
    'GameResult',
    'GameState',
    'IllegalMoveError',
]
