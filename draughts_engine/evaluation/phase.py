"""
Game Phase Detection

Two separate classifications live here:

    classify_phase(): opening / midgame / endgame from the total piece count.
        Only used to pick search depth and time, never the evaluation.

    is_endgame() / is_king_vs_king(): the evaluator's own, stricter endgame
        test deciding whether the king-only scoring applies.
"""

from dataclasses import dataclass
from enum import Enum

from draughts_engine.board.representation import Board, Color, Rank


class GamePhase(Enum):
    OPENING = "opening"
    MIDGAME = "midgame"
    ENDGAME = "endgame"


OPENING_MIN_PIECES = 13  # more than 12 pieces on the board
ENDGAME_MAX_PIECES = 6


@dataclass(frozen=True)
class MaterialCount:
    """Piece counts from one side's point of view."""

    own_men: int
    own_kings: int
    opp_men: int
    opp_kings: int

    @property
    def own(self) -> int:
        return self.own_men + self.own_kings

    @property
    def opponent(self) -> int:
        return self.opp_men + self.opp_kings

    @property
    def total(self) -> int:
        return self.own + self.opponent

    @property
    def kings(self) -> int:
        return self.own_kings + self.opp_kings

    @property
    def is_endgame(self) -> bool:
        """Total <= 6, or at least 3 kings in play, or either side down to 2 pieces."""
        return (
            self.total <= ENDGAME_MAX_PIECES
            or self.kings >= 3
            or self.own <= 2
            or self.opponent <= 2
        )

    @property
    def is_king_vs_king(self) -> bool:
        """Neither side has a man left. A side may be down to no pieces at all."""
        return self.own_men == 0 and self.opp_men == 0


def count_material(board: Board, perspective: Color) -> MaterialCount:
    counts = {(c, r): 0 for c in Color for r in Rank}
    for _, _, piece in board.pieces():
        counts[(piece.color, piece.rank)] += 1
    opponent = perspective.opponent
    return MaterialCount(
        own_men=counts[(perspective, Rank.MAN)],
        own_kings=counts[(perspective, Rank.KING)],
        opp_men=counts[(opponent, Rank.MAN)],
        opp_kings=counts[(opponent, Rank.KING)],
    )


def classify_phase(board: Board, perspective: Color = Color.BLACK) -> GamePhase:
    """
    Classify by total pieces: > 12 opening, 7-12 midgame, <= 6 endgame.

    The result does not depend on `perspective`; it is accepted so callers
    can pass the side to move uniformly.
    """
    total = count_material(board, perspective).total
    if total <= ENDGAME_MAX_PIECES:
        return GamePhase.ENDGAME
    if total < OPENING_MIN_PIECES:
        return GamePhase.MIDGAME
    return GamePhase.OPENING


def is_endgame(board: Board, perspective: Color = Color.BLACK) -> bool:
    return count_material(board, perspective).is_endgame


def is_king_vs_king(board: Board, perspective: Color = Color.BLACK) -> bool:
    return count_material(board, perspective).is_king_vs_king
