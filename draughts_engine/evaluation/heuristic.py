"""
Heuristic Position Evaluation

This module implements the draughts evaluation function using:
    1. Material (men, plus a bonus for kings)
    2. Advancement toward the promotion row
    3. Center control
    4. Piece-count differential ("capture" term)

All terms are computed over the 4-channel board tensor against precomputed
square tables, so each term is a masked sum.

When no men remain on either side the weighted terms are too noisy to
steer play, so a king-count plus centralization score is used instead.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from draughts_engine.board.representation import (
    BOARD_SIZE,
    Board,
    Color,
    board_to_tensor,
)
from draughts_engine.evaluation.base import Evaluator
from draughts_engine.evaluation.phase import MaterialCount

# fmt: off
# ============================================================================
# Square Tables
# ============================================================================
# Center control: (7 - manhattan distance to the board center) / 7
# Dark cells range from 1/7 (corners of the long diagonal) to 6/7 (center).
_rows, _cols = np.indices((BOARD_SIZE, BOARD_SIZE))
CENTER_TABLE = (7.0 - (np.abs(_rows - 3.5) + np.abs(_cols - 3.5))) / 7.0

# Advancement toward the promotion row, normalized to [0, 1]
ADVANCEMENT_TABLES = {
    Color.BLACK: _rows / 7.0,
    Color.WHITE: (7 - _rows) / 7.0,
}

# Tensor channels per color: (men, kings)
CHANNELS = {
    Color.BLACK: (0, 1),
    Color.WHITE: (2, 3),
}
# fmt: on

# King-vs-king scoring
KING_COUNT_VALUE = 1000.0
KING_CENTER_VALUE = 100.0


@dataclass(frozen=True)
class EvaluationWeights:
    """Weights of the evaluation terms."""

    material: float = 1.0
    """Value of any piece"""

    king: float = 3.0
    """Extra value of a king on top of `material`"""

    position: float = 0.1
    """Scale of the advancement term"""

    center_control: float = 0.05
    """Scale of the center-control term"""

    capture_differential: float = 10.0
    """Per-piece bonus for being ahead in piece count"""

    def __post_init__(self):
        for name in ("material", "king", "position", "center_control", "capture_differential"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} weight must be non-negative, got {getattr(self, name)}")


class HeuristicEvaluator(Evaluator):
    """
    Weighted heuristic evaluation with a king-only endgame override.

    Attributes:
        weights: EvaluationWeights for the weighted terms
    """

    def __init__(self, weights: Optional[EvaluationWeights] = None):
        self.weights = weights if weights is not None else EvaluationWeights()

    def evaluate(self, board: Board, perspective: Color) -> float:
        tensor = board_to_tensor(board)
        opponent = perspective.opponent

        own_man_ch, own_king_ch = CHANNELS[perspective]
        opp_man_ch, opp_king_ch = CHANNELS[opponent]
        own = tensor[own_man_ch] + tensor[own_king_ch]
        opp = tensor[opp_man_ch] + tensor[opp_king_ch]

        material = MaterialCount(
            own_men=int(tensor[own_man_ch].sum()),
            own_kings=int(tensor[own_king_ch].sum()),
            opp_men=int(tensor[opp_man_ch].sum()),
            opp_kings=int(tensor[opp_king_ch].sum()),
        )

        if material.is_endgame and material.is_king_vs_king:
            return self.evaluate_king_endgame(own, opp, material)

        w = self.weights
        piece_diff = material.own - material.opponent

        score = piece_diff * w.material
        score += (material.own_kings - material.opp_kings) * w.king
        score += w.position * (
            float((own * ADVANCEMENT_TABLES[perspective]).sum())
            - float((opp * ADVANCEMENT_TABLES[opponent]).sum())
        )
        score += w.center_control * (
            float((own * CENTER_TABLE).sum()) - float((opp * CENTER_TABLE).sum())
        )
        score += piece_diff * w.capture_differential

        return float(score)

    def evaluate_king_endgame(
        self, own: np.ndarray, opp: np.ndarray, material: MaterialCount
    ) -> float:
        """King count first, then which side holds the center."""
        own_center = float((own * CENTER_TABLE).sum())
        opp_center = float((opp * CENTER_TABLE).sum())
        return (
            (material.own_kings - material.opp_kings) * KING_COUNT_VALUE
            + (own_center - opp_center) * KING_CENTER_VALUE
        )

    def __repr__(self) -> str:
        return f"HeuristicEvaluator({self.weights})"


def evaluate(board: Board, perspective: Color, weights: Optional[EvaluationWeights] = None) -> float:
    """Score `board` for `perspective` with the given weights."""
    return HeuristicEvaluator(weights).evaluate(board, perspective)
