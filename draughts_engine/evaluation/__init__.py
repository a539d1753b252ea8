"""
Evaluation Module

This module provides position evaluation functions for the engine.
Evaluators are SWAPPABLE: the search works with any evaluator that
implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - HeuristicEvaluator: material / advancement / center / piece-count terms
    - EvaluationWeights: the weights a difficulty profile supplies
    - classify_phase: opening / midgame / endgame, used for search depth

Data Flow:
    Board, perspective → evaluator.evaluate() → float
                                                Positive = good for perspective
"""

from draughts_engine.evaluation.base import INFINITY, Evaluator
from draughts_engine.evaluation.heuristic import (
    EvaluationWeights,
    HeuristicEvaluator,
    evaluate,
)
from draughts_engine.evaluation.phase import (
    GamePhase,
    MaterialCount,
    classify_phase,
    count_material,
    is_endgame,
    is_king_vs_king,
)

__all__ = [
    'INFINITY',
    'EvaluationWeights',
    'Evaluator',
    'GamePhase',
    'HeuristicEvaluator',
    'MaterialCount',
    'classify_phase',
    'count_material',
    'evaluate',
    'is_endgame',
    'is_king_vs_king',
]
