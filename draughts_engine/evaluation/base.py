"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between evaluators without
modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless apart from their weights
    2. evaluate() returns a score from the given perspective
    3. Positive = good for `perspective`, negative = good for its opponent
    4. A side with no legal move has lost: search returns -/+ INFINITY
"""

from abc import ABC, abstractmethod

from draughts_engine.board.representation import Board, Color

INFINITY = float("inf")


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with the search algorithm.
    """

    @abstractmethod
    def evaluate(self, board: Board, perspective: Color) -> float:
        """
        Evaluate a position from `perspective`'s point of view.

        Args:
            board: Position to evaluate
            perspective: Side the score is relative to

        Returns:
            float: Heuristic score, positive favors `perspective`
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
