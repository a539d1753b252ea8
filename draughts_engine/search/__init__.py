"""
Search Module

This module implements the adversarial search: an iterative-deepening
driver over a recursive minimax with alpha-beta pruning.

Key Components:
    - choose_move / search: engine entry point (difficulty, time budget,
      blunders, iterative deepening)
    - minimax: Core search algorithm with alpha-beta pruning
    - find_best_move: Fixed-depth root search
    - order_moves: Heuristics to improve alpha-beta efficiency
    - BackgroundSearch: runs a search on a worker thread
"""

from draughts_engine.search.background import BackgroundSearch
from draughts_engine.search.engine import choose_move, max_search_depth, search, time_budget
from draughts_engine.search.minimax import (
    SearchContext,
    SearchResult,
    SearchTimeout,
    find_best_move,
    minimax,
)
from draughts_engine.search.ordering import order_moves, score_move

__all__ = [
    'BackgroundSearch',
    'SearchContext',
    'SearchResult',
    'SearchTimeout',
    'choose_move',
    'find_best_move',
    'max_search_depth',
    'minimax',
    'order_moves',
    'score_move',
    'search',
    'time_budget',
]
