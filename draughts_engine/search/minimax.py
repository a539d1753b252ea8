"""
Minimax Search with Alpha-Beta Pruning

This module implements the core search algorithm. Minimax explores the game
tree assuming best play from both sides, and alpha-beta pruning skips
branches that cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Prunes branches that can't affect the result
    - Move Ordering: Evaluate better moves first to maximize pruning
    - Multi-jump chains: after a jump that can continue, the same side moves
      again with the same piece, restricted to its continuation captures

Every node derives its children with apply_move(), so no board is shared or
modified between branches.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from draughts_engine.board.representation import Board, Color, Move, Square
from draughts_engine.evaluation.base import INFINITY, Evaluator
from draughts_engine.moves.applier import apply_move
from draughts_engine.moves.generator import all_moves, capture_moves
from draughts_engine.search.ordering import order_moves

NODE_CHECK_INTERVAL = 256  # nodes between deadline polls


class SearchTimeout(Exception):
    """Raised inside the tree when the deadline passes or a stop is requested."""


class SearchContext:
    """
    Per-call search bookkeeping.

    Attributes:
        nodes: Number of positions visited
        deadline: Absolute time.monotonic() value to stop at (None = no limit)
        should_stop: Optional callable polled alongside the deadline
    """

    def __init__(
        self,
        deadline: Optional[float] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ):
        self.nodes = 0
        self.deadline = deadline
        self.should_stop = should_stop

    def expired(self) -> bool:
        if self.should_stop is not None and self.should_stop():
            return True
        return self.deadline is not None and time.monotonic() >= self.deadline

    def visit(self):
        self.nodes += 1
        if self.nodes % NODE_CHECK_INTERVAL == 0 and self.expired():
            raise SearchTimeout()


@dataclass
class SearchResult:
    """
    Outcome of a search.

    Attributes:
        move: Best move found (None when the side to move has no legal move)
        score: Score of `move` from the searching side's perspective
        depth: Deepest iteration that contributed the move
        nodes: Positions visited
        elapsed: Wall-clock seconds spent
        completed: False if the iteration was cut short by the deadline
        blunder: True if the move was picked at random on purpose
    """

    move: Optional[Move]
    score: float
    depth: int = 0
    nodes: int = 0
    elapsed: float = 0.0
    completed: bool = True
    blunder: bool = False


def predicted_reply_score(
    board: Board, mover: Color, root_perspective: Color, evaluator: Evaluator
) -> float:
    """
    Score `board` after the opponent's most promising reply.

    The reply is the opponent's first legal move by move ordering, so this
    is a one-ply approximation of its best answer, not a search.
    """
    opponent = mover.opponent
    replies = all_moves(board, opponent)
    if not replies:
        return INFINITY if opponent is not root_perspective else -INFINITY

    reply = order_moves(board, replies, opponent)[0]
    return evaluator.evaluate(apply_move(board, reply), root_perspective)


def _descend(
    child: Board,
    move: Move,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    to_move: Color,
    root_perspective: Color,
    evaluator: Evaluator,
    context: Optional[SearchContext],
    predict_for: Optional[Color],
    predict_here: bool,
) -> float:
    """Value of `child`, reached from a node at `depth` by `move`."""
    if move.is_capture and capture_moves(child, move.destination):
        # Same side keeps jumping with the same piece
        return minimax(
            child, depth - 1, alpha, beta, maximizing, to_move, root_perspective,
            evaluator, context, chain_square=move.destination, predict_for=predict_for,
        )

    if predict_here:
        if context is not None:
            context.visit()
        return predicted_reply_score(child, to_move, root_perspective, evaluator)

    return minimax(
        child, depth - 1, alpha, beta, not maximizing, to_move.opponent, root_perspective,
        evaluator, context, predict_for=predict_for,
    )


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    to_move: Color,
    root_perspective: Color,
    evaluator: Evaluator,
    context: Optional[SearchContext] = None,
    chain_square: Optional[Square] = None,
    predict_for: Optional[Color] = None,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Current position
        depth: Remaining plies (each jump of a chain counts as one)
        alpha: Best score the maximizer is assured of
        beta: Best score the minimizer is assured of
        maximizing: True if `to_move` is the root side
        to_move: Side to move at this node
        root_perspective: Side every leaf is evaluated for
        evaluator: Leaf evaluation function
        context: Optional node counter and deadline; raises SearchTimeout
        chain_square: Square of a piece in the middle of a multi-jump chain;
            only its captures are legal here
        predict_for: Side whose moves one ply above the leaves are scored
            against the opponent's predicted reply instead of searched
            (None = plain minimax)

    Returns:
        float: Value of the position for `root_perspective`. A side with no
        legal move has lost: -INFINITY for the maximizer, INFINITY for the
        minimizer.

    Algorithm:
        1. depth 0 → evaluate the position
        2. Generate legal moves; none → loss for the side to move
        3. For each ordered move: derive the child board, recurse, update
           alpha/beta, prune once beta <= alpha
    """
    if context is not None:
        context.visit()

    if depth == 0:
        return evaluator.evaluate(board, root_perspective)

    if chain_square is not None:
        moves = capture_moves(board, chain_square)
    else:
        moves = all_moves(board, to_move)

    if not moves:
        return -INFINITY if maximizing else INFINITY

    ordered_moves = order_moves(board, moves, to_move)
    predict_here = depth == 1 and predict_for is not None and to_move is predict_for

    if maximizing:
        max_eval = -INFINITY
        for move in ordered_moves:
            eval_score = _descend(
                apply_move(board, move), move, depth, alpha, beta, True, to_move,
                root_perspective, evaluator, context, predict_for, predict_here,
            )
            max_eval = max(max_eval, eval_score)
            alpha = max(alpha, eval_score)

            # Beta cutoff: Minimizing player won't allow this branch
            if beta <= alpha:
                break
        return max_eval

    min_eval = INFINITY
    for move in ordered_moves:
        eval_score = _descend(
            apply_move(board, move), move, depth, alpha, beta, False, to_move,
            root_perspective, evaluator, context, predict_for, predict_here,
        )
        min_eval = min(min_eval, eval_score)
        beta = min(beta, eval_score)

        # Alpha cutoff: Maximizing player won't allow this branch
        if beta <= alpha:
            break
    return min_eval


def find_best_move(
    board: Board,
    to_move: Color,
    depth: int,
    evaluator: Evaluator,
    candidates: Optional[Sequence[Move]] = None,
    context: Optional[SearchContext] = None,
    predict_for: Optional[Color] = None,
) -> SearchResult:
    """
    Search every root move to a fixed depth.

    Args:
        board: Current position
        to_move: Side to move (the maximizer)
        depth: Search depth in plies (>= 1)
        evaluator: Position evaluation function
        candidates: Root moves to consider (default: all legal moves)
        context: Optional node counter and deadline
        predict_for: See minimax()

    Returns:
        SearchResult for this depth. `completed` is False if the deadline hit
        before every root move was searched; the move is then the best among
        the root moves that finished.
    """
    moves = list(candidates) if candidates is not None else all_moves(board, to_move)
    if not moves:
        return SearchResult(move=None, score=-INFINITY, depth=depth)

    context = context if context is not None else SearchContext()
    start = time.monotonic()
    start_nodes = context.nodes

    best_move: Optional[Move] = None
    best_score = -INFINITY
    completed = True

    for move in order_moves(board, moves, to_move):
        if best_move is not None and context.expired():
            completed = False
            break

        try:
            score = _descend(
                apply_move(board, move), move, depth, best_score, INFINITY, True, to_move,
                to_move, evaluator, context, predict_for, predict_here=False,
            )
        except SearchTimeout:
            completed = False
            break

        # First move is always taken so a lost position still yields a move
        if best_move is None or score > best_score:
            best_score = score
            best_move = move

    return SearchResult(
        move=best_move,
        score=best_score,
        depth=depth,
        nodes=context.nodes - start_nodes,
        elapsed=time.monotonic() - start,
        completed=completed,
    )
