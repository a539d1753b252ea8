"""
Search Engine Entry Point

choose_move() is the engine's public entry point: given a board snapshot,
the side to move and a difficulty, it returns the move to play or None when
the side to move has no legal move (it has lost).

Per call:
    1. Generate candidates; none → None
    2. Pick the maximum depth from the game phase (+1 when capturing is
       forced, -1 with more than 20 candidates)
    3. With the profile's blunder probability, play a random candidate
    4. Iterative deepening 1..max depth, each depth a full re-search; stop
       when the time budget runs out or a depth yields no move
    5. Return the deepest depth's move, or the best move found before the
       time ran out within a depth

No state survives a call.
"""

import logging
import random
import time
from typing import Callable, Optional, Sequence, Union

from draughts_engine.board.representation import Board, Color, Move
from draughts_engine.difficulty.profiles import DifficultyProfile, get_profile
from draughts_engine.evaluation.base import Evaluator
from draughts_engine.evaluation.heuristic import HeuristicEvaluator
from draughts_engine.evaluation.phase import GamePhase, classify_phase
from draughts_engine.moves.generator import all_capture_moves, all_moves
from draughts_engine.search.minimax import SearchContext, SearchResult, find_best_move
from draughts_engine.search.ordering import order_moves

logger = logging.getLogger(__name__)

MANY_CANDIDATES = 20

PHASE_TIME_FACTORS = {
    GamePhase.OPENING: 0.8,
    GamePhase.MIDGAME: 1.0,
    GamePhase.ENDGAME: 1.2,
}
MANY_CAPTURES = 3
CAPTURE_TIME_FACTOR = 1.5
MAX_TIME_FACTOR = 2.0
WINNING_SCORE = 50.0
WINNING_TIME_FACTOR = 0.7
MIN_TIME_FACTOR = 0.5

Difficulty = Union[DifficultyProfile, str, None]


def time_budget(
    board: Board,
    to_move: Color,
    profile: DifficultyProfile,
    evaluator: Optional[Evaluator] = None,
) -> float:
    """
    Seconds the search may spend on this move.

    With `adaptive_time`, the profile budget is scaled by game phase, by the
    number of captures on offer and down when the side is clearly winning.
    The result never exceeds the profile budget.
    """
    budget = profile.time_budget
    if not profile.adaptive_time:
        return budget

    factor = PHASE_TIME_FACTORS[classify_phase(board, to_move)]

    if len(all_capture_moves(board, to_move)) > MANY_CAPTURES:
        factor = min(factor * CAPTURE_TIME_FACTOR, MAX_TIME_FACTOR)

    evaluator = evaluator if evaluator is not None else HeuristicEvaluator(profile.weights)
    if evaluator.evaluate(board, to_move) > WINNING_SCORE:
        factor = max(factor * WINNING_TIME_FACTOR, MIN_TIME_FACTOR)

    return min(budget, budget * factor)


def max_search_depth(
    board: Board, to_move: Color, profile: DifficultyProfile, candidates: Sequence[Move]
) -> int:
    depth = profile.depth_for(classify_phase(board, to_move))
    if candidates and all(move.is_capture for move in candidates):
        depth += 1
    if len(candidates) > MANY_CANDIDATES:
        depth = max(depth - 1, 1)
    return depth


def search(
    board: Board,
    to_move: Color,
    ai_color: Optional[Color] = None,
    difficulty: Difficulty = None,
    deadline: Optional[float] = None,
    rng: Optional[random.Random] = None,
    should_stop: Optional[Callable[[], bool]] = None,
    restrict_to: Optional[Sequence[Move]] = None,
    evaluator: Optional[Evaluator] = None,
) -> SearchResult:
    """
    Find the move to play, with search statistics.

    Args:
        board: Position snapshot
        to_move: Side to move
        ai_color: Color the engine plays (default: `to_move`); the reply
            prediction refinement applies to this side's moves
        difficulty: DifficultyProfile or label ("easy", "medium", "hard");
            unknown labels fall back to the default profile
        deadline: Seconds allowed for this call (capped by the profile budget)
        rng: Random source for blunders (default: module-level random)
        should_stop: Polled during search; returning True stops it early
        restrict_to: Candidate moves to choose from, e.g. the continuation
            captures of a multi-jump chain in progress
        evaluator: Leaf evaluator (default: HeuristicEvaluator with the
            profile's weights)

    Returns:
        SearchResult; `move` is None only when there is no legal move
    """
    assert isinstance(board, Board), f"expected Board, got {type(board).__name__}"

    start = time.monotonic()
    profile = difficulty if isinstance(difficulty, DifficultyProfile) else get_profile(difficulty)
    ai_color = ai_color if ai_color is not None else to_move
    rng = rng if rng is not None else random
    evaluator = evaluator if evaluator is not None else HeuristicEvaluator(profile.weights)

    candidates = list(restrict_to) if restrict_to is not None else all_moves(board, to_move)
    if not candidates:
        logger.info(f"No legal move for {to_move.name}")
        return SearchResult(move=None, score=-float("inf"))

    max_depth = max_search_depth(board, to_move, profile, candidates)

    if len(candidates) >= 2 and rng.random() < profile.blunder_probability:
        move = rng.choice(candidates)
        logger.info(f"Blunder injected ({profile.name}): {move}")
        return SearchResult(move=move, score=0.0, elapsed=time.monotonic() - start, blunder=True)

    budget = time_budget(board, to_move, profile, evaluator)
    if deadline is not None:
        budget = min(budget, deadline)

    context = SearchContext(deadline=start + budget, should_stop=should_stop)
    predict_for = ai_color if profile.reply_prediction else None
    logger.debug(
        f"Search start: {to_move.name} to move, {len(candidates)} candidates, "
        f"max_depth={max_depth}, budget={budget:.2f}s, profile={profile.name}"
    )

    best: Optional[SearchResult] = None
    for depth in range(1, max_depth + 1):
        result = find_best_move(
            board, to_move, depth, evaluator,
            candidates=candidates, context=context, predict_for=predict_for,
        )

        if result.move is None:
            break

        if result.completed:
            best = result
            logger.debug(
                f"depth {depth} move {result.move} score {result.score:.2f} "
                f"nodes {result.nodes} time {int(result.elapsed * 1000)}ms"
            )
        else:
            # Best root move found before the cut-off replaces the previous depth's
            best = result
            logger.info(f"Time up during depth {depth}, using its best move so far")
            break

        if context.expired():
            break

    if best is None:
        best = SearchResult(move=order_moves(board, candidates, to_move)[0], score=-float("inf"))

    best.nodes = context.nodes
    best.elapsed = time.monotonic() - start
    return best


def choose_move(
    board: Board,
    to_move: Color,
    ai_color: Optional[Color] = None,
    difficulty: Difficulty = None,
    deadline: Optional[float] = None,
    rng: Optional[random.Random] = None,
    should_stop: Optional[Callable[[], bool]] = None,
    restrict_to: Optional[Sequence[Move]] = None,
) -> Optional[Move]:
    """
    Return the move to play, or None if `to_move` has no legal move.

    See search() for the arguments.
    """
    return search(
        board, to_move, ai_color, difficulty, deadline,
        rng=rng, should_stop=should_stop, restrict_to=restrict_to,
    ).move
