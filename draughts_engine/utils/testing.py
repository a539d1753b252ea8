"""
Engine Testing and Benchmarking

This module provides a tactical test suite for checking that the search
finds the right move in positions where the answer is known.

Tactical Suite:
    Small positions each testing one idea: the forced-capture rule, taking
    the longer multi-jump, promoting out of danger, stepping away from a
    capture. Each position has a known best move.

Evaluation Metrics:
    - Correct Moves: Number of positions where engine found best move
    - Time per Position: Average thinking time
    - Nodes Searched: Total nodes evaluated

Positions use the Board text notation (row 0 first, "b"/"w" men,
"B"/"W" kings, "." empty) and moves use Move's "rc-rc" / "rcxrc" notation.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from draughts_engine.board.representation import Board, Color
from draughts_engine.evaluation.base import Evaluator
from draughts_engine.evaluation.heuristic import HeuristicEvaluator
from draughts_engine.search.minimax import SearchContext, find_best_move

logger = logging.getLogger(__name__)


@dataclass
class TestPosition:
    """
    A test position with expected best move(s).

    Attributes:
        board: Board in text notation
        best_moves: List of acceptable best moves
        to_move: Side to move
        description: Human-readable description of the position
        id: Position identifier (e.g., "TS.01")
    """
    __test__ = False  # not a pytest class

    board: str
    best_moves: List[str]
    to_move: Color = Color.BLACK
    description: str = ""
    id: str = ""


@dataclass
class TestResult:
    """
    Result of testing a single position.

    Attributes:
        position: The test position
        found_move: Move the engine found
        score: Evaluation score for the move
        correct: Whether the engine found a best move
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes evaluated
        depth: Search depth used
    """
    __test__ = False

    position: TestPosition
    found_move: str
    score: float
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


# ============================================================================
# Tactical Suite
# ============================================================================

TACTICAL_POSITIONS = [
    TestPosition(
        id="TS.01",
        board="""
            ........
            ........
            ...b....
            ....w...
            ........
            ........
            ........
            ........
        """,
        best_moves=["23x45"],
        description="Black must take the adjacent man",
    ),
    TestPosition(
        id="TS.02",
        board="""
            ........
            b.......
            ........
            ........
            ........
            ........
            ...b....
            ....w...
        """,
        best_moves=["63-72"],
        description="Black promotes instead of leaving the man en prise",
    ),
    TestPosition(
        id="TS.03",
        board="""
            ........
            ........
            ...b....
            ........
            .....w..
            ........
            ........
            ........
        """,
        best_moves=["23-32"],
        description="Black steps away from the white man's jump",
    ),
    TestPosition(
        id="TS.04",
        board="""
            ........
            ........
            .b.....b
            ..w...w.
            ........
            ....w...
            ........
            ........
        """,
        best_moves=["21x43"],
        description="Black takes the double jump that leaves no man hanging",
    ),
    TestPosition(
        id="TS.05",
        board="""
            ........
            ........
            ........
            ........
            ...b....
            ..w.....
            ........
            ........
        """,
        best_moves=["52x34"],
        to_move=Color.WHITE,
        description="White must take the black man",
    ),
]


def evaluate_position(
    position: TestPosition,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> TestResult:
    """
    Evaluate a single test position.

    Args:
        position: Test position to evaluate
        depth: Search depth
        evaluator: Position evaluator (default: HeuristicEvaluator)

    Returns:
        TestResult with engine's move and whether it was correct
    """
    evaluator = evaluator if evaluator is not None else HeuristicEvaluator()
    board = Board.from_string(position.board)
    context = SearchContext()

    start_time = time.monotonic()
    result = find_best_move(board, position.to_move, depth, evaluator, context=context)
    time_taken = time.monotonic() - start_time

    found_move = str(result.move) if result.move is not None else ""
    correct = found_move in position.best_moves

    logger.info(
        f"{position.id}: found {found_move or '-'} (score {result.score:.2f}), "
        f"expected {position.best_moves}: {'CORRECT' if correct else 'WRONG'}"
    )

    return TestResult(
        position=position,
        found_move=found_move,
        score=result.score,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=context.nodes,
        depth=depth,
    )


def run_tactical_suite(
    evaluator: Optional[Evaluator] = None,
    depth: int = 4,
    positions: Optional[Sequence[TestPosition]] = None,
) -> Dict[str, Any]:
    """
    Run the tactical test suite.

    Args:
        evaluator: Position evaluator
        depth: Search depth (default: 4)
        positions: Positions to run (default: TACTICAL_POSITIONS)

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of TestResult objects
            - avg_time: Average time per position
            - total_time: Total time
    """
    positions = list(positions) if positions is not None else TACTICAL_POSITIONS

    results = [evaluate_position(position, depth, evaluator) for position in positions]
    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)

    avg_time = total_time / len(positions) if positions else 0
    percentage = (correct_count / len(positions) * 100) if positions else 0

    logger.info(f"Tactical suite at depth {depth}: {correct_count}/{len(positions)} ({percentage:.1f}%)")

    return {
        'score': correct_count,
        'total': len(positions),
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }
