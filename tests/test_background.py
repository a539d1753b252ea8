"""
Unit Tests for Background Search

Tests for running the search on a worker thread.
"""

import threading
import time

import pytest

from draughts_engine.board import Board, Color
from draughts_engine.difficulty import DifficultyProfile
from draughts_engine.evaluation import Evaluator, GamePhase, HeuristicEvaluator
from draughts_engine.moves import all_moves
from draughts_engine.search import BackgroundSearch, SearchResult


class BlockingEvaluator(Evaluator):
    """Evaluator that waits until released, to hold a search open."""

    def __init__(self):
        self.release = threading.Event()

    def evaluate(self, board, perspective):
        self.release.wait(timeout=10)
        return 0.0


class SlowEvaluator(HeuristicEvaluator):
    def evaluate(self, board, perspective):
        time.sleep(0.001)
        return super().evaluate(board, perspective)


class FailingEvaluator(Evaluator):
    def evaluate(self, board, perspective):
        raise RuntimeError("evaluation failed")


@pytest.fixture
def profile():
    return DifficultyProfile(
        name="test",
        time_budget_ms=20000,
        depth_by_phase={GamePhase.OPENING: 8, GamePhase.MIDGAME: 8, GamePhase.ENDGAME: 8},
    )


class TestBackgroundSearch:
    """Tests for BackgroundSearch."""

    def test_result_and_callback(self):
        board = Board.initial()
        done = threading.Event()
        received = []

        def on_done(result):
            received.append(result)
            done.set()

        runner = BackgroundSearch()
        runner.start(board, Color.BLACK, difficulty="easy", deadline=0.5, callback=on_done)
        result = runner.wait(timeout=30)

        assert done.wait(timeout=5)
        assert isinstance(result, SearchResult)
        assert result.move in all_moves(board, Color.BLACK)
        assert received == [result]
        assert not runner.searching

    def test_overlapping_start_rejected(self, profile):
        evaluator = BlockingEvaluator()
        runner = BackgroundSearch()
        runner.start(Board.initial(), Color.BLACK, difficulty=profile, evaluator=evaluator)
        try:
            assert runner.searching
            with pytest.raises(RuntimeError):
                runner.start(Board.initial(), Color.BLACK, difficulty=profile)
        finally:
            evaluator.release.set()
            runner.stop(timeout=30)

    def test_stop_returns_best_so_far(self, profile):
        board = Board.initial()
        runner = BackgroundSearch()
        runner.start(board, Color.BLACK, difficulty=profile, evaluator=SlowEvaluator())
        time.sleep(0.2)

        result = runner.stop(timeout=30)

        assert result is not None
        assert result.move in all_moves(board, Color.BLACK)

    def test_error_is_recorded(self, profile):
        runner = BackgroundSearch()
        runner.start(Board.initial(), Color.BLACK, difficulty=profile, evaluator=FailingEvaluator())

        assert runner.wait(timeout=30) is None
        assert isinstance(runner.error, RuntimeError)

    def test_wait_without_search(self):
        assert BackgroundSearch().wait() is None
