"""
Unit Tests for Evaluation Module

Tests for the heuristic evaluator and game phase detection.
"""

import pytest

from draughts_engine.board import Board, Color, Piece, Rank
from draughts_engine.evaluation import (
    EvaluationWeights,
    GamePhase,
    HeuristicEvaluator,
    classify_phase,
    count_material,
    evaluate,
    is_king_vs_king,
)

BLACK_MAN = Piece(Color.BLACK)
BLACK_KING = Piece(Color.BLACK, Rank.KING)
WHITE_MAN = Piece(Color.WHITE)
WHITE_KING = Piece(Color.WHITE, Rank.KING)


class TestHeuristicEvaluator:
    """Tests for HeuristicEvaluator."""

    @pytest.fixture
    def evaluator(self):
        """Create evaluator for testing."""
        return HeuristicEvaluator()

    def test_starting_position_is_balanced(self, evaluator):
        board = Board.initial()
        assert evaluator.evaluate(board, Color.BLACK) == pytest.approx(0.0, abs=1e-9)
        assert evaluator.evaluate(board, Color.WHITE) == pytest.approx(0.0, abs=1e-9)

    def test_score_is_antisymmetric(self, evaluator):
        board = Board.from_pieces({
            (2, 1): BLACK_MAN,
            (3, 4): BLACK_KING,
            (5, 2): WHITE_MAN,
        })
        black = evaluator.evaluate(board, Color.BLACK)
        white = evaluator.evaluate(board, Color.WHITE)
        assert black == pytest.approx(-white)
        assert black > 0

    def test_extra_piece_is_good(self, evaluator):
        board = Board.initial()
        without_white_man = board.with_pieces({(5, 0): None})
        assert evaluator.evaluate(without_white_man, Color.BLACK) > 0
        assert evaluator.evaluate(without_white_man, Color.WHITE) < 0

    def test_king_worth_more_than_man(self, evaluator):
        as_man = Board.from_pieces({(3, 2): BLACK_MAN, (6, 1): WHITE_MAN, (1, 0): BLACK_MAN})
        as_king = Board.from_pieces({(3, 2): BLACK_KING, (6, 1): WHITE_MAN, (1, 0): BLACK_MAN})
        assert evaluator.evaluate(as_king, Color.BLACK) > evaluator.evaluate(as_man, Color.BLACK)

    def test_mirrored_kings_evaluate_to_zero(self, evaluator):
        board = Board.from_pieces({(3, 2): BLACK_KING, (4, 5): WHITE_KING})
        assert is_king_vs_king(board)
        assert evaluator.evaluate(board, Color.BLACK) == 0
        assert evaluator.evaluate(board, Color.WHITE) == 0

    def test_king_endgame_counts_kings(self, evaluator):
        board = Board.from_pieces({
            (3, 2): BLACK_KING,
            (0, 7): BLACK_KING,
            (4, 5): WHITE_KING,
        })
        score = evaluator.evaluate(board, Color.BLACK)
        assert score > 900

        fewer = board.with_pieces({(0, 7): None})
        assert evaluator.evaluate(fewer, Color.BLACK) < score

    @pytest.mark.parametrize("color,square", [
        (Color.WHITE, (0, 7)),
        (Color.BLACK, (3, 4)),
    ])
    def test_losing_last_king_is_worse(self, evaluator, color, square):
        board = Board.from_pieces({(3, 4): BLACK_KING, (0, 7): WHITE_KING})
        before = evaluator.evaluate(board, color)
        after = evaluator.evaluate(board.with_pieces({square: None}), color)
        assert after < before
        assert after <= -1000

    def test_central_king_preferred_in_king_endgame(self, evaluator):
        central = Board.from_pieces({(3, 4): BLACK_KING, (7, 0): WHITE_KING})
        assert evaluator.evaluate(central, Color.BLACK) > 0

    def test_weights_change_score(self):
        board = Board.initial().with_pieces({(5, 0): None})
        light = evaluate(board, Color.BLACK, EvaluationWeights(capture_differential=1.0))
        heavy = evaluate(board, Color.BLACK, EvaluationWeights(capture_differential=20.0))
        assert heavy > light

    def test_module_function_matches_evaluator(self, evaluator):
        board = Board.initial().with_pieces({(2, 1): None})
        assert evaluate(board, Color.WHITE) == evaluator.evaluate(board, Color.WHITE)


class TestEvaluationWeights:
    """Tests for weight validation."""

    def test_defaults(self):
        weights = EvaluationWeights()
        assert weights.material == 1.0
        assert weights.king == 3.0

    @pytest.mark.parametrize("name", ["material", "king", "position", "center_control", "capture_differential"])
    def test_negative_weight_rejected(self, name):
        with pytest.raises(ValueError):
            EvaluationWeights(**{name: -1.0})


class TestGamePhase:
    """Tests for phase classification."""

    def test_opening(self):
        assert classify_phase(Board.initial()) is GamePhase.OPENING

    def test_midgame(self):
        pieces = {(0, 1): BLACK_MAN, (0, 3): BLACK_MAN, (0, 5): BLACK_MAN, (0, 7): BLACK_MAN,
                  (7, 0): WHITE_MAN, (7, 2): WHITE_MAN, (7, 4): WHITE_MAN, (7, 6): WHITE_MAN}
        assert classify_phase(Board.from_pieces(pieces)) is GamePhase.MIDGAME

    def test_endgame(self):
        board = Board.from_pieces({(0, 1): BLACK_MAN, (7, 0): WHITE_KING})
        assert classify_phase(board) is GamePhase.ENDGAME

    def test_material_count(self):
        board = Board.from_pieces({(0, 1): BLACK_MAN, (3, 2): BLACK_KING, (7, 0): WHITE_KING})
        material = count_material(board, Color.BLACK)
        assert (material.own_men, material.own_kings) == (1, 1)
        assert (material.opp_men, material.opp_kings) == (0, 1)
        assert material.total == 3
        assert not material.is_king_vs_king

    def test_bare_side_counts_as_king_endgame(self):
        board = Board.from_pieces({(3, 4): BLACK_KING})
        assert is_king_vs_king(board)
        assert is_king_vs_king(board, Color.WHITE)
