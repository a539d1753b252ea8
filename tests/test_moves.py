"""
Unit Tests for Move Generation and Application

Tests for the forced-capture rule, flying kings, multi-jump continuation,
promotion and immutability of the input board.
"""

import pytest

from draughts_engine.board import Board, Color, Move, Piece, Rank
from draughts_engine.moves import (
    all_moves,
    apply_move,
    capture_moves,
    continuation_captures,
    has_capture,
    is_promotion,
    simple_moves,
)

BLACK_MAN = Piece(Color.BLACK)
BLACK_KING = Piece(Color.BLACK, Rank.KING)
WHITE_MAN = Piece(Color.WHITE)
WHITE_KING = Piece(Color.WHITE, Rank.KING)


class TestOpening:
    """Tests for the starting position."""

    @pytest.fixture
    def board(self):
        return Board.initial()

    def test_black_has_seven_moves(self, board):
        moves = all_moves(board, Color.BLACK)
        assert len(moves) == 7
        assert all(not m.is_capture for m in moves)
        assert all(m.from_row == 2 and m.to_row == 3 for m in moves)

    def test_white_has_seven_moves(self, board):
        moves = all_moves(board, Color.WHITE)
        assert len(moves) == 7
        assert all(m.from_row == 5 and m.to_row == 4 for m in moves)

    def test_no_captures(self, board):
        assert not has_capture(board, Color.BLACK)
        assert not has_capture(board, Color.WHITE)


class TestForcedCapture:
    """Tests for the forced-capture rule."""

    def test_capture_is_mandatory(self):
        board = Board.from_pieces({
            (0, 1): BLACK_MAN,
            (2, 3): BLACK_MAN,
            (3, 4): WHITE_MAN,
        })
        assert all_moves(board, Color.BLACK) == [Move(2, 3, 4, 5, True)]

    def test_capture_example_result(self):
        board = Board.from_pieces({(2, 3): BLACK_MAN, (3, 4): WHITE_MAN})
        after = apply_move(board, Move(2, 3, 4, 5, True))

        assert after.piece_at(4, 5) == BLACK_MAN
        assert after.piece_at(3, 4) is None
        assert after.piece_at(2, 3) is None
        assert after.count(Color.WHITE) == 0

    def test_captures_from_every_capturing_piece(self):
        board = Board.from_pieces({
            (2, 1): BLACK_MAN,
            (3, 2): WHITE_MAN,
            (2, 7): BLACK_MAN,
            (3, 6): WHITE_MAN,
            (5, 4): WHITE_MAN,
        })
        moves = all_moves(board, Color.BLACK)
        assert set(moves) == {Move(2, 1, 4, 3, True), Move(2, 7, 4, 5, True)}

    def test_men_do_not_capture_backward(self):
        board = Board.from_pieces({(3, 2): BLACK_MAN, (2, 3): WHITE_MAN})
        assert capture_moves(board, (3, 2)) == []
        assert set(all_moves(board, Color.BLACK)) == {Move(3, 2, 4, 1), Move(3, 2, 4, 3)}

    def test_no_capture_onto_occupied_cell(self):
        board = Board.from_pieces({
            (2, 3): BLACK_MAN,
            (3, 4): WHITE_MAN,
            (4, 5): WHITE_MAN,
        })
        assert capture_moves(board, (2, 3)) == []

    def test_empty_square_has_no_moves(self):
        board = Board.initial()
        assert capture_moves(board, (3, 0)) == []
        assert simple_moves(board, (3, 0)) == []


class TestKings:
    """Tests for flying kings."""

    def test_king_slides_any_distance(self):
        board = Board.from_pieces({(0, 1): BLACK_KING})
        moves = all_moves(board, Color.BLACK)
        destinations = {m.destination for m in moves}
        assert destinations == {(1, 0), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 7)}

    def test_king_moves_backward(self):
        board = Board.from_pieces({(4, 3): WHITE_KING})
        destinations = {m.destination for m in simple_moves(board, (4, 3))}
        assert (7, 0) in destinations
        assert (7, 6) in destinations
        assert (0, 7) in destinations

    def test_flying_capture_lands_anywhere_beyond(self):
        board = Board.from_pieces({(0, 1): BLACK_KING, (2, 3): WHITE_MAN})
        landings = {m.destination for m in capture_moves(board, (0, 1))}
        assert landings == {(3, 4), (4, 5), (5, 6), (6, 7)}

    def test_landings_stop_at_next_piece(self):
        board = Board.from_pieces({
            (0, 1): BLACK_KING,
            (2, 3): WHITE_MAN,
            (5, 6): WHITE_MAN,
        })
        landings = {m.destination for m in capture_moves(board, (0, 1))}
        assert landings == {(3, 4), (4, 5)}

    def test_ray_blocked_by_own_piece(self):
        board = Board.from_pieces({
            (0, 1): BLACK_KING,
            (1, 2): BLACK_MAN,
            (2, 3): WHITE_MAN,
        })
        assert capture_moves(board, (0, 1)) == []

    def test_two_adjacent_opponents_block(self):
        board = Board.from_pieces({
            (0, 1): BLACK_KING,
            (1, 2): WHITE_MAN,
            (2, 3): WHITE_MAN,
        })
        assert capture_moves(board, (0, 1)) == []

    def test_distant_capture_removes_jumped_piece(self):
        board = Board.from_pieces({(0, 1): BLACK_KING, (2, 3): WHITE_MAN})
        after = apply_move(board, Move(0, 1, 5, 6, True))
        assert after.piece_at(2, 3) is None
        assert after.piece_at(5, 6) == BLACK_KING
        assert after.count(Color.WHITE) == 0


class TestChains:
    """Tests for multi-jump continuation."""

    def test_continuation_after_first_jump(self):
        board = Board.from_pieces({
            (2, 1): BLACK_MAN,
            (3, 2): WHITE_MAN,
            (5, 4): WHITE_MAN,
        })
        after = apply_move(board, Move(2, 1, 4, 3, True))
        assert continuation_captures(after, (4, 3)) == [Move(4, 3, 6, 5, True)]

    def test_chain_ends(self):
        board = Board.from_pieces({(2, 3): BLACK_MAN, (3, 4): WHITE_MAN})
        after = apply_move(board, Move(2, 3, 4, 5, True))
        assert continuation_captures(after, (4, 5)) == []


class TestPromotion:
    """Tests for crowning."""

    def test_step_onto_last_row_promotes(self):
        board = Board.from_pieces({(6, 1): BLACK_MAN})
        move = Move(6, 1, 7, 0)
        assert is_promotion(board, move)
        assert apply_move(board, move).piece_at(7, 0) == BLACK_KING

    def test_capture_onto_last_row_promotes(self):
        board = Board.from_pieces({(2, 1): WHITE_MAN, (1, 2): BLACK_MAN})
        after = apply_move(board, Move(2, 1, 0, 3, True))
        assert after.piece_at(0, 3) == WHITE_KING
        assert after.count(Color.BLACK) == 0

    def test_king_stays_king(self):
        board = Board.from_pieces({(7, 0): BLACK_KING})
        after = apply_move(board, Move(7, 0, 1, 6))
        assert after.piece_at(1, 6) == BLACK_KING
        assert not is_promotion(board, Move(7, 0, 1, 6))


class TestApplyMove:
    """Tests for apply_move() purity and errors."""

    def test_input_board_not_modified(self):
        board = Board.initial()
        before = board.to_string()
        for move in all_moves(board, Color.BLACK):
            apply_move(board, move)
        assert board.to_string() == before

    def test_piece_count_preserved_by_simple_move(self):
        board = Board.initial()
        after = apply_move(board, Move(2, 1, 3, 0))
        assert after.count(Color.BLACK) == 12
        assert after.piece_at(3, 0) == BLACK_MAN

    def test_empty_origin_raises(self):
        with pytest.raises(ValueError):
            apply_move(Board.initial(), Move(3, 0, 4, 1))
