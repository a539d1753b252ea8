"""
Game State

An immutable turn-by-turn view of a game: the board, the side to move, and
the bookkeeping the rules need between moves (a multi-jump chain in
progress, the no-capture counter, captures per side).

Hosts keep one GameState per game and replace it with play(); nothing here
is shared or mutated.
"""

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional

from draughts_engine.board.representation import Board, Color, Move, Square
from draughts_engine.moves.applier import apply_move
from draughts_engine.moves.generator import all_moves, continuation_captures
from draughts_engine.search.engine import Difficulty, choose_move

logger = logging.getLogger(__name__)

MAX_MOVES_WITHOUT_CAPTURE = 50


class IllegalMoveError(ValueError):
    """Raised when a move not in legal_moves() is played."""


class GameResult(Enum):
    ONGOING = "ongoing"
    BLACK_WINS = "black_wins"
    WHITE_WINS = "white_wins"
    DRAW = "draw"

    @classmethod
    def win_for(cls, color: Color) -> "GameResult":
        return cls.BLACK_WINS if color is Color.BLACK else cls.WHITE_WINS


@dataclass(frozen=True)
class GameState:
    """
    Position plus turn bookkeeping.

    Attributes:
        board: Current position
        to_move: Side whose turn it is
        chain_square: Landing square of a piece that must keep jumping
            (None when no chain is in progress)
        moves_since_capture: Moves played since the last capture
        black_captures: Pieces captured by BLACK so far
        white_captures: Pieces captured by WHITE so far
    """

    board: Board
    to_move: Color = Color.BLACK
    chain_square: Optional[Square] = None
    moves_since_capture: int = 0
    black_captures: int = 0
    white_captures: int = 0

    @classmethod
    def new(cls) -> "GameState":
        """Standard starting position, BLACK to move."""
        return cls(board=Board.initial())

    def legal_moves(self) -> List[Move]:
        if self.chain_square is not None:
            return continuation_captures(self.board, self.chain_square)
        return all_moves(self.board, self.to_move)

    def play(self, move: Move) -> "GameState":
        """
        Play one move (one step or one jump) and return the next state.

        After a jump that can continue from its landing square, the same side
        keeps the turn and must jump again with that piece.

        Raises:
            IllegalMoveError: If `move` is not currently legal
        """
        if move not in self.legal_moves():
            raise IllegalMoveError(f"Illegal move {move} for {self.to_move.name}")

        board = apply_move(self.board, move)

        if not move.is_capture:
            return replace(
                self,
                board=board,
                to_move=self.to_move.opponent,
                chain_square=None,
                moves_since_capture=self.moves_since_capture + 1,
            )

        if self.to_move is Color.BLACK:
            tallies = {"black_captures": self.black_captures + 1}
        else:
            tallies = {"white_captures": self.white_captures + 1}

        if continuation_captures(board, move.destination):
            logger.debug(f"{self.to_move.name} continues the chain from {move.destination}")
            return replace(
                self, board=board, chain_square=move.destination, moves_since_capture=0,
                **tallies,
            )

        return replace(
            self,
            board=board,
            to_move=self.to_move.opponent,
            chain_square=None,
            moves_since_capture=0,
            **tallies,
        )

    def result(self) -> GameResult:
        """
        Outcome of the game so far.

        The side to move loses when it has no pieces or no legal move; the
        game is drawn after MAX_MOVES_WITHOUT_CAPTURE moves with no capture.
        """
        if self.board.count(self.to_move) == 0 or not self.legal_moves():
            return GameResult.win_for(self.to_move.opponent)
        if self.moves_since_capture >= MAX_MOVES_WITHOUT_CAPTURE:
            return GameResult.DRAW
        return GameResult.ONGOING

    @property
    def is_over(self) -> bool:
        return self.result() is not GameResult.ONGOING

    def engine_move(
        self,
        difficulty: Difficulty = None,
        deadline: Optional[float] = None,
        rng: Optional[random.Random] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> Optional[Move]:
        """Ask the engine for a move for the side to move, honouring a pending chain."""
        restrict_to = self.legal_moves() if self.chain_square is not None else None
        return choose_move(
            self.board, self.to_move, self.to_move, difficulty, deadline,
            rng=rng, should_stop=should_stop, restrict_to=restrict_to,
        )
