"""
Board Representation

This module defines the immutable value types the rest of the engine works
on: colors, ranks, pieces, moves and the 8x8 board itself.

Board Orientation:
    - Row 0 = Black's back rank (Black men start on rows 0-2)
    - Row 7 = White's back rank (White men start on rows 5-7)
    - Only dark cells, where (row + col) is odd, may hold a piece

Text Notation:
    Eight lines of eight characters, row 0 first:
        .  empty (or light) cell
        b  Black man       B  Black king
        w  White man       W  White king

4-Channel Tensor (used by the evaluator):
    0: Black men      2: White men
    1: Black kings    3: White kings
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

BOARD_SIZE = 8

Square = Tuple[int, int]

# The four diagonal rays, in the order moves are enumerated
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class InvalidBoardError(ValueError):
    """Raised when a board violates the placement invariants."""


class Color(Enum):
    """Side of a piece. Black moves first and advances toward row 7."""

    BLACK = "b"
    WHITE = "w"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def forward(self) -> int:
        """Row step of a man's forward move."""
        return 1 if self is Color.BLACK else -1

    @property
    def promotion_row(self) -> int:
        return BOARD_SIZE - 1 if self is Color.BLACK else 0

    def advancement(self, row: int) -> float:
        """Progress toward the promotion row, normalized to [0, 1]."""
        if self is Color.BLACK:
            return row / (BOARD_SIZE - 1)
        return (BOARD_SIZE - 1 - row) / (BOARD_SIZE - 1)


class Rank(Enum):
    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    color: Color
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def promoted(self) -> "Piece":
        return Piece(self.color, Rank.KING)

    def symbol(self) -> str:
        letter = self.color.value
        return letter.upper() if self.is_king else letter


SYMBOL_TO_PIECE: Dict[str, Piece] = {
    "b": Piece(Color.BLACK, Rank.MAN),
    "B": Piece(Color.BLACK, Rank.KING),
    "w": Piece(Color.WHITE, Rank.MAN),
    "W": Piece(Color.WHITE, Rank.KING),
}

PIECE_TO_CHANNEL = {
    Piece(Color.BLACK, Rank.MAN): 0,
    Piece(Color.BLACK, Rank.KING): 1,
    Piece(Color.WHITE, Rank.MAN): 2,
    Piece(Color.WHITE, Rank.KING): 3,
}


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(row: int, col: int) -> bool:
    return (row + col) % 2 == 1


@dataclass(frozen=True)
class Move:
    """
    A single step or a single jump.

    A capturing move removes exactly one opposing piece, found by geometry
    between the origin and the destination. A multi-jump chain is a sequence
    of capturing moves by the same piece.
    """

    from_row: int
    from_col: int
    to_row: int
    to_col: int
    is_capture: bool = False

    @property
    def origin(self) -> Square:
        return (self.from_row, self.from_col)

    @property
    def destination(self) -> Square:
        return (self.to_row, self.to_col)

    @classmethod
    def from_string(cls, text: str) -> "Move":
        """
        Parse "23-34" (simple move) or "23x45" (capture).

        Raises:
            ValueError: If the string is not in either form
        """
        text = text.strip()
        if len(text) != 5 or text[2] not in "-x" or not (text[:2] + text[3:]).isdigit():
            raise ValueError(f"Invalid move string: {text!r}")
        return cls(int(text[0]), int(text[1]), int(text[3]), int(text[4]), text[2] == "x")

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{self.from_row}{self.from_col}{sep}{self.to_row}{self.to_col}"


class Board:
    """
    Immutable 8x8 draughts board.

    Public constructors validate the placement invariants and raise
    InvalidBoardError on violation. Boards derived inside the engine skip
    validation since move application preserves the invariants.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Sequence[Sequence[Optional[Piece]]] = (), validate: bool = True):
        if not grid:
            grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        frozen = tuple(tuple(row) for row in grid)
        if validate:
            _validate_grid(frozen)
        object.__setattr__(self, "_grid", frozen)

    def __setattr__(self, name, value):
        raise AttributeError("Board is immutable")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def initial(cls) -> "Board":
        """Standard starting position: 12 men per side on the dark cells."""
        grid: List[List[Optional[Piece]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if not is_dark(row, col):
                    continue
                if row < 3:
                    grid[row][col] = Piece(Color.BLACK)
                elif row > 4:
                    grid[row][col] = Piece(Color.WHITE)
        return cls(grid, validate=False)

    @classmethod
    def from_pieces(cls, pieces: Dict[Square, Piece]) -> "Board":
        grid: List[List[Optional[Piece]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for (row, col), piece in pieces.items():
            if not in_bounds(row, col):
                raise InvalidBoardError(f"Square ({row}, {col}) is off the board")
            grid[row][col] = piece
        return cls(grid)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Parse the text notation described in the module docstring.

        Blank lines and surrounding whitespace are ignored, and spaces inside
        a row are allowed so diagrams can be written "b . b . ...".
        """
        rows = [line.replace(" ", "") for line in text.strip().splitlines() if line.strip()]
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise InvalidBoardError(f"Board text must be {BOARD_SIZE}x{BOARD_SIZE}")

        grid: List[List[Optional[Piece]]] = []
        for line in rows:
            row_cells: List[Optional[Piece]] = []
            for char in line:
                if char == ".":
                    row_cells.append(None)
                elif char in SYMBOL_TO_PIECE:
                    row_cells.append(SYMBOL_TO_PIECE[char])
                else:
                    raise InvalidBoardError(f"Unknown board symbol: {char!r}")
            grid.append(row_cells)
        return cls(grid)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def piece_at(self, row: int, col: int) -> Optional[Piece]:
        if not in_bounds(row, col):
            return None
        return self._grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return in_bounds(row, col) and self._grid[row][col] is None

    def pieces(self, color: Optional[Color] = None) -> Iterator[Tuple[int, int, Piece]]:
        """Yield (row, col, piece) in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None and (color is None or piece.color is color):
                    yield row, col, piece

    def count(self, color: Color, rank: Optional[Rank] = None) -> int:
        return sum(1 for _, _, p in self.pieces(color) if rank is None or p.rank is rank)

    def rows(self) -> Tuple[Tuple[Optional[Piece], ...], ...]:
        return self._grid

    def with_pieces(self, changes: Dict[Square, Optional[Piece]]) -> "Board":
        """Return a new board with the given cells replaced."""
        grid = [list(row) for row in self._grid]
        for (row, col), piece in changes.items():
            grid[row][col] = piece
        return Board(grid, validate=False)

    def to_string(self) -> str:
        return "\n".join(
            "".join(piece.symbol() if piece else "." for piece in row) for row in self._grid
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self) -> int:
        return hash(self._grid)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        black = self.count(Color.BLACK)
        white = self.count(Color.WHITE)
        return f"Board(black={black}, white={white})"


def _validate_grid(grid: Tuple[Tuple[Optional[Piece], ...], ...]) -> None:
    if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
        raise InvalidBoardError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")

    for row, cells in enumerate(grid):
        for col, piece in enumerate(cells):
            if piece is None:
                continue
            if not isinstance(piece, Piece):
                raise InvalidBoardError(f"Cell ({row}, {col}) holds {piece!r}, not a Piece")
            if not is_dark(row, col):
                raise InvalidBoardError(f"Piece on light cell ({row}, {col})")


def board_to_tensor(board: Board) -> np.ndarray:
    """
    Convert a board to a 4-channel tensor representation.

    Returns:
        numpy array of shape (4, 8, 8) with dtype float32,
        1.0 where a piece of the channel's kind stands
    """
    tensor = np.zeros((4, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    for row, col, piece in board.pieces():
        tensor[PIECE_TO_CHANNEL[piece], row, col] = 1.0
    return tensor


def tensor_to_board(tensor: np.ndarray) -> Board:
    """
    Inverse of board_to_tensor().

    Raises:
        InvalidBoardError: If tensor has invalid shape or multiple pieces on one square
    """
    if tensor.shape != (4, BOARD_SIZE, BOARD_SIZE):
        raise InvalidBoardError(f"Invalid tensor shape: {tensor.shape}. Expected (4, 8, 8)")

    channel_to_piece = {v: k for k, v in PIECE_TO_CHANNEL.items()}
    pieces: Dict[Square, Piece] = {}
    for channel in range(4):
        for row, col in np.argwhere(tensor[channel] > 0.5):
            square = (int(row), int(col))
            if square in pieces:
                raise InvalidBoardError(f"Multiple pieces on square {square}")
            pieces[square] = channel_to_piece[channel]

    return Board.from_pieces(pieces)
