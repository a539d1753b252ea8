"""
Draughts Engine

A rules engine and search AI for 8x8 draughts with forced captures and
flying kings, with difficulty levels for play against humans.

## Architecture

The engine is organized into several key modules:

1. **board**: Board representation
   - Immutable Board, Piece and Move value types
   - Text notation and 4-channel numpy tensor conversion

2. **moves**: Rules
   - Legal move generation under the forced-capture rule
   - Move application (capture removal, promotion)

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - HeuristicEvaluator: weighted material/advancement/center terms
   - Game phase detection

4. **search**: Search algorithms
   - Minimax with alpha-beta pruning, multi-jump aware
   - Iterative deepening under a time budget
   - Move ordering heuristics
   - Background search thread for interactive hosts

5. **difficulty**: easy / medium / hard profiles, TOML overrides

6. **game**: Immutable game state (turns, chains, results)

7. **utils**: Logging setup and a tactical test suite

## Quick Start

```python
from draughts_engine import Board, Color, choose_move

board = Board.initial()
move = choose_move(board, Color.BLACK, difficulty="medium")
print(f"Engine plays: {move}")
```

## Version

0.1.0
"""

__version__ = "0.1.0"

from draughts_engine.board import Board, Color, InvalidBoardError, Move, Piece, Rank
from draughts_engine.difficulty import DifficultyProfile, get_profile
from draughts_engine.evaluation import evaluate
from draughts_engine.game import GameResult, GameState, IllegalMoveError
from draughts_engine.moves import all_moves, apply_move
from draughts_engine.search import BackgroundSearch, choose_move, search

__all__ = [
    'BackgroundSearch',
    'Board',
    'Color',
    'DifficultyProfile',
    'GameResult',
    'GameState',
    'IllegalMoveError',
    'InvalidBoardError',
    'Move',
    'Piece',
    'Rank',
    'all_moves',
    'apply_move',
    'choose_move',
    'evaluate',
    'get_profile',
    'search',
]
