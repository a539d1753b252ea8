#!/usr/bin/env python3
"""
Self-Play Runner

Plays engine-vs-engine games from the starting position and reports the
results, e.g. to check that "hard" beats "easy".

Usage:
    python tools/self_play.py --games 10 --black hard --white easy
    python tools/self_play.py --games 4 --seed 7 --log-file logs/self_play.log
"""

import sys
import argparse
import random
from collections import Counter
from pathlib import Path
from typing import Optional

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from draughts_engine.board import Color
from draughts_engine.difficulty import get_profile
from draughts_engine.game import GameResult, GameState
from draughts_engine.utils import setup_logger

MAX_PLIES = 400


def play_game(black, white, rng: random.Random, deadline: Optional[float] = None) -> GameState:
    """
    Play one game to completion (or MAX_PLIES).

    Returns:
        Final GameState
    """
    state = GameState.new()
    plies = 0
    while not state.is_over and plies < MAX_PLIES:
        profile = black if state.to_move is Color.BLACK else white
        move = state.engine_move(profile, deadline=deadline, rng=rng)
        if move is None:
            break
        state = state.play(move)
        plies += 1
    return state


def main():
    parser = argparse.ArgumentParser(description="Play engine-vs-engine games")
    parser.add_argument('--games', type=int, default=10, help='Number of games (default: 10)')
    parser.add_argument('--black', type=str, default='medium', help='Black difficulty')
    parser.add_argument('--white', type=str, default='medium', help='White difficulty')
    parser.add_argument(
        '--move-time',
        type=float,
        default=None,
        help='Seconds per move, capped by the profile budget'
    )
    parser.add_argument('--seed', type=int, default=None, help='Random seed for blunders')
    parser.add_argument('--log-file', type=str, default=None, help='Write engine logs here')
    parser.add_argument('--debug', action='store_true', help='Log at DEBUG level')

    args = parser.parse_args()

    logger = setup_logger(debug=args.debug, log_file=args.log_file)

    black = get_profile(args.black)
    white = get_profile(args.white)
    rng = random.Random(args.seed)

    logger.info(f"Self-play: {args.games} games, black={black!r}, white={white!r}")

    results = Counter()
    for _ in tqdm(range(args.games), desc="Games"):
        final = play_game(black, white, rng, deadline=args.move_time)
        outcome = final.result()
        if outcome is GameResult.ONGOING:
            outcome = GameResult.DRAW
        results[outcome] += 1
        logger.info(
            f"Game over: {outcome.value} "
            f"(captures black={final.black_captures}, white={final.white_captures})"
        )

    print("=" * 60)
    print(f"Black ({black.name}) wins: {results[GameResult.BLACK_WINS]}")
    print(f"White ({white.name}) wins: {results[GameResult.WHITE_WINS]}")
    print(f"Draws: {results[GameResult.DRAW]}")
    print("=" * 60)


if __name__ == '__main__':
    main()
