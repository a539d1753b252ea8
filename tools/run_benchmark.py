#!/usr/bin/env python3
"""
Tactical Suite Benchmark Runner

Runs the tactical test suite at multiple depths, with the evaluation
weights of each difficulty profile, to check search strength and speed.

Usage:
    python tools/run_benchmark.py [--depths 2,3,4] [--difficulties easy,hard] [--verbose]
"""

import sys
import argparse
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from draughts_engine.difficulty import get_profile
from draughts_engine.evaluation import HeuristicEvaluator
from draughts_engine.utils import run_tactical_suite, setup_logger


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(depths: list[int], difficulties: list[str], verbose: bool = False):
    """
    Run the tactical suite for every (difficulty, depth) pair.

    Args:
        depths: List of depths to test
        difficulties: Profile labels whose evaluation weights are used
        verbose: If True, print detailed results for each position
    """
    print("=" * 80)
    print("TACTICAL SUITE BENCHMARK - draughts_engine")
    print("=" * 80)
    print("Search: Minimax with Alpha-Beta Pruning")
    print(f"Depths: {depths}")
    print(f"Difficulties: {difficulties}")
    print("=" * 80)

    all_results = []

    for label in difficulties:
        profile = get_profile(label)
        evaluator = HeuristicEvaluator(profile.weights)

        for depth in depths:
            start_time = time.time()
            result = run_tactical_suite(evaluator=evaluator, depth=depth)
            total_time = time.time() - start_time

            total_nodes = sum(r.nodes_searched for r in result['results'])
            nodes_per_sec = total_nodes / total_time if total_time > 0 else 0

            all_results.append({
                'difficulty': profile.name,
                'depth': depth,
                'score': result['score'],
                'total': result['total'],
                'percentage': result['percentage'],
                'avg_time': result['avg_time'],
                'nodes_per_sec': nodes_per_sec,
            })

            if verbose:
                print(f"\n{profile.name} at depth {depth}:")
                for r in result['results']:
                    mark = "OK " if r.correct else "BAD"
                    print(
                        f"  [{mark}] {r.position.id}: found {r.found_move or '-'}, "
                        f"expected {r.position.best_moves} ({r.nodes_searched:,} nodes)"
                    )

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Difficulty':<12} {'Depth':<8} {'Correct':<12} {'%':<8} {'Avg Time':<12} {'Nodes/sec':<15}")
    print("-" * 80)

    for r in all_results:
        print(
            f"{r['difficulty']:<12} {r['depth']:<8} {r['score']}/{r['total']:<10} "
            f"{r['percentage']:<7.1f}% {format_time(r['avg_time']):<12} {r['nodes_per_sec']:>12,.0f}"
        )

    print("=" * 80)
    return all_results


def main():
    parser = argparse.ArgumentParser(description="Run the tactical suite benchmark")
    parser.add_argument(
        '--depths',
        type=str,
        default='2,3,4',
        help='Comma-separated list of depths to test (default: 2,3,4)'
    )
    parser.add_argument(
        '--difficulties',
        type=str,
        default='easy,medium,hard',
        help='Comma-separated difficulty labels (default: easy,medium,hard)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print detailed results for each position'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log search progress at DEBUG level'
    )

    args = parser.parse_args()

    if args.debug:
        setup_logger(debug=True)

    depths = [int(d) for d in args.depths.split(',')]
    difficulties = [d.strip() for d in args.difficulties.split(',') if d.strip()]

    run_benchmark(depths, difficulties, verbose=args.verbose)


if __name__ == '__main__':
    main()
