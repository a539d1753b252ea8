"""
Utilities Module

This module provides logging setup and a tactical test suite for
benchmarking the engine.

Key Components:
    - setup_logger: package logger configuration
    - Tactical suite: positions with a known best move
"""

from draughts_engine.utils.log import setup_logger
from draughts_engine.utils.testing import (
    TACTICAL_POSITIONS,
    TestPosition,
    TestResult,
    evaluate_position,
    run_tactical_suite,
)

__all__ = [
    'TACTICAL_POSITIONS',
    'TestPosition',
    'TestResult',
    'evaluate_position',
    'run_tactical_suite',
    'setup_logger',
]
