"""
Difficulty Module

Named configurations controlling search time, depth per game phase,
evaluation weights and deliberate blunders.

Key Components:
    - DifficultyProfile: frozen, validated configuration
    - PROFILES: built-in "easy", "medium" and "hard"
    - get_profile: label lookup with fallback to the default profile
    - load_profiles: TOML overrides on top of the built-ins
"""

from draughts_engine.difficulty.profiles import (
    DEFAULT_DIFFICULTY,
    EASY,
    HARD,
    MEDIUM,
    PROFILES,
    DifficultyProfile,
    get_profile,
    load_profiles,
    profile_from_dict,
)

__all__ = [
    'DEFAULT_DIFFICULTY',
    'EASY',
    'HARD',
    'MEDIUM',
    'PROFILES',
    'DifficultyProfile',
    'get_profile',
    'load_profiles',
    'profile_from_dict',
]
