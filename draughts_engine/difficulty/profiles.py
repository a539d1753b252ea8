"""
Difficulty profiles for the search engine.

A profile bundles everything a difficulty label controls: the time budget,
the maximum search depth per game phase, the evaluation weights and the
probability of deliberately playing a random move.

Profiles can be overridden from a TOML file:

    [medium]
    time_budget_ms = 2000
    blunder_probability = 0.05

    [medium.depth_by_phase]
    opening = 3

    [medium.weights]
    king = 4.0
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from draughts_engine.evaluation.heuristic import EvaluationWeights
from draughts_engine.evaluation.phase import GamePhase

logger = logging.getLogger(__name__)

DEFAULT_DIFFICULTY = "medium"
PROFILES_ENV_VAR = "DRAUGHTS_ENGINE_PROFILES"


@dataclass(frozen=True)
class DifficultyProfile:
    """Immutable configuration selected once per game or turn."""

    name: str

    time_budget_ms: int = 3000
    """Wall-clock budget for one move"""

    depth_by_phase: Mapping[GamePhase, int] = field(default_factory=lambda: {
        GamePhase.OPENING: 2, GamePhase.MIDGAME: 3, GamePhase.ENDGAME: 4,
    })
    """Maximum iterative-deepening depth per game phase"""

    weights: EvaluationWeights = field(default_factory=EvaluationWeights)
    """Evaluation weights"""

    blunder_probability: float = 0.0
    """Chance of playing a uniformly random legal move instead of searching"""

    adaptive_time: bool = True
    """Scale the budget by phase, capture count and how clearly the side is winning"""

    reply_prediction: bool = False
    """Score the last own ply against the opponent's best-ordered reply"""

    def __post_init__(self):
        if self.time_budget_ms <= 0:
            raise ValueError(f"time_budget_ms must be positive, got {self.time_budget_ms}")

        if not 0.0 <= self.blunder_probability <= 1.0:
            raise ValueError(
                f"blunder_probability must be in [0, 1], got {self.blunder_probability}"
            )

        missing = [phase.value for phase in GamePhase if phase not in self.depth_by_phase]
        if missing:
            raise ValueError(f"depth_by_phase is missing phases: {missing}")

        for phase, depth in self.depth_by_phase.items():
            if depth < 1:
                raise ValueError(f"depth for {phase.value} must be >= 1, got {depth}")

        # Read-only copy so the profile stays hashable and unshared
        object.__setattr__(self, "depth_by_phase", MappingProxyType(dict(self.depth_by_phase)))

    def depth_for(self, phase: GamePhase) -> int:
        return self.depth_by_phase[phase]

    def __hash__(self) -> int:
        depths = tuple(self.depth_by_phase[p] for p in GamePhase)
        return hash((
            self.name, self.time_budget_ms, depths, self.weights,
            self.blunder_probability, self.adaptive_time, self.reply_prediction,
        ))

    @property
    def time_budget(self) -> float:
        """Time budget in seconds."""
        return self.time_budget_ms / 1000.0

    def __repr__(self) -> str:
        depths = "/".join(str(self.depth_by_phase[p]) for p in GamePhase)
        return (
            f"DifficultyProfile(name={self.name!r}, time={self.time_budget_ms}ms, "
            f"depths={depths}, blunder={self.blunder_probability})"
        )


def _depths(opening: int, midgame: int, endgame: int) -> Dict[GamePhase, int]:
    return {GamePhase.OPENING: opening, GamePhase.MIDGAME: midgame, GamePhase.ENDGAME: endgame}


# ============================================================================
# Built-in profiles
# ============================================================================

EASY = DifficultyProfile(
    name="easy",
    time_budget_ms=1000,
    depth_by_phase=_depths(1, 2, 3),
    weights=EvaluationWeights(
        material=0.5, king=1.0, position=0.05, center_control=0.02, capture_differential=5.0,
    ),
    blunder_probability=0.3,
)

MEDIUM = DifficultyProfile(
    name="medium",
    time_budget_ms=3000,
    depth_by_phase=_depths(2, 3, 4),
    weights=EvaluationWeights(
        material=1.0, king=3.0, position=0.1, center_control=0.05, capture_differential=10.0,
    ),
    blunder_probability=0.1,
    reply_prediction=True,
)

HARD = DifficultyProfile(
    name="hard",
    time_budget_ms=10000,
    depth_by_phase=_depths(6, 7, 8),
    weights=EvaluationWeights(
        material=2.0, king=8.0, position=0.3, center_control=0.15, capture_differential=20.0,
    ),
    blunder_probability=0.0,
    reply_prediction=True,
)

PROFILES: Dict[str, DifficultyProfile] = {p.name: p for p in (EASY, MEDIUM, HARD)}


def get_profile(
    label: Optional[str],
    profiles: Optional[Mapping[str, DifficultyProfile]] = None,
) -> DifficultyProfile:
    """
    Look up a profile by label (case-insensitive).

    Unknown or missing labels fall back to DEFAULT_DIFFICULTY instead of
    failing. When `profiles` is None, the built-ins are used, overridden by
    the TOML file named in $DRAUGHTS_ENGINE_PROFILES if set.
    """
    if profiles is None:
        env_path = os.environ.get(PROFILES_ENV_VAR)
        profiles = _profiles_from_file(env_path) if env_path else PROFILES

    key = (label or "").strip().lower()
    if key in profiles:
        return profiles[key]

    logger.warning(f"Unknown difficulty {label!r}, using {DEFAULT_DIFFICULTY!r}")
    return profiles.get(DEFAULT_DIFFICULTY, MEDIUM)


@lru_cache(maxsize=None)
def _profiles_from_file(path: str) -> Mapping[str, DifficultyProfile]:
    """Profiles from `path`, read once per path for the life of the process."""
    return MappingProxyType(load_profiles(path))


def profile_from_dict(
    name: str, raw: Mapping[str, Any], base: Optional[DifficultyProfile] = None
) -> DifficultyProfile:
    """
    Build a profile from a plain mapping, starting from `base` (or defaults).

    Unknown keys are ignored with a warning.

    Raises:
        ValueError: If the resulting profile is invalid
    """
    base = base if base is not None else DifficultyProfile(name=name)
    allowed = {f.name for f in fields(DifficultyProfile)} - {"name"}
    changes: Dict[str, Any] = {}

    for key, value in raw.items():
        if key not in allowed:
            logger.warning(f"Ignoring unknown profile key {name}.{key}")
            continue
        if key == "weights":
            changes[key] = replace(base.weights, **dict(value))
        elif key == "depth_by_phase":
            depths = dict(base.depth_by_phase)
            for phase_name, depth in value.items():
                depths[GamePhase(phase_name)] = int(depth)
            changes[key] = depths
        else:
            changes[key] = value

    return replace(base, name=name, **changes)


def load_profiles(path: Union[str, Path, None]) -> Dict[str, DifficultyProfile]:
    """
    Load profile overrides from a TOML file on top of the built-ins.

    A missing file yields the built-in profiles unchanged. Tables for labels
    that are not built in define new profiles from the defaults.
    """
    profiles = dict(PROFILES)
    if path is None or not Path(path).exists():
        if path is not None:
            logger.warning(f"Profile file not found: {path}")
        return profiles

    with open(path, "rb") as f:
        raw = tomllib.load(f)

    for label, table in raw.items():
        key = label.lower()
        profiles[key] = profile_from_dict(key, table, base=profiles.get(key))
        logger.debug(f"Loaded profile {profiles[key]!r} from {path}")

    return profiles
