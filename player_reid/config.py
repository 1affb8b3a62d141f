"""
Configuration module for the player tracking and re-identification engine.
Contains all thresholds, weights and simulation settings.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


MATCHING_STRATEGIES = ("greedy", "hungarian")


@dataclass
class TrackingConfig:
    """Main configuration for the tracker."""

    # Frame-to-frame matching
    max_distance: float = 100.0
    distance_weight: float = 0.6
    appearance_weight: float = 0.4
    appearance_scale: float = 100.0
    matching: str = "greedy"  # or "hungarian" for a global assignment

    # Re-identification
    reidentification_threshold: float = 0.7

    # Lifecycle
    max_frames_before_removal: int = 30
    history_length: int = 50

    # Feature smoothing (weight given to the incoming detection)
    feature_alpha: float = 0.3

    def __post_init__(self):
        if self.max_distance <= 0:
            raise ValueError(f"max_distance must be positive, got {self.max_distance}")
        if not 0.0 <= self.reidentification_threshold <= 1.0:
            raise ValueError(
                "reidentification_threshold must be within [0, 1], "
                f"got {self.reidentification_threshold}"
            )
        if not 0.0 < self.feature_alpha <= 1.0:
            raise ValueError(f"feature_alpha must be within (0, 1], got {self.feature_alpha}")
        if self.max_frames_before_removal < 0:
            raise ValueError(
                "max_frames_before_removal must be non-negative, "
                f"got {self.max_frames_before_removal}"
            )
        if self.history_length < 1:
            raise ValueError(f"history_length must be at least 1, got {self.history_length}")
        if self.matching not in MATCHING_STRATEGIES:
            raise ValueError(
                f"Unknown matching strategy {self.matching!r}, "
                f"expected one of {MATCHING_STRATEGIES}"
            )


@dataclass
class SimulationConfig:
    """Settings for the simulated upstream detector and session loop."""

    width: int = 1280
    height: int = 720
    fps: float = 30.0
    frame_count: int = 300
    seed: Optional[int] = None
    progress_every: int = 60

    # Players per frame: min_players + randint(player_spread)
    min_players: int = 6
    player_spread: int = 4
    visibility: float = 0.9

    # Jersey colors, indexed by player slot (RGB)
    palette: List[Tuple[int, int, int]] = field(default_factory=lambda: [
        (255, 0, 0),      # red
        (0, 255, 0),      # green
        (0, 0, 255),      # blue
        (255, 255, 0),    # yellow
        (255, 0, 255),    # magenta
        (0, 255, 255),    # cyan
        (255, 128, 0),    # orange
        (128, 0, 255),    # purple
        (255, 192, 203),  # pink
        (165, 42, 42),    # brown
    ])

    @property
    def duration(self) -> float:
        """Session length in seconds."""
        return self.frame_count / self.fps


class TrackStatus:
    """Per-frame status of a reported object."""
    TRACKED: str = 'tracked'
    REIDENTIFIED: str = 'reidentified'
    NEW: str = 'new'


class HistoryAction:
    """Actions recorded in the history log."""
    FIRST_DETECTED: str = 'first_detected'
    REIDENTIFIED: str = 'reidentified'
    # Counted against accuracy, but nothing records it yet
    LOST: str = 'lost'


class PlayerStatus:
    """Status of a player in history summaries."""
    ACTIVE: str = 'active'
    INACTIVE: str = 'inactive'
