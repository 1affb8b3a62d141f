"""
Multi-player tracking with stable IDs and appearance-based re-identification.

This package provides a frame-by-frame tracker that matches detections to
players by position and appearance, and recovers identities after a player
has been missing for a while.
"""

from .config import (
    TrackingConfig, SimulationConfig, TrackStatus, HistoryAction, PlayerStatus
)
from .appearance import FeatureVector, feature_similarity, smooth_features
from .detection import Detection, TrackedObject
from .player import Player
from .history import HistoryEvent, PlayerSummary, TrackerStats
from .tracker import PlayerTracker, TrackerState
from .simulation import SimulatedDetector, SessionProcessor
from . import utils

__version__ = "1.0.0"
__all__ = [
    "TrackingConfig",
    "SimulationConfig",
    "TrackStatus",
    "HistoryAction",
    "PlayerStatus",
    "FeatureVector",
    "feature_similarity",
    "smooth_features",
    "Detection",
    "TrackedObject",
    "Player",
    "HistoryEvent",
    "PlayerSummary",
    "TrackerStats",
    "PlayerTracker",
    "TrackerState",
    "SimulatedDetector",
    "SessionProcessor",
    "utils",
]
