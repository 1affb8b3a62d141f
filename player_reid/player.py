"""
Player class for managing individual track state and tracking history.
"""

from collections import deque
from dataclasses import dataclass
from typing import Tuple

from .appearance import FeatureVector, smooth_features
from .detection import Detection


@dataclass(frozen=True)
class TrackSample:
    """One recent observation of a player."""
    time: float
    position: Tuple[float, float]
    confidence: float


class Player:
    """
    Represents a single tracked identity with smoothed appearance features
    and a bounded history of recent observations.
    """

    def __init__(self, player_id: int, detection: Detection, time: float,
                 history_length: int = 50):
        """
        Initialize a player from the detection that created it.

        Features and position are taken from the detection as-is.

        Args:
            player_id: Unique player identifier
            detection: Detection that started the track
            time: Timestamp of the detection
            history_length: Number of recent samples to keep
        """
        self.id = player_id
        self.first_seen = time
        self.last_seen = time
        self.last_position = detection.position
        self.features = detection.features.copy()

        self.tracking_history = deque(maxlen=history_length)
        self.tracking_history.append(
            TrackSample(time, detection.position, detection.confidence)
        )

        self.frames_since_last_seen = 0

    def update_with_detection(self, detection: Detection, time: float,
                              alpha: float = 0.3):
        """
        Update player state with a matched or re-identified detection.

        Args:
            detection: Detection assigned to this player
            time: Current timestamp
            alpha: Feature smoothing factor
        """
        self.last_seen = time
        self.last_position = detection.position
        self.features = smooth_features(self.features, detection.features, alpha)
        self.tracking_history.append(
            TrackSample(time, detection.position, detection.confidence)
        )
        self.frames_since_last_seen = 0

    def mark_missed(self):
        """Record a frame in which this player was not matched."""
        self.frames_since_last_seen += 1

    def is_expired(self, max_frames: int = 30) -> bool:
        """
        Check whether the player has been missing for too long.

        Args:
            max_frames: Misses tolerated before removal

        Returns:
            True once the miss-counter exceeds max_frames
        """
        return self.frames_since_last_seen > max_frames

    def __repr__(self) -> str:
        return (f"Player(id={self.id}, position={self.last_position}, "
                f"last_seen={self.last_seen}, missed={self.frames_since_last_seen})")
