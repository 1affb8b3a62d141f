"""
Multi-player tracker with greedy frame-to-frame matching and
appearance-based re-identification.
"""

from dataclasses import dataclass, field
from loguru import logger
from typing import Dict, Iterable, List, Optional

from .appearance import feature_similarity
from .config import TrackingConfig, TrackStatus, HistoryAction
from .detection import Detection, DetectionLike, TrackedObject
from .history import (
    HistoryEvent, PlayerSummary, TrackerStats, compute_stats, summarize_history
)
from .matching import match_players_to_detections
from .player import Player


@dataclass
class TrackerState:
    """All mutable state of one tracking session."""
    players: Dict[int, Player] = field(default_factory=dict)
    next_id: int = 1
    history: List[HistoryEvent] = field(default_factory=list)
    last_time: Optional[float] = None
    dropped_detections: int = 0


class PlayerTracker:
    """
    Assigns stable ids to detections frame by frame.

    Each step matches active players to detections, ages the players left
    unmatched, then tries to re-identify every leftover detection by
    appearance before starting a new player for it. Players missing for
    more than config.max_frames_before_removal frames are dropped for good.

    Not thread-safe: one instance per session, one step at a time.
    """

    def __init__(self, config: Optional[TrackingConfig] = None):
        """
        Initialize tracker.

        Args:
            config: Tracking configuration (defaults if omitted)
        """
        self.config = config or TrackingConfig()
        self.state = TrackerState()

    @property
    def players(self) -> Dict[int, Player]:
        return self.state.players

    @property
    def dropped_detections(self) -> int:
        """Invalid detections discarded since the last reset."""
        return self.state.dropped_detections

    def reset(self):
        """Forget all players, history and counters."""
        self.state = TrackerState()

    def step(self, detections: Iterable[DetectionLike],
             time: float) -> List[TrackedObject]:
        """
        Advance the tracker by one frame.

        Args:
            detections: Detections for the frame (Detection objects or dicts)
            time: Frame timestamp, non-decreasing across calls

        Returns:
            One TrackedObject per matched, re-identified or new player
        """
        if self.state.last_time is not None and time < self.state.last_time:
            logger.warning(f"Time went backwards: {time} < {self.state.last_time}")
        self.state.last_time = time

        valid = self._filter_detections(detections)
        tracked: List[TrackedObject] = []

        # 1) Match active players to detections
        matched_pairs = match_players_to_detections(self.players, valid, self.config)
        matched_players = set()
        used_detections = set()

        for player_id, det_idx in matched_pairs:
            det = valid[det_idx]
            self.players[player_id].update_with_detection(
                det, time, self.config.feature_alpha
            )
            matched_players.add(player_id)
            used_detections.add(det_idx)
            tracked.append(TrackedObject.from_detection(
                player_id, det, TrackStatus.TRACKED
            ))

        # 2) Age unmatched players, dropping expired ones
        for player_id in list(self.players):
            if player_id in matched_players:
                continue
            player = self.players[player_id]
            player.mark_missed()
            if player.is_expired(self.config.max_frames_before_removal):
                del self.players[player_id]
                logger.debug(f"Removed player {player_id} after "
                             f"{player.frames_since_last_seen} missed frames")

        # 3) Re-identify or create players for leftover detections
        for det_idx, det in enumerate(valid):
            if det_idx in used_detections:
                continue

            player = self.attempt_reidentification(det)
            if player is not None:
                player.update_with_detection(det, time, self.config.feature_alpha)
                self._record(player.id, HistoryAction.REIDENTIFIED, time, det)
                tracked.append(TrackedObject.from_detection(
                    player.id, det, TrackStatus.REIDENTIFIED
                ))
                logger.debug(f"Re-identified player {player.id} at t={time}")
            else:
                player = self._create_player(det, time)
                tracked.append(TrackedObject.from_detection(
                    player.id, det, TrackStatus.NEW
                ))

        return tracked

    def attempt_reidentification(self, detection: Detection) -> Optional[Player]:
        """
        Find the active player whose appearance best matches a detection.

        Position is ignored. Players updated earlier in the current step
        are candidates too.

        Args:
            detection: Unmatched detection

        Returns:
            Player with the highest similarity above the threshold, or None
        """
        best_match = None
        best_similarity = 0.0

        for player in self.players.values():
            similarity = feature_similarity(player.features, detection.features)
            if (similarity > best_similarity and
                    similarity > self.config.reidentification_threshold):
                best_similarity = similarity
                best_match = player

        return best_match

    def get_stats(self) -> TrackerStats:
        """Lifetime and current tracking statistics."""
        return compute_stats(self.state.history, self.state.next_id, len(self.players))

    def get_player_history(self) -> List[PlayerSummary]:
        """Per-player summaries of the history log, by ascending id."""
        return summarize_history(self.state.history, self.players)

    def _filter_detections(self, detections: Iterable[DetectionLike]) -> List[Detection]:
        valid = []
        for det in detections:
            if isinstance(det, dict):
                try:
                    det = Detection.from_dict(det)
                except ValueError as e:
                    self._drop(f"unparseable detection ({e})")
                    continue
            elif not isinstance(det, Detection):
                self._drop(f"object of type {type(det).__name__}")
                continue

            try:
                ok = det.is_valid()
            except (TypeError, AttributeError, ValueError) as e:
                self._drop(f"malformed detection ({e})")
                continue

            if not ok:
                self._drop(f"invalid detection {det.bbox}, confidence={det.confidence}")
                continue

            valid.append(det)
        return valid

    def _drop(self, reason: str):
        self.state.dropped_detections += 1
        logger.debug(f"Dropped {reason}")

    def _create_player(self, detection: Detection, time: float) -> Player:
        player_id = self.state.next_id
        self.state.next_id += 1

        player = Player(player_id, detection, time, self.config.history_length)
        self.players[player_id] = player
        self._record(player_id, HistoryAction.FIRST_DETECTED, time, detection)
        return player

    def _record(self, player_id: int, action: str, time: float,
                detection: Detection):
        self.state.history.append(
            HistoryEvent(player_id, action, time, detection.position)
        )

    def __len__(self) -> int:
        return len(self.players)

    def __getitem__(self, player_id: int) -> Player:
        return self.players[player_id]

    def items(self):
        return self.players.items()

    def values(self):
        return self.players.values()
