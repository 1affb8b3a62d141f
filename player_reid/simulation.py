"""
Simulated detector and session loop for running the tracker without video.
"""

import time
import numpy as np
from typing import List, Optional

from .appearance import FeatureVector
from .config import SimulationConfig, TrackingConfig, PlayerStatus
from .detection import Detection
from .history import TrackerStats
from .tracker import PlayerTracker


class SimulatedDetector:
    """
    Produces plausible per-frame player detections: players drift across
    the field on sine paths, occasionally drop out, and carry a jersey
    color fixed by their slot.
    """

    def __init__(self, config: SimulationConfig):
        """
        Initialize simulated detector.

        Args:
            config: Simulation configuration
        """
        self.config = config
        self.rng = np.random.default_rng(config.seed)

    def extract_features(self, slot: int) -> FeatureVector:
        """
        Simulate appearance features for a player slot.

        Args:
            slot: Player index within the frame

        Returns:
            Feature vector with the slot's jersey color
        """
        palette = self.config.palette
        return FeatureVector(
            color=palette[slot % len(palette)],
            size=self.rng.random() * 0.5 + 0.75,
            aspect_ratio=0.6 + self.rng.random() * 0.2,
        )

    def detect(self, frame_idx: int) -> List[Detection]:
        """
        Simulate detections for one frame.

        Args:
            frame_idx: Frame index

        Returns:
            List of detections
        """
        width = self.config.width
        height = self.config.height
        num_players = self.config.min_players + int(
            self.rng.integers(0, self.config.player_spread)
        )

        detections = []
        for i in range(num_players):
            base_x = (i * width / num_players) + (frame_idx * 2) % width
            base_y = height * 0.3 + np.sin(frame_idx * 0.1 + i) * height * 0.4

            x = float(np.clip(base_x + (self.rng.random() - 0.5) * 20, 0, width - 50))
            y = float(np.clip(base_y + (self.rng.random() - 0.5) * 20, 0, height - 80))

            # Players leave the frame now and then
            if self.rng.random() > self.config.visibility:
                continue

            detections.append(Detection(
                x=x,
                y=y,
                width=40 + self.rng.random() * 20,
                height=60 + self.rng.random() * 20,
                confidence=0.7 + self.rng.random() * 0.3,
                features=self.extract_features(i),
            ))

        return detections


class SessionProcessor:
    """
    Runs a full tracking session: detector -> tracker -> report.
    """

    def __init__(self, tracking_config: Optional[TrackingConfig] = None,
                 simulation_config: Optional[SimulationConfig] = None,
                 verbose: bool = True):
        self.tracking_config = tracking_config or TrackingConfig()
        self.simulation_config = simulation_config or SimulationConfig()
        self.tracker = PlayerTracker(self.tracking_config)
        self.detector = SimulatedDetector(self.simulation_config)
        self.verbose = verbose

    def _print(self, message: str = ""):
        if self.verbose:
            print(message)

    def process(self) -> TrackerStats:
        """
        Main processing loop.

        Returns:
            Final tracker statistics
        """
        cfg = self.simulation_config
        self.tracker.reset()

        self._print(f"Simulating {cfg.frame_count} frames "
                    f"({cfg.width}x{cfg.height} @ {cfg.fps:.1f} fps)")
        self._print("Processing started...\n")

        t0 = time.time()

        for frame_idx in range(cfg.frame_count):
            current_time = frame_idx / cfg.fps

            detections = self.detector.detect(frame_idx)
            tracked = self.tracker.step(detections, current_time)

            # Progress update
            if cfg.progress_every > 0 and frame_idx % cfg.progress_every == 0:
                stats = self.tracker.get_stats()
                self._print(f"Frame {frame_idx}/{cfg.frame_count} "
                            f"({100 * frame_idx / cfg.frame_count:.1f}%) - "
                            f"Detections: {len(detections)} - "
                            f"Reported: {len(tracked)} - "
                            f"Active: {stats.active_players}/{stats.total_players}")

        elapsed = time.time() - t0
        stats = self.tracker.get_stats()
        self.print_summary(stats, elapsed)
        return stats

    def print_summary(self, stats: TrackerStats, elapsed: float):
        """
        Print tracking summary statistics.

        Args:
            stats: Final statistics
            elapsed: Total processing time
        """
        fps = self.simulation_config.frame_count / elapsed if elapsed > 0 else 0.0

        self._print("\n" + "=" * 70)
        self._print(f"✓ TRACKING COMPLETED in {elapsed:.2f}s ({fps:.1f} FPS)")
        self._print(f"✓ Players: {stats.total_players} total, "
                    f"{stats.active_players} active")
        self._print(f"✓ Re-identifications: {stats.reidentifications}")
        self._print(f"✓ Accuracy: {stats.accuracy:.1f}%")
        if self.tracker.dropped_detections:
            self._print(f"⚠ Dropped detections: {self.tracker.dropped_detections}")
        self._print("\nPlayer History:")
        self._print("-" * 70)

        for summary in self.tracker.get_player_history():
            marker = "●" if summary.status == PlayerStatus.ACTIVE else "○"
            self._print(f"  {marker} ID {summary.id:3d}: "
                        f"seen {summary.first_seen:6.2f}s - {summary.last_seen:6.2f}s, "
                        f"events {summary.total_detections:3d}, "
                        f"re-ids {summary.reidentifications:3d} [{summary.status}]")

        self._print("=" * 70)
