from __future__ import annotations

from player_reid import SessionProcessor, SimulatedDetector, SimulationConfig, TrackingConfig


def test_detector_is_reproducible_with_seed() -> None:
    config = SimulationConfig(seed=42)
    first = SimulatedDetector(config)
    second = SimulatedDetector(config)

    for frame_idx in range(5):
        assert first.detect(frame_idx) == second.detect(frame_idx)


def test_detections_respect_contract() -> None:
    config = SimulationConfig(seed=1, width=640, height=480)
    detector = SimulatedDetector(config)

    for frame_idx in range(50):
        detections = detector.detect(frame_idx)
        assert len(detections) <= config.min_players + config.player_spread - 1
        for d in detections:
            assert d.is_valid()
            assert 0 <= d.x <= 640 - 50
            assert 0 <= d.y <= 480 - 80
            assert 0.7 <= d.confidence <= 1.0
            assert 0.75 <= d.features.size <= 1.25
            assert 0.6 <= d.features.aspect_ratio <= 0.8
            assert d.features.color in [tuple(float(c) for c in p) for p in config.palette]


def test_session_runs_to_completion() -> None:
    processor = SessionProcessor(
        TrackingConfig(),
        SimulationConfig(seed=3, frame_count=60, progress_every=0),
        verbose=False,
    )

    stats = processor.process()

    assert stats.total_players >= 1
    assert stats.active_players <= stats.total_players
    assert stats.accuracy == 100.0
    assert processor.tracker.dropped_detections == 0


def test_session_with_hungarian_matching() -> None:
    processor = SessionProcessor(
        TrackingConfig(matching="hungarian"),
        SimulationConfig(seed=3, frame_count=30, progress_every=10),
        verbose=False,
    )

    stats = processor.process()

    assert stats.total_players >= 1
    assert len(processor.tracker.get_player_history()) == stats.total_players
