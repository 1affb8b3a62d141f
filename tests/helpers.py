from __future__ import annotations

from player_reid.appearance import FeatureVector
from player_reid.detection import Detection

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)


def features(color=(10, 10, 10), size: float = 1.0, aspect_ratio: float = 0.7) -> FeatureVector:
    return FeatureVector(color=color, size=size, aspect_ratio=aspect_ratio)


def det(x: float, y: float, color=(10, 10, 10), size: float = 1.0, aspect_ratio: float = 0.7,
        width: float = 10, height: float = 10, confidence: float = 0.9) -> Detection:
    return Detection(
        x=x,
        y=y,
        width=width,
        height=height,
        confidence=confidence,
        features=features(color, size, aspect_ratio),
    )
