"""
Appearance model for player re-identification using color, size and shape features.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .utils import all_finite


COLOR_WEIGHT = 0.5
SIZE_WEIGHT = 0.3
ASPECT_WEIGHT = 0.2


@dataclass
class FeatureVector:
    """
    Appearance descriptor of a detection or a track.

    Attributes:
        color: Dominant (r, g, b) color, each channel conventionally 0-255
        size: Normalized scale factor
        aspect_ratio: Width / height ratio
    """

    color: Tuple[float, float, float]
    size: float
    aspect_ratio: float

    def __post_init__(self):
        if len(self.color) != 3:
            raise ValueError(f"color must have 3 channels, got {len(self.color)}")
        self.color = tuple(float(c) for c in self.color)
        self.size = float(self.size)
        self.aspect_ratio = float(self.aspect_ratio)

    @classmethod
    def from_dict(cls, data: dict) -> "FeatureVector":
        """
        Build a feature vector from the upstream dict shape.

        Accepts either ``dominantColor`` or ``color`` for the color triple and
        either ``aspectRatio`` or ``aspect_ratio``.

        Raises:
            ValueError: If a field is missing or not numeric
        """
        color = data.get("dominantColor", data.get("color"))
        aspect = data.get("aspectRatio", data.get("aspect_ratio"))
        size = data.get("size")

        if color is None or aspect is None or size is None:
            raise ValueError(f"Incomplete feature description: {sorted(data)}")

        try:
            return cls(color=tuple(color), size=size, aspect_ratio=aspect)
        except TypeError as e:
            raise ValueError(f"Non-numeric feature value: {e}") from e

    def as_array(self) -> np.ndarray:
        """All five values as [r, g, b, size, aspect_ratio]."""
        return np.array([*self.color, self.size, self.aspect_ratio], dtype=np.float64)

    def is_finite(self) -> bool:
        return all_finite(self.as_array())

    def copy(self) -> "FeatureVector":
        return FeatureVector(color=self.color, size=self.size,
                             aspect_ratio=self.aspect_ratio)


def color_similarity(color1: Tuple[float, float, float],
                     color2: Tuple[float, float, float]) -> float:
    """
    Compute color similarity as one minus the mean normalized channel difference.

    Args:
        color1: First (r, g, b) color
        color2: Second (r, g, b) color

    Returns:
        Similarity (1 = identical, 0 = opposite corners of the RGB cube)
    """
    diff = np.abs(np.asarray(color1, dtype=np.float64) -
                  np.asarray(color2, dtype=np.float64)) / 255.0
    return 1.0 - float(np.mean(diff))


def feature_similarity(features1: FeatureVector,
                       features2: FeatureVector) -> float:
    """
    Compute weighted appearance similarity between two feature vectors.

    Args:
        features1: First feature vector
        features2: Second feature vector

    Returns:
        Similarity in [0, 1] for channels within 0-255
    """
    color_sim = color_similarity(features1.color, features2.color)

    size_diff = abs(features1.size - features2.size)
    size_sim = max(0.0, 1.0 - size_diff)

    aspect_diff = abs(features1.aspect_ratio - features2.aspect_ratio)
    aspect_sim = max(0.0, 1.0 - aspect_diff * 2.0)

    return color_sim * COLOR_WEIGHT + size_sim * SIZE_WEIGHT + aspect_sim * ASPECT_WEIGHT


def smooth_features(current: FeatureVector,
                    incoming: FeatureVector,
                    alpha: float = 0.3) -> FeatureVector:
    """
    Smooth a feature vector toward a new observation with an exponential moving average.

    Args:
        current: Feature vector held by the track
        incoming: Feature vector of the matched detection
        alpha: Weight of the incoming observation (higher = faster adaptation)

    Returns:
        New smoothed feature vector
    """
    smoothed = current.as_array() * (1 - alpha) + incoming.as_array() * alpha
    return FeatureVector(
        color=tuple(smoothed[:3]),
        size=smoothed[3],
        aspect_ratio=smoothed[4],
    )
