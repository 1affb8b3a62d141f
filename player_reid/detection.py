"""
Per-frame detection input and tracked-object output types.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .appearance import FeatureVector
from .utils import all_finite


@dataclass
class Detection:
    """
    One observed object in one frame, as produced by the upstream detector.

    Position is the top-left corner of the bounding box.
    """

    x: float
    y: float
    width: float
    height: float
    confidence: float
    features: FeatureVector

    def __post_init__(self):
        if isinstance(self.features, dict):
            self.features = FeatureVector.from_dict(self.features)

    @classmethod
    def from_dict(cls, data: dict) -> "Detection":
        """
        Build a detection from the upstream dict shape
        ``{x, y, width, height, confidence, features: {...}}``.

        Raises:
            ValueError: If a field is missing or malformed
        """
        try:
            features = data["features"]
            if not isinstance(features, FeatureVector):
                features = FeatureVector.from_dict(features)
            return cls(
                x=float(data["x"]),
                y=float(data["y"]),
                width=float(data["width"]),
                height=float(data["height"]),
                confidence=float(data["confidence"]),
                features=features,
            )
        except KeyError as e:
            raise ValueError(f"Detection is missing field {e}") from e
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Malformed detection: {e}") from e

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def bbox(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)

    def is_valid(self) -> bool:
        """
        Check the detection against the upstream contract.

        Returns:
            False for non-finite numbers, negative extent or
            confidence outside [0, 1]
        """
        if not all_finite(self.bbox + (self.confidence,)):
            return False
        if self.width < 0 or self.height < 0:
            return False
        if not 0.0 <= self.confidence <= 1.0:
            return False
        return self.features.is_finite()


DetectionLike = Union[Detection, dict]


@dataclass
class TrackedObject:
    """One identity-tagged object reported for the current frame."""

    id: int
    bbox: Tuple[float, float, float, float]
    confidence: float
    status: str

    @classmethod
    def from_detection(cls, player_id: int, detection: Detection,
                       status: str) -> "TrackedObject":
        return cls(
            id=player_id,
            bbox=detection.bbox,
            confidence=detection.confidence,
            status=status,
        )

    def to_dict(self) -> dict:
        """Renderer-facing dict with a named bbox."""
        x, y, w, h = self.bbox
        return {
            "id": self.id,
            "bbox": {"x": x, "y": y, "width": w, "height": h},
            "confidence": self.confidence,
            "status": self.status,
        }
