from __future__ import annotations

import math

import pytest

from helpers import BLACK, GRAY, WHITE, features
from player_reid.appearance import (
    FeatureVector, color_similarity, feature_similarity, smooth_features
)


def test_identical_features_are_fully_similar() -> None:
    f = features(color=(30, 60, 90), size=1.1, aspect_ratio=0.65)

    assert feature_similarity(f, f.copy()) == pytest.approx(1.0)


def test_opposite_colors_leave_only_shape_terms() -> None:
    assert feature_similarity(features(BLACK), features(WHITE)) == pytest.approx(0.5)


def test_similarity_terms_floor_at_zero() -> None:
    f1 = features(BLACK, size=0.5, aspect_ratio=0.2)
    f2 = features(WHITE, size=2.0, aspect_ratio=1.0)

    assert feature_similarity(f1, f2) == pytest.approx(0.0)


def test_similarity_weights() -> None:
    f1 = features((100, 100, 100), size=1.0, aspect_ratio=0.7)
    f2 = features((151, 100, 100), size=1.5, aspect_ratio=0.8)

    color_sim = 1 - (51 / 255) / 3
    expected = 0.5 * color_sim + 0.3 * 0.5 + 0.2 * 0.8
    assert feature_similarity(f1, f2) == pytest.approx(expected)


def test_similarity_is_symmetric() -> None:
    f1 = features((12, 200, 45), size=0.9, aspect_ratio=0.61)
    f2 = features((80, 10, 130), size=1.3, aspect_ratio=0.77)

    assert feature_similarity(f1, f2) == feature_similarity(f2, f1)


def test_color_similarity_midpoint() -> None:
    assert color_similarity(BLACK, GRAY) == pytest.approx(1 - 128 / 255)


def test_smoothing_moves_toward_incoming_by_alpha() -> None:
    current = features((0, 100, 200), size=1.0, aspect_ratio=0.5)
    incoming = features((100, 100, 100), size=2.0, aspect_ratio=1.0)

    smoothed = smooth_features(current, incoming, alpha=0.3)

    assert smoothed.color == pytest.approx((30, 100, 170))
    assert smoothed.size == pytest.approx(1.3)
    assert smoothed.aspect_ratio == pytest.approx(0.65)
    # Inputs are left untouched
    assert current.color == (0.0, 100.0, 200.0)


def test_from_dict_accepts_both_key_styles() -> None:
    a = FeatureVector.from_dict({"dominantColor": [1, 2, 3], "size": 1, "aspectRatio": 0.7})
    b = FeatureVector.from_dict({"color": (1, 2, 3), "size": 1.0, "aspect_ratio": 0.7})

    assert a == b
    assert a.color == (1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    "data",
    [
        {"size": 1, "aspectRatio": 0.7},
        {"dominantColor": [1, 2, 3], "aspectRatio": 0.7},
        {"dominantColor": [1, 2], "size": 1, "aspectRatio": 0.7},
        {"dominantColor": 7, "size": 1, "aspectRatio": 0.7},
        {"dominantColor": [1, 2, 3], "size": None, "aspectRatio": 0.7},
    ],
)
def test_from_dict_rejects_malformed_input(data: dict) -> None:
    with pytest.raises(ValueError):
        FeatureVector.from_dict(data)


def test_is_finite() -> None:
    assert features().is_finite()
    assert not features(color=(0, math.inf, 0)).is_finite()
    assert not features(aspect_ratio=math.nan).is_finite()
