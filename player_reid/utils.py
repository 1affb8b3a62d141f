"""
Utility functions for positions and numeric validation.
"""

import math
import numpy as np
from typing import Iterable, Tuple


def euclidean_distance(pos1: Tuple[float, float],
                       pos2: Tuple[float, float]) -> float:
    """
    Calculate Euclidean distance between two points.

    Args:
        pos1: (x, y) first point
        pos2: (x, y) second point

    Returns:
        Distance in the same units as the inputs
    """
    dx = pos1[0] - pos2[0]
    dy = pos1[1] - pos2[1]
    return math.sqrt(dx * dx + dy * dy)


def all_finite(values: Iterable[float]) -> bool:
    """
    Check that every value is a finite real number.

    Args:
        values: Numbers to check

    Returns:
        True if none is NaN or infinite
    """
    try:
        arr = np.asarray(list(values), dtype=np.float64)
    except (TypeError, ValueError):
        return False
    return bool(np.all(np.isfinite(arr)))
