"""
Track-to-detection assignment: greedy per-track matching and an optional
global assignment with the Hungarian algorithm.
"""

import numpy as np
from scipy.optimize import linear_sum_assignment
from typing import Dict, List, Sequence, Tuple

from .appearance import feature_similarity
from .config import TrackingConfig
from .detection import Detection
from .player import Player
from .utils import euclidean_distance


INVALID_COST = 1e6


def match_score(distance: float, similarity: float,
                config: TrackingConfig) -> float:
    """
    Combine position and appearance into a single cost (lower is better).

    Args:
        distance: Euclidean distance between track and detection
        similarity: Feature similarity in [0, 1]
        config: Tracking configuration holding the weights

    Returns:
        0.6 * distance + 0.4 * (1 - similarity) * 100 with default weights
    """
    return (distance * config.distance_weight +
            (1 - similarity) * config.appearance_scale * config.appearance_weight)


def pair_score(player: Player, detection: Detection,
               config: TrackingConfig) -> Tuple[float, float]:
    """
    Score a player/detection pair.

    Returns:
        (distance, score)
    """
    distance = euclidean_distance(player.last_position, detection.position)
    similarity = feature_similarity(player.features, detection.features)
    return distance, match_score(distance, similarity, config)


def greedy_match(players: Dict[int, Player],
                 detections: Sequence[Detection],
                 config: TrackingConfig) -> List[Tuple[int, int]]:
    """
    Let each player, in turn, claim its best remaining detection.

    Players are visited in dict order. A detection is eligible only while
    unclaimed and closer than config.max_distance; ties keep the lowest index.
    An earlier player can take a detection a later one needed more.

    Args:
        players: Active players by id
        detections: Valid detections for the frame
        config: Tracking configuration

    Returns:
        List of (player_id, detection_idx) pairs
    """
    matched_pairs = []
    used_detections = set()

    for player_id, player in players.items():
        best_idx = -1
        best_score = float("inf")

        for det_idx, det in enumerate(detections):
            if det_idx in used_detections:
                continue

            distance, score = pair_score(player, det, config)
            if distance < config.max_distance and score < best_score:
                best_score = score
                best_idx = det_idx

        if best_idx >= 0:
            used_detections.add(best_idx)
            matched_pairs.append((player_id, best_idx))

    return matched_pairs


def build_cost_matrix(players: Dict[int, Player],
                      detections: Sequence[Detection],
                      config: TrackingConfig) -> Tuple[
    np.ndarray, np.ndarray, List[int]
]:
    """
    Build cost matrix for the Hungarian algorithm.

    Pairs outside max_distance are marked invalid and priced above every
    valid pair, never below INVALID_COST.

    Returns:
        (cost_matrix, valid_mask, player_ids)
    """
    player_ids = list(players.keys())
    shape = (len(player_ids), len(detections))
    cost_matrix = np.zeros(shape, dtype=np.float64)
    valid = np.zeros(shape, dtype=bool)

    for pi, player_id in enumerate(player_ids):
        player = players[player_id]
        for di, det in enumerate(detections):
            distance, score = pair_score(player, det, config)
            cost_matrix[pi, di] = score
            valid[pi, di] = distance < config.max_distance

    invalid_cost = INVALID_COST
    if valid.any():
        invalid_cost = max(INVALID_COST, float(cost_matrix[valid].max()) * 10 + 1)
    cost_matrix[~valid] = invalid_cost

    return cost_matrix, valid, player_ids


def optimal_match(players: Dict[int, Player],
                  detections: Sequence[Detection],
                  config: TrackingConfig) -> List[Tuple[int, int]]:
    """
    Match players to detections with a global minimum-cost assignment.

    Uses the same gate and score as greedy_match, so under contention a
    player may end up with a detection other than its individual best.

    Returns:
        List of (player_id, detection_idx) pairs in player order
    """
    if not players or not detections:
        return []

    cost_matrix, valid, player_ids = build_cost_matrix(players, detections, config)
    row_indices, col_indices = linear_sum_assignment(cost_matrix)

    matched_pairs = []
    for row_idx, col_idx in zip(row_indices, col_indices):
        if valid[row_idx, col_idx]:
            matched_pairs.append((player_ids[row_idx], int(col_idx)))

    return matched_pairs


def match_players_to_detections(players: Dict[int, Player],
                                detections: Sequence[Detection],
                                config: TrackingConfig) -> List[Tuple[int, int]]:
    """Dispatch to the matching strategy named in the config."""
    if config.matching == "hungarian":
        return optimal_match(players, detections, config)
    return greedy_match(players, detections, config)
