"""
History log entries and the summaries derived from them.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .config import HistoryAction, PlayerStatus
from .player import Player


@dataclass(frozen=True)
class HistoryEvent:
    """Append-only record of a first detection or re-identification."""
    player_id: int
    action: str
    time: float
    position: Tuple[float, float]


@dataclass
class PlayerSummary:
    id: int
    first_seen: float
    last_seen: float
    total_detections: int
    reidentifications: int
    status: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "firstSeen": self.first_seen,
            "lastSeen": self.last_seen,
            "totalDetections": self.total_detections,
            "reidentifications": self.reidentifications,
            "status": self.status,
        }


@dataclass
class TrackerStats:
    total_players: int
    active_players: int
    reidentifications: int
    accuracy: float

    def to_dict(self) -> dict:
        return {
            "totalPlayers": self.total_players,
            "activePlayers": self.active_players,
            "reidentifications": self.reidentifications,
            "accuracy": self.accuracy,
        }


def count_reidentifications(events: Sequence[HistoryEvent]) -> int:
    return sum(1 for e in events if e.action == HistoryAction.REIDENTIFIED)


def compute_stats(events: Sequence[HistoryEvent], next_id: int,
                  active_players: int) -> TrackerStats:
    """
    Aggregate tracker statistics.

    Accuracy is the share of events that are not 'lost', as a percentage
    rounded to one decimal, or 0.0 without events.

    Args:
        events: Full history log
        next_id: Next id the tracker would allocate
        active_players: Number of players currently tracked

    Returns:
        TrackerStats
    """
    total = len(events)
    successful = sum(1 for e in events if e.action != HistoryAction.LOST)
    accuracy = round(successful / total * 100, 1) if total > 0 else 0.0

    return TrackerStats(
        total_players=next_id - 1,
        active_players=active_players,
        reidentifications=count_reidentifications(events),
        accuracy=accuracy,
    )


def summarize_history(events: Sequence[HistoryEvent],
                      players: Dict[int, Player]) -> List[PlayerSummary]:
    """
    Group the history log by player and summarize each group.

    Args:
        events: Full history log
        players: Currently active players by id

    Returns:
        One PlayerSummary per player that has events, by ascending id
    """
    groups: "OrderedDict[int, List[HistoryEvent]]" = OrderedDict()
    for event in events:
        groups.setdefault(event.player_id, []).append(event)

    result = []
    for player_id, group in groups.items():
        player = players.get(player_id)
        last_seen = player.last_seen if player is not None else group[-1].time

        result.append(PlayerSummary(
            id=player_id,
            first_seen=group[0].time,
            last_seen=last_seen,
            total_detections=len(group),
            reidentifications=count_reidentifications(group),
            status=PlayerStatus.ACTIVE if player is not None else PlayerStatus.INACTIVE,
        ))

    return sorted(result, key=lambda s: s.id)
