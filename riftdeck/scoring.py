"""Player stat scoring and multiplier resolution."""

import math
from typing import Dict, Optional, Tuple

from .config import get_config
from .models import Multiplier, PlayerStats
from .schemas import ScoringConfig


def score_player_stats(
    player: PlayerStats, config: Optional[ScoringConfig] = None
) -> Tuple[int, Dict[str, int]]:
    """
    Score a player's match statistics.

    Scoring (defaults):
        - Kills: 3 points each
        - Assists: 2 points each
        - Deaths: -1 point each
        - Creep score: 1 point per 10 CS (rounded down)
        - Gold: 1 point per 500 gold (rounded down)

    Args:
        player: Live player record
        config: Scoring weights (default: get_config())

    Returns:
        (points, breakdown) where breakdown holds each non-zero contribution
    """
    config = config or get_config()
    breakdown = {}

    kill_pts = (player.kills or 0) * config.kill_points
    assist_pts = (player.assists or 0) * config.assist_points
    death_pts = -(player.deaths or 0) * config.death_penalty
    cs_pts = math.floor((player.cs or 0) / config.cs_per_point)
    gold_pts = math.floor((player.gold or 0) / config.gold_per_point)

    for key, pts in (
        ('kills', kill_pts),
        ('assists', assist_pts),
        ('deaths', death_pts),
        ('cs', cs_pts),
        ('gold', gold_pts),
    ):
        if pts:
            breakdown[key] = pts

    return kill_pts + assist_pts + death_pts + cs_pts + gold_pts, breakdown


def calculate_player_score(player: PlayerStats, config: Optional[ScoringConfig] = None) -> int:
    """Base (unmultiplied) score of a player."""
    points, _ = score_player_stats(player, config)
    return points


def resolve_multiplier(
    multiplier: Optional[Multiplier], config: Optional[ScoringConfig] = None
) -> float:
    """Captain -> 2, Vice-captain -> 1.5, no label -> 1."""
    if not multiplier:
        return 1.0
    config = config or get_config()
    return config.multipliers.get(Multiplier(multiplier).value, 1.0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (94.5 -> 95, -2.5 -> -2)."""
    return math.floor(value + 0.5)
