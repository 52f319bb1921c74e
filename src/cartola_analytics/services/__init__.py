"""Analytics engine and business logic services."""

from cartola_analytics.services.efficiency import defensive_efficiency, offensive_efficiency
from cartola_analytics.services.normalization import normalize_picks, normalize_rounds
from cartola_analytics.services.positions import average_points_by_position
from cartola_analytics.services.scouts import (
    CANONICAL_SCOUT_WEIGHTS,
    LEGACY_SCOUT_WEIGHTS,
    ScoutWeightTable,
    score_scouts,
)
from cartola_analytics.services.series import build_round_series
from cartola_analytics.services.stars import attach_badges, rank_star_players

__all__ = [
    # Normalization
    "normalize_picks",
    "normalize_rounds",
    # Series
    "build_round_series",
    # Positions
    "average_points_by_position",
    # Efficiency
    "defensive_efficiency",
    "offensive_efficiency",
    # Scouts
    "CANONICAL_SCOUT_WEIGHTS",
    "LEGACY_SCOUT_WEIGHTS",
    "ScoutWeightTable",
    "score_scouts",
    # Stars
    "attach_badges",
    "rank_star_players",
]
