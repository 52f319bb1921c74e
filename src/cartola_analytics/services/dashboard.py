"""
Team Dashboard Service

Loads a team's imported rounds and picks, runs the analytics engine over
them and assembles the dashboard payload.
"""

import asyncio
import logging
from collections.abc import Awaitable, Iterable
from typing import Any, TypeVar

from cartola_analytics.clients.store import ClubDirectory, TeamDataStore
from cartola_analytics.config import Settings
from cartola_analytics.errors import (
    DataSourceError,
    InvalidRequestError,
    TeamNotFoundError,
)
from cartola_analytics.models import (
    Club,
    DashboardFilters,
    DashboardMetrics,
    DashboardResponse,
    DashboardTotals,
    PickRecord,
    StarPlayer,
)
from cartola_analytics.services.efficiency import defensive_efficiency, offensive_efficiency
from cartola_analytics.services.normalization import (
    as_int,
    normalize_picks,
    normalize_rounds,
    normalize_team,
)
from cartola_analytics.services.positions import average_points_by_position
from cartola_analytics.services.scouts import (
    CANONICAL_SCOUT_WEIGHTS,
    SCOUT_EPSILON,
    ScoutWeightTable,
    score_scouts,
    scout_table_from_settings,
)
from cartola_analytics.services.series import (
    MOVING_AVERAGE_WINDOW,
    SEASON_ROUNDS,
    build_round_series,
    current_asset_value,
    season_points_total,
)
from cartola_analytics.services.stars import attach_badges, club_ids_for, rank_star_players

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_team_id(team_id: Any) -> int:
    """
    Check that a team id is a positive integer.

    Raises:
        InvalidRequestError: If the id is missing or malformed
    """
    value = as_int(team_id)
    if value is None or value <= 0:
        raise InvalidRequestError(f"missing/invalid team_id: {team_id!r}")
    return value


async def read_source(call: Awaitable[T], what: str) -> T:
    """Await a store call, reporting any failure as a DataSourceError."""
    try:
        return await call
    except DataSourceError:
        raise
    except Exception as e:
        raise DataSourceError(f"Failed to load {what}: {e}") from e


async def lookup_clubs(directory: ClubDirectory, club_ids: Iterable[int]) -> dict[int, Club]:
    """Batched best-effort club lookup; an unavailable directory yields no clubs."""
    club_ids = set(club_ids)
    if not club_ids:
        return {}
    try:
        return await directory.get_clubs(club_ids)
    except DataSourceError as e:
        logger.warning("Club lookup failed for %d clubs: %s", len(club_ids), e)
        return {}


def compute_metrics(
    picks: list[PickRecord],
    scout_weights: ScoutWeightTable = CANONICAL_SCOUT_WEIGHTS,
    scout_epsilon: float = SCOUT_EPSILON,
) -> DashboardMetrics:
    """
    Run every pick-based metric over the same pick list.

    Star players come back without badges; see DashboardService.

    Args:
        picks: Normalized picks, venue-filtered once by the caller
        scout_weights: Points per scout occurrence
        scout_epsilon: Smallest absolute scout total worth reporting

    Returns:
        DashboardMetrics bundle
    """
    return DashboardMetrics(
        avg_points_by_position=average_points_by_position(picks),
        sg_efficiency=defensive_efficiency(picks),
        offensive_efficiency=offensive_efficiency(picks),
        points_by_scout=score_scouts(picks, scout_weights, scout_epsilon),
        star_players=rank_star_players(picks),
    )


class DashboardService:
    """
    Service for building a team's season dashboard.

    Provides methods to:
    - Build the 38-round points / moving average / asset value series
    - Compute positional averages and efficiency tables
    - Attribute points to scout actions
    - Pick the star player of each position
    """

    def __init__(
        self,
        store: TeamDataStore,
        clubs: ClubDirectory,
        scout_weights: ScoutWeightTable = CANONICAL_SCOUT_WEIGHTS,
        season_rounds: int = SEASON_ROUNDS,
        moving_average_window: int = MOVING_AVERAGE_WINDOW,
        scout_epsilon: float = SCOUT_EPSILON,
    ):
        self.store = store
        self.clubs = clubs
        self.scout_weights = scout_weights
        self.season_rounds = season_rounds
        self.moving_average_window = moving_average_window
        self.scout_epsilon = scout_epsilon

    @classmethod
    def from_settings(
        cls, store: TeamDataStore, clubs: ClubDirectory, settings: Settings
    ) -> "DashboardService":
        return cls(
            store,
            clubs,
            scout_weights=scout_table_from_settings(settings),
            season_rounds=settings.season_rounds,
            moving_average_window=settings.moving_average_window,
            scout_epsilon=settings.scout_epsilon,
        )

    async def get_dashboard(
        self, team_id: Any, is_home: bool | None = None
    ) -> DashboardResponse:
        """
        Build the dashboard for a team.

        The home/away filter is applied once, when loading picks, so every
        pick-based metric sees the same filtered list. Round series and totals
        always cover the whole season.

        Args:
            team_id: Fantasy team id
            is_home: Restrict pick metrics to home (True) or away (False) games

        Returns:
            DashboardResponse

        Raises:
            InvalidRequestError: If the team id is malformed
            TeamNotFoundError: If the team was never imported
            DataSourceError: If a store fails to answer
        """
        team_id = validate_team_id(team_id)

        results = await asyncio.gather(
            read_source(self.store.get_team(team_id), "team"),
            read_source(self.store.get_rounds(team_id), "team rounds"),
            read_source(self.store.get_picks(team_id, is_home), "picks"),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                raise result
        team_row, round_rows, pick_rows = results

        if team_row is None:
            raise TeamNotFoundError(team_id)

        rounds = normalize_rounds(round_rows, self.season_rounds)
        picks = normalize_picks(pick_rows)

        metrics = compute_metrics(picks, self.scout_weights, self.scout_epsilon)
        metrics.star_players = await self._resolve_badges(metrics.star_players)

        return DashboardResponse(
            team_id=team_id,
            team=normalize_team(team_row, team_id),
            filters=DashboardFilters(is_home=is_home),
            totals=DashboardTotals(
                points_total=season_points_total(rounds),
                asset_value_current=current_asset_value(rounds),
            ),
            series=build_round_series(
                rounds, self.season_rounds, self.moving_average_window
            ),
            metrics=metrics,
        )

    async def _resolve_badges(self, stars: list[StarPlayer]) -> list[StarPlayer]:
        clubs = await lookup_clubs(self.clubs, club_ids_for(stars))
        return attach_badges(stars, clubs)
