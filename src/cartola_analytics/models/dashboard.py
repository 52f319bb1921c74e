"""
Dashboard response models.

Every model here is a read-only projection recomputed per request.
Values are not rounded; display rounding belongs to the presentation layer.
"""

from pydantic import BaseModel, Field

from cartola_analytics.models.records import TeamInfo


class PointsSeriesEntry(BaseModel):
    """Points scored in a round and the trailing moving average."""

    round: int
    points: float | None = None
    moving_avg: float | None = None


class AssetValueSeriesEntry(BaseModel):
    round: int
    asset_value: float | None = None


class RoundSeries(BaseModel):
    """Fully materialized per-round series for the whole season."""

    points: list[PointsSeriesEntry] = Field(default_factory=list)
    asset_value: list[AssetValueSeriesEntry] = Field(default_factory=list)


class PositionAverage(BaseModel):
    """Average points for one position (or the captain row)."""

    position_id: int
    position: str
    n: int = 0
    avg_points: float | None = None


class EfficiencyRow(BaseModel):
    position_id: int
    position: str
    n: int = 0
    ok: int = 0
    rate: float | None = Field(default=None, description="ok / n, None when n is 0")


class EfficiencyTable(BaseModel):
    """Per-position efficiency rows plus an independently computed total."""

    by_position: list[EfficiencyRow] = Field(default_factory=list)
    total: EfficiencyRow


class ScoutPoints(BaseModel):
    """Points contributed by one scout action across the season."""

    scout: str
    points: float


class StarPlayer(BaseModel):
    """Best contributor for a position."""

    position_id: int
    position: str
    player_id: int | None = None
    player_name: str = Field(default="", description="Empty when nobody played the position")
    club_id: int | None = None
    club_badge_url: str | None = None
    total_points: float | None = None
    appearances: int = 0
    avg_points: float | None = None


class DashboardMetrics(BaseModel):
    avg_points_by_position: list[PositionAverage] = Field(default_factory=list)
    sg_efficiency: EfficiencyTable
    offensive_efficiency: EfficiencyTable
    points_by_scout: list[ScoutPoints] = Field(default_factory=list)
    star_players: list[StarPlayer] = Field(default_factory=list)


class DashboardFilters(BaseModel):
    is_home: bool | None = None


class DashboardTotals(BaseModel):
    points_total: float = 0.0
    asset_value_current: float | None = None


class DashboardResponse(BaseModel):
    """Everything the team dashboard needs in one payload."""

    team_id: int
    team: TeamInfo
    filters: DashboardFilters
    totals: DashboardTotals
    series: RoundSeries
    metrics: DashboardMetrics
