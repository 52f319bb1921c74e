"""Pydantic models and schemas."""

from cartola_analytics.models.dashboard import (
    AssetValueSeriesEntry,
    DashboardFilters,
    DashboardMetrics,
    DashboardResponse,
    DashboardTotals,
    EfficiencyRow,
    EfficiencyTable,
    PointsSeriesEntry,
    PositionAverage,
    RoundSeries,
    ScoutPoints,
    StarPlayer,
)
from cartola_analytics.models.drilldown import DrilldownResponse, DrilldownRow
from cartola_analytics.models.records import (
    CAPTAIN_ROW_ID,
    CAPTAIN_ROW_LABEL,
    KNOWN_POSITION_IDS,
    TOTAL_ROW_ID,
    TOTAL_ROW_LABEL,
    Club,
    PickRecord,
    Position,
    RoundRecord,
    TeamInfo,
    position_label,
)
from cartola_analytics.models.team import TeamSearchResult

__all__ = [
    # Records
    "CAPTAIN_ROW_ID",
    "CAPTAIN_ROW_LABEL",
    "KNOWN_POSITION_IDS",
    "TOTAL_ROW_ID",
    "TOTAL_ROW_LABEL",
    "Club",
    "PickRecord",
    "Position",
    "RoundRecord",
    "TeamInfo",
    "position_label",
    # Dashboard
    "AssetValueSeriesEntry",
    "DashboardFilters",
    "DashboardMetrics",
    "DashboardResponse",
    "DashboardTotals",
    "EfficiencyRow",
    "EfficiencyTable",
    "PointsSeriesEntry",
    "PositionAverage",
    "RoundSeries",
    "ScoutPoints",
    "StarPlayer",
    # Drilldown
    "DrilldownResponse",
    "DrilldownRow",
    # Team search
    "TeamSearchResult",
]
