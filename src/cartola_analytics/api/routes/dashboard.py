"""
Dashboard API Routes

Endpoint for a team's season dashboard.
"""

from typing import Annotated

from fastapi import APIRouter, Path

from cartola_analytics.api.dependencies import DashboardServiceDep, IsHomeQuery, http_error
from cartola_analytics.errors import CartolaAnalyticsError
from cartola_analytics.models import DashboardResponse

router = APIRouter()


@router.get(
    "/{team_id}",
    response_model=DashboardResponse,
    summary="Get team dashboard",
    description=(
        "Season series, positional averages, efficiency tables, scout points "
        "and star players for an imported team."
    ),
)
async def get_dashboard(
    service: DashboardServiceDep,
    team_id: Annotated[str, Path(description="Cartola team ID")],
    is_home: IsHomeQuery = None,
) -> DashboardResponse:
    """Get the dashboard for a team."""
    try:
        return await service.get_dashboard(team_id, is_home)
    except CartolaAnalyticsError as e:
        raise http_error(e)
