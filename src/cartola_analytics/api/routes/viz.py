"""
Visualization API Routes

Endpoints for generating interactive Plotly charts and dashboards.
All endpoints return HTML content for embedding or viewing directly.
"""

from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.responses import HTMLResponse

from cartola_analytics.api.dependencies import DashboardServiceDep, IsHomeQuery, http_error
from cartola_analytics.errors import CartolaAnalyticsError
from cartola_analytics.models import DashboardResponse
from cartola_analytics.services.dashboard import DashboardService
from cartola_analytics.visualization import charts

router = APIRouter()

TeamIdPath = Annotated[str, Path(description="Cartola team ID")]


async def _load(
    service: DashboardService, team_id: str, is_home: bool | None
) -> DashboardResponse:
    try:
        return await service.get_dashboard(team_id, is_home)
    except CartolaAnalyticsError as e:
        raise http_error(e)


@router.get(
    "/{team_id}/points",
    response_class=HTMLResponse,
    summary="Points chart",
    description="Points per round with the 3-round moving average.",
)
async def get_points_chart(
    service: DashboardServiceDep, team_id: TeamIdPath
) -> HTMLResponse:
    """Generate the points per round chart."""
    dashboard = await _load(service, team_id, None)
    html = charts.points_series_chart(
        dashboard.series, title=f"{dashboard.team.name or team_id} - Points per Round"
    )
    return HTMLResponse(content=html)


@router.get(
    "/{team_id}/asset-value",
    response_class=HTMLResponse,
    summary="Asset value chart",
    description="Team asset value (patrimônio) per round.",
)
async def get_asset_value_chart(
    service: DashboardServiceDep, team_id: TeamIdPath
) -> HTMLResponse:
    """Generate the asset value chart."""
    dashboard = await _load(service, team_id, None)
    return HTMLResponse(content=charts.asset_value_chart(dashboard.series))


@router.get(
    "/{team_id}/scouts",
    response_class=HTMLResponse,
    summary="Scout points chart",
    description="Points contributed by each scout action.",
)
async def get_scouts_chart(
    service: DashboardServiceDep, team_id: TeamIdPath, is_home: IsHomeQuery = None
) -> HTMLResponse:
    """Generate the scout points chart."""
    dashboard = await _load(service, team_id, is_home)
    return HTMLResponse(content=charts.scout_points_chart(dashboard.metrics.points_by_scout))


@router.get(
    "/{team_id}/efficiency",
    response_class=HTMLResponse,
    summary="Efficiency chart",
    description="Clean-sheet and goal/assist rates per position.",
)
async def get_efficiency_chart(
    service: DashboardServiceDep, team_id: TeamIdPath, is_home: IsHomeQuery = None
) -> HTMLResponse:
    """Generate the efficiency chart."""
    dashboard = await _load(service, team_id, is_home)
    html = charts.efficiency_chart(
        dashboard.metrics.sg_efficiency, dashboard.metrics.offensive_efficiency
    )
    return HTMLResponse(content=html)


@router.get(
    "/{team_id}/dashboard",
    response_class=HTMLResponse,
    summary="Full dashboard",
    description="Complete HTML dashboard with every chart.",
)
async def get_dashboard_page(
    service: DashboardServiceDep, team_id: TeamIdPath, is_home: IsHomeQuery = None
) -> HTMLResponse:
    """Generate the full dashboard page."""
    dashboard = await _load(service, team_id, is_home)
    return HTMLResponse(content=charts.generate_dashboard(dashboard))
