"""
Drill-down API Routes

Endpoints listing the picks behind the efficiency cards.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Query

from cartola_analytics.api.dependencies import DrilldownServiceDep, IsHomeQuery, http_error
from cartola_analytics.errors import CartolaAnalyticsError
from cartola_analytics.models import DrilldownResponse

router = APIRouter()

TeamIdPath = Annotated[str, Path(description="Cartola team ID")]


@router.get(
    "/{team_id}/offense",
    response_model=DrilldownResponse,
    summary="Offensive drill-down",
    description="Line-player picks and whether each had a goal or an assist.",
)
async def get_offense_drilldown(
    service: DrilldownServiceDep,
    team_id: TeamIdPath,
    pos: Annotated[str, Query(description="ATA, MEI, LAT, ZAG or TOT")] = "TOT",
    is_home: IsHomeQuery = None,
) -> DrilldownResponse:
    """List the picks behind an offensive efficiency card."""
    try:
        return await service.offense(team_id, pos, is_home)
    except CartolaAnalyticsError as e:
        raise http_error(e)


@router.get(
    "/{team_id}/sg",
    response_model=DrilldownResponse,
    summary="Clean-sheet drill-down",
    description="Defender picks and whether each kept a clean sheet.",
)
async def get_clean_sheet_drilldown(
    service: DrilldownServiceDep,
    team_id: TeamIdPath,
    pos: Annotated[str, Query(description="GOL, LAT, ZAG or TOT")] = "TOT",
    is_home: IsHomeQuery = None,
) -> DrilldownResponse:
    """List the picks behind a clean-sheet efficiency card."""
    try:
        return await service.clean_sheets(team_id, pos, is_home)
    except CartolaAnalyticsError as e:
        raise http_error(e)
