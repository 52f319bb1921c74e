"""
Team API Routes

Endpoints for finding Cartola teams.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from cartola_analytics.api.dependencies import CartolaClientDep, http_error
from cartola_analytics.errors import CartolaAnalyticsError
from cartola_analytics.models import TeamSearchResult

router = APIRouter()


@router.get(
    "/search",
    response_model=list[TeamSearchResult],
    summary="Search teams",
    description="Search Cartola teams by name. Queries shorter than 2 characters return nothing.",
)
async def search_teams(
    client: CartolaClientDep,
    q: Annotated[str, Query(description="Team name")] = "",
) -> list[TeamSearchResult]:
    """Search teams on Cartola."""
    try:
        return await client.search_teams(q)
    except CartolaAnalyticsError as e:
        raise http_error(e)
