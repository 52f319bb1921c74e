"""
API Dependencies

Shared dependencies for FastAPI route handlers: client and store lifecycle,
service construction and error translation.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Query

from cartola_analytics.clients.cartola import CartolaClient, CartolaClubDirectory
from cartola_analytics.clients.store import ClubDirectory, SnapshotStore, TeamDataStore
from cartola_analytics.config import Settings, get_settings
from cartola_analytics.errors import (
    CartolaAnalyticsError,
    DataSourceError,
    InvalidRequestError,
    TeamNotFoundError,
)
from cartola_analytics.services.dashboard import DashboardService
from cartola_analytics.services.drilldown import DrilldownService


class ClientManager:
    """
    Manages CartolaClient lifecycle for the application.

    Creates a single client instance that can be reused across requests.
    """

    _client: CartolaClient | None = None

    @classmethod
    async def get_client(cls) -> CartolaClient:
        """Get or create the CartolaClient instance."""
        if cls._client is None:
            cls._client = CartolaClient()
            await cls._client.__aenter__()
        return cls._client

    @classmethod
    async def close_client(cls) -> None:
        """Close the CartolaClient instance."""
        if cls._client is not None:
            await cls._client.__aexit__(None, None, None)
            cls._client = None


class StoreManager:
    """
    Holds the snapshot store loaded from the configured data file.

    The snapshot is loaded once, on first use.
    """

    _store: SnapshotStore | None = None

    @classmethod
    def get_store(cls, settings: Settings) -> SnapshotStore:
        if cls._store is None:
            if settings.data_file is None:
                cls._store = SnapshotStore()
            else:
                cls._store = SnapshotStore.from_file(settings.data_file)
        return cls._store

    @classmethod
    def reset(cls) -> None:
        cls._store = None


def http_error(error: CartolaAnalyticsError) -> HTTPException:
    """Translate a service error into the matching HTTP error."""
    if isinstance(error, InvalidRequestError):
        return HTTPException(status_code=400, detail=error.message)
    if isinstance(error, TeamNotFoundError):
        return HTTPException(status_code=404, detail=error.message)
    if isinstance(error, DataSourceError):
        return HTTPException(status_code=502, detail=error.message)
    return HTTPException(status_code=500, detail=error.message)


async def get_cartola_client() -> CartolaClient:
    """Dependency to get the CartolaClient."""
    return await ClientManager.get_client()


def get_store(settings: Annotated[Settings, Depends(get_settings)]) -> TeamDataStore:
    """Dependency to get the team data store."""
    try:
        return StoreManager.get_store(settings)
    except DataSourceError as e:
        raise http_error(e)


async def get_club_directory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ClubDirectory:
    """Dependency to get the club directory configured by CARTOLA_CLUB_SOURCE."""
    if settings.club_source == "cartola":
        return CartolaClubDirectory(await get_cartola_client())
    return get_store(settings)  # type: ignore[return-value]


def get_dashboard_service(
    store: Annotated[TeamDataStore, Depends(get_store)],
    clubs: Annotated[ClubDirectory, Depends(get_club_directory)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> DashboardService:
    """Dependency to build the DashboardService."""
    return DashboardService.from_settings(store, clubs, settings)


def get_drilldown_service(
    store: Annotated[TeamDataStore, Depends(get_store)],
    clubs: Annotated[ClubDirectory, Depends(get_club_directory)],
) -> DrilldownService:
    """Dependency to build the DrilldownService."""
    return DrilldownService(store, clubs)


# Type aliases for cleaner route signatures
CartolaClientDep = Annotated[CartolaClient, Depends(get_cartola_client)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
DrilldownServiceDep = Annotated[DrilldownService, Depends(get_drilldown_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Common query parameters
IsHomeQuery = Annotated[
    bool | None,
    Query(description="Only home (true) or away (false) games; omit for all"),
]
