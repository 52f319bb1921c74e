"""API package - FastAPI routes and dependencies."""

from cartola_analytics.api.dependencies import (
    CartolaClientDep,
    ClientManager,
    DashboardServiceDep,
    DrilldownServiceDep,
    SettingsDep,
    StoreManager,
    get_cartola_client,
    get_club_directory,
    get_dashboard_service,
    get_drilldown_service,
    get_store,
)

__all__ = [
    "ClientManager",
    "StoreManager",
    "get_cartola_client",
    "get_club_directory",
    "get_dashboard_service",
    "get_drilldown_service",
    "get_store",
    "CartolaClientDep",
    "DashboardServiceDep",
    "DrilldownServiceDep",
    "SettingsDep",
]
