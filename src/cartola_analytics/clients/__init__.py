"""External API clients and data stores."""

from cartola_analytics.clients.cartola import CartolaAPIError, CartolaClient, CartolaClubDirectory
from cartola_analytics.clients.store import (
    ClubDirectory,
    PickStore,
    RoundStore,
    SnapshotStore,
    TeamDataStore,
    TeamStore,
)

__all__ = [
    "CartolaClient",
    "CartolaAPIError",
    "CartolaClubDirectory",
    "ClubDirectory",
    "PickStore",
    "RoundStore",
    "SnapshotStore",
    "TeamDataStore",
    "TeamStore",
]
