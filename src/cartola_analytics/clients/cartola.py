"""
Async Cartola FC API Client

Read-only access to the public Cartola endpoints this service needs: the club
list (for badges) and the team search.
Uses httpx for async HTTP requests with connection pooling.
"""

import logging
import time
from collections.abc import Iterable
from typing import Any

import httpx

from cartola_analytics.config import Settings, get_settings
from cartola_analytics.errors import DataSourceError
from cartola_analytics.models import Club, TeamSearchResult
from cartola_analytics.services.normalization import (
    as_int,
    first_present,
    normalize_club,
)

logger = logging.getLogger(__name__)

TEAM_BADGE_FIELDS = ("url_escudo_png", "url_escudo_svg", "escudos.60x60")


class CartolaAPIError(DataSourceError):
    """Exception raised for Cartola API errors."""


class CartolaClient:
    """
    Async client for the Cartola FC API.

    Usage:
        async with CartolaClient() as client:
            clubs = await client.get_clubs()
            teams = await client.search_teams("galo")
    """

    _clubs_cache: dict[int, Club] | None = None
    _cache_timestamp: float = 0

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "CartolaClient":
        """Create HTTP client on context entry."""
        self._client = httpx.AsyncClient(
            base_url=self.settings.cartola_base_url,
            timeout=httpx.Timeout(self.settings.cartola_timeout),
            headers={
                "User-Agent": "Mozilla/5.0",
                "Accept": "application/json,text/plain,*/*",
                "Accept-Language": "pt-BR,pt;q=0.9,en;q=0.8",
                "Referer": "https://cartola.globo.com/",
            },
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close HTTP client on context exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise RuntimeError(
                "CartolaClient must be used as async context manager: "
                "async with CartolaClient() as client: ..."
            )
        return self._client

    async def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request to the Cartola API."""
        try:
            response = await self.client.get(endpoint, params=params)
        except httpx.HTTPError as e:
            raise CartolaAPIError(f"API request failed: {endpoint} ({e})") from e

        if response.status_code == 404:
            return None

        if response.status_code != 200:
            raise CartolaAPIError(
                f"API request failed: {endpoint}",
                status_code=response.status_code,
            )

        if not response.text.strip():
            raise CartolaAPIError(f"Empty response from {endpoint}")

        try:
            return response.json()
        except ValueError as e:
            raise CartolaAPIError(f"Non-JSON response from {endpoint}") from e

    # ==================== Club Endpoints ====================

    async def get_clubs(self, force_refresh: bool = False) -> dict[int, Club]:
        """
        Get all clubs with caching.

        Args:
            force_refresh: Force refresh of cache

        Returns:
            Dict mapping club id to Club
        """
        current_time = time.time()
        cache_valid = (
            CartolaClient._clubs_cache is not None
            and (current_time - CartolaClient._cache_timestamp)
            < self.settings.clubs_cache_ttl
        )

        if not force_refresh and cache_valid:
            return CartolaClient._clubs_cache  # type: ignore

        data = await self._get("/clubes")
        if not data:
            return {}

        rows = data.values() if isinstance(data, dict) else data
        clubs: dict[int, Club] = {}
        for row in rows:
            club = normalize_club(row)
            if club is not None:
                clubs[club.club_id] = club

        CartolaClient._clubs_cache = clubs
        CartolaClient._cache_timestamp = current_time
        return clubs

    # ==================== Team Endpoints ====================

    async def search_teams(self, query: str) -> list[TeamSearchResult]:
        """
        Search fantasy teams by name.

        Args:
            query: Search text; fewer than 2 characters returns nothing

        Returns:
            Matching teams that have both a slug and a name
        """
        query = query.strip()
        if len(query) < 2:
            return []

        data = await self._get("/times", params={"q": query})
        if data is None:
            return []

        rows = data if isinstance(data, list) else (data.get("times") or data.get("resultado") or [])

        teams = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            slug = row.get("slug")
            name = first_present(row, ("nome", "name"))
            if not slug or not name:
                continue
            teams.append(
                TeamSearchResult(
                    id=as_int(first_present(row, ("time_id", "id"))),
                    slug=str(slug),
                    name=str(name),
                    cartoleiro=row.get("nome_cartola"),
                    badge_url=first_present(row, TEAM_BADGE_FIELDS),
                )
            )
        return teams


class CartolaClubDirectory:
    """Club directory served from the live Cartola club list."""

    def __init__(self, client: CartolaClient):
        self.client = client

    async def get_clubs(self, club_ids: Iterable[int]) -> dict[int, Club]:
        wanted = set(club_ids)
        if not wanted:
            return {}
        clubs = await self.client.get_clubs()
        return {cid: clubs[cid] for cid in wanted if cid in clubs}
