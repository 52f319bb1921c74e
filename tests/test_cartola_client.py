"""Tests for the Cartola HTTP client using httpx.MockTransport."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from pytest import MonkeyPatch

from cartola_analytics.clients.cartola import CartolaAPIError, CartolaClient, CartolaClubDirectory
from cartola_analytics.config import Settings


CLUBS_PAYLOAD = {
    "262": {
        "id": 262,
        "nome": "Flamengo",
        "abreviacao": "FLA",
        "escudos": {"60x60": "https://img/fla60.png", "30x30": "https://img/fla30.png"},
    },
    "275": {"id": 275, "nome": "Palmeiras", "abreviacao": "PAL", "escudos": {}},
}


@pytest.fixture(autouse=True)
def reset_club_cache(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setattr(CartolaClient, "_clubs_cache", None)
    monkeypatch.setattr(CartolaClient, "_cache_timestamp", 0)


def _run(handler: Callable[[httpx.Request], httpx.Response], call: Callable[[CartolaClient], Any]) -> Any:
    async def main() -> Any:
        transport = httpx.MockTransport(handler)
        async with CartolaClient(Settings(), transport=transport) as client:
            return await call(client)

    return asyncio.run(main())


def test_get_clubs_resolves_badges() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/clubes"
        return httpx.Response(200, json=CLUBS_PAYLOAD)

    clubs = _run(handler, lambda client: client.get_clubs())

    assert set(clubs) == {262, 275}
    assert clubs[262].badge_url == "https://img/fla60.png"
    assert clubs[262].abbreviation == "FLA"
    assert clubs[275].badge_url is None


def test_get_clubs_is_cached() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(200, json=CLUBS_PAYLOAD)

    async def twice(client: CartolaClient) -> None:
        await client.get_clubs()
        await client.get_clubs()

    _run(handler, twice)
    assert calls == ["/clubes"]


def test_club_directory_returns_requested_clubs_only() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=CLUBS_PAYLOAD)

    clubs = _run(handler, lambda client: CartolaClubDirectory(client).get_clubs({262, 1}))
    assert list(clubs) == [262]


def test_http_errors_raise_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with pytest.raises(CartolaAPIError) as exc_info:
        _run(handler, lambda client: client.get_clubs())
    assert exc_info.value.status_code == 503


def test_non_json_and_transport_errors_raise_api_error() -> None:
    def html_handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    def broken_handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(CartolaAPIError):
        _run(html_handler, lambda client: client.get_clubs())
    with pytest.raises(CartolaAPIError):
        _run(broken_handler, lambda client: client.get_clubs())


def test_search_teams_maps_and_filters_rows() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/times"
        assert request.url.params["q"] == "galo"
        return httpx.Response(
            200,
            json=[
                {"time_id": 1, "slug": "galo-doido", "nome": "Galo Doido", "nome_cartola": "Ana", "url_escudo_png": "p.png"},
                {"id": 2, "slug": "sem-nome"},
                {"time_id": 3, "slug": "galo-2", "nome": "Galo 2", "escudos": {"60x60": "e.png"}},
            ],
        )

    teams = _run(handler, lambda client: client.search_teams(" galo "))

    assert [t.slug for t in teams] == ["galo-doido", "galo-2"]
    assert teams[0].id == 1
    assert teams[0].cartoleiro == "Ana"
    assert teams[0].badge_url == "p.png"
    assert teams[1].badge_url == "e.png"


def test_short_search_skips_upstream() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("should not be called")

    assert _run(handler, lambda client: client.search_teams("g")) == []


def test_client_requires_context_manager() -> None:
    with pytest.raises(RuntimeError):
        CartolaClient(Settings()).client
