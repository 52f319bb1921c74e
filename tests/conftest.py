"""Shared fixtures for the analytics tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from cartola_analytics.clients.store import SnapshotStore
from cartola_analytics.models import PickRecord, RoundRecord


@pytest.fixture
def make_pick() -> Callable[..., PickRecord]:
    def factory(**overrides: Any) -> PickRecord:
        data: dict[str, Any] = {
            "round_ref": 1,
            "position_id": 5,
            "player_id": 100,
            "player_name": "Player",
            "club_id": 262,
            "points": 1.0,
        }
        data.update(overrides)
        return PickRecord(**data)

    return factory


@pytest.fixture
def make_round() -> Callable[..., RoundRecord]:
    def factory(round: int, points: float | None = None, asset_value: float | None = None) -> RoundRecord:
        return RoundRecord(round=round, points=points, asset_value=asset_value)

    return factory


@pytest.fixture
def snapshot() -> dict[str, Any]:
    """Three imported rounds for team 42; round 2 has no points."""
    return {
        "teams": [
            {
                "team_id": 42,
                "slug": "galo-doido",
                "name": "Galo Doido",
                "cartoleiro_name": "Ana",
                "badge_url": "https://img/team.png",
            }
        ],
        "team_rounds": [
            {"id": 10, "team_id": 42, "round": 1, "points": 5.0, "patrimonio": 100.0},
            {"id": 11, "team_id": 42, "round": 2, "points": None, "patrimonio": 101.5},
            {"id": 12, "team_id": 42, "round": 3, "points": 15.0, "patrimonio": None},
            {"id": 99, "team_id": 7, "round": 1, "points": 80.0, "patrimonio": 90.0},
        ],
        "picks": [
            {
                "team_round_id": 10,
                "team_id": 42,
                "atleta_id": 1,
                "atleta_name": "Hulk",
                "position_id": 5,
                "club_id": 282,
                "points": 5.0,
                "is_captain": True,
                "is_home": True,
                "had_sg": False,
                "had_goal": False,
                "had_assist": False,
                "scouts": {"FD": 1, "FC": 2},
            },
            {
                "team_round_id": 11,
                "team_id": 42,
                "atleta_id": 1,
                "atleta_name": "Hulk",
                "position_id": 5,
                "club_id": 282,
                "points": None,
                "is_captain": False,
                "is_home": False,
                "had_sg": False,
                "had_goal": False,
                "had_assist": False,
                "scouts": None,
            },
            {
                "team_round_id": 12,
                "team_id": 42,
                "atleta_id": 1,
                "atleta_name": "Hulk",
                "position_id": 5,
                "club_id": 282,
                "points": 15.0,
                "is_captain": False,
                "is_home": True,
                "had_sg": False,
                "had_goal": True,
                "had_assist": False,
                "scouts": {"G": 1, "FD": "2", "XX": 9},
            },
            {
                "team_round_id": 12,
                "team_id": 42,
                "atleta_id": 2,
                "atleta_name": "Everson",
                "position_id": 1,
                "club_id": 999,
                "points": 7.0,
                "is_captain": False,
                "is_home": False,
                "had_sg": True,
                "had_goal": False,
                "had_assist": False,
                "scouts": {"SG": 1, "DE": 1},
            },
            {
                "team_round_id": 99,
                "team_id": 7,
                "atleta_id": 3,
                "atleta_name": "Other",
                "position_id": 5,
                "points": 50.0,
            },
        ],
        "clubs": [
            {"id": 282, "name": "Atlético-MG", "badge_30": "https://img/cam30.png", "badge_60": "https://img/cam60.png"},
        ],
    }


@pytest.fixture
def store(snapshot: dict[str, Any]) -> SnapshotStore:
    return SnapshotStore.from_dict(snapshot)
