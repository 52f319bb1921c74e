"""Tests for the snapshot-backed data store."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from cartola_analytics.clients.store import SnapshotStore
from cartola_analytics.errors import DataSourceError


def test_rounds_are_scoped_to_team_and_ordered(store: SnapshotStore) -> None:
    rounds = asyncio.run(store.get_rounds(42))
    assert [r["round"] for r in rounds] == [1, 2, 3]


def test_picks_are_joined_with_round_number(store: SnapshotStore) -> None:
    picks = asyncio.run(store.get_picks(42))

    assert len(picks) == 4
    assert sorted({p["round"] for p in picks}) == [1, 2, 3]
    assert all(p["team_id"] == 42 for p in picks)


def test_picks_venue_filter(store: SnapshotStore) -> None:
    home = asyncio.run(store.get_picks(42, is_home=True))
    away = asyncio.run(store.get_picks(42, is_home=False))

    assert {p["round"] for p in home} == {1, 3}
    assert len(home) == 2
    assert len(away) == 2


def test_picks_of_rounds_not_imported_are_ignored() -> None:
    store = SnapshotStore(
        team_rounds=[{"id": 1, "team_id": 5, "round": 1}],
        picks=[
            {"team_round_id": 1, "team_id": 5, "position_id": 5},
            {"team_round_id": 2, "team_id": 5, "position_id": 5},
            {"round": 1, "team_id": 5, "position_id": 4},
            {"round": 9, "team_id": 5, "position_id": 4},
        ],
    )
    picks = asyncio.run(store.get_picks(5))

    assert [p["position_id"] for p in picks] == [5, 4]


def test_unknown_team(store: SnapshotStore) -> None:
    assert asyncio.run(store.get_team(1)) is None
    assert asyncio.run(store.get_rounds(1)) == []
    assert asyncio.run(store.get_picks(1)) == []


def test_clubs_lookup(store: SnapshotStore) -> None:
    clubs = asyncio.run(store.get_clubs({282, 999}))

    assert list(clubs) == [282]
    assert clubs[282].badge_url == "https://img/cam60.png"


def test_from_file(tmp_path: Path, snapshot: dict) -> None:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot), encoding="utf-8")

    store = SnapshotStore.from_file(path)

    assert asyncio.run(store.get_team(42))["name"] == "Galo Doido"


def test_from_file_errors(tmp_path: Path) -> None:
    with pytest.raises(DataSourceError):
        SnapshotStore.from_file(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(DataSourceError):
        SnapshotStore.from_file(bad)


def test_counts(store: SnapshotStore) -> None:
    assert store.counts() == {"teams": 1, "team_rounds": 4, "picks": 5, "clubs": 1}


def test_malformed_rows_are_skipped(snapshot: dict) -> None:
    snapshot["teams"].append("junk")
    snapshot["team_rounds"].append(None)
    snapshot["picks"].extend([None, 7])
    snapshot["clubs"].append(["not", "a", "club"])

    store = SnapshotStore.from_dict(snapshot)

    assert store.counts() == {"teams": 1, "team_rounds": 4, "picks": 5, "clubs": 1}
    assert [r["round"] for r in asyncio.run(store.get_rounds(42))] == [1, 2, 3]
    assert len(asyncio.run(store.get_picks(42))) == 4


def test_table_that_is_not_a_list_is_ignored(snapshot: dict) -> None:
    snapshot["picks"] = {"oops": True}
    snapshot["teams"] = 3

    store = SnapshotStore.from_dict(snapshot)

    assert store.counts()["picks"] == 0
    assert store.counts()["teams"] == 0


def test_from_file_with_malformed_rows(tmp_path: Path, snapshot: dict) -> None:
    snapshot["teams"].append("junk")
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot), encoding="utf-8")

    store = SnapshotStore.from_file(path)

    assert asyncio.run(store.get_team(42))["name"] == "Galo Doido"
