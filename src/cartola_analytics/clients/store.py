"""
Data Stores

Collaborator protocols for the imported team data, and a store backed by a
JSON snapshot of the import tables (fantasy_teams, team_rounds, picks, clubs).
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

from cartola_analytics.errors import DataSourceError
from cartola_analytics.models import Club
from cartola_analytics.services.normalization import (
    as_int,
    as_optional_bool,
    normalize_club,
)

logger = logging.getLogger(__name__)


class TeamStore(Protocol):
    async def get_team(self, team_id: int) -> Mapping[str, Any] | None: ...


class RoundStore(Protocol):
    async def get_rounds(self, team_id: int) -> list[Mapping[str, Any]]: ...


class PickStore(Protocol):
    async def get_picks(
        self, team_id: int, is_home: bool | None = None
    ) -> list[Mapping[str, Any]]: ...


class ClubDirectory(Protocol):
    async def get_clubs(self, club_ids: Iterable[int]) -> dict[int, Club]: ...


class TeamDataStore(TeamStore, RoundStore, PickStore, Protocol):
    """Everything the dashboard reads about a team."""


def _table(data: Mapping[str, Any], name: str) -> list[Any]:
    rows = data.get(name)
    if rows is None:
        return []
    if not isinstance(rows, list):
        logger.warning("Snapshot table %s is not a list; ignoring it", name)
        return []
    return rows


def _mapping_rows(rows: Iterable[Any], name: str) -> list[Mapping[str, Any]]:
    """Keep the rows that are objects; anything else is skipped with a warning."""
    rows = list(rows)
    kept = [row for row in rows if isinstance(row, Mapping)]
    skipped = len(rows) - len(kept)
    if skipped:
        logger.warning("Skipped %d malformed rows in snapshot table %s", skipped, name)
    return kept


class SnapshotStore:
    """
    In-memory store over a snapshot of the import tables.

    Snapshot layout:
        {
            "teams": [{"team_id": 1, "slug": "...", "name": "...", ...}],
            "team_rounds": [{"id": 10, "team_id": 1, "round": 1, "points": 50.2, "patrimonio": 100.0}],
            "picks": [{"team_round_id": 10, "team_id": 1, "position_id": 5, ...}],
            "clubs": [{"id": 262, "name": "Flamengo", "badge_60": "https://..."}]
        }

    Implements TeamDataStore and ClubDirectory.
    """

    def __init__(
        self,
        teams: Iterable[Mapping[str, Any]] = (),
        team_rounds: Iterable[Mapping[str, Any]] = (),
        picks: Iterable[Mapping[str, Any]] = (),
        clubs: Iterable[Mapping[str, Any]] = (),
    ):
        self._teams: dict[int, Mapping[str, Any]] = {}
        for team in _mapping_rows(teams, "teams"):
            team_id = as_int(team.get("team_id", team.get("id")))
            if team_id is not None:
                self._teams[team_id] = team

        self._team_rounds = _mapping_rows(team_rounds, "team_rounds")
        self._picks = _mapping_rows(picks, "picks")

        self._clubs: dict[int, Club] = {}
        for row in _mapping_rows(clubs, "clubs"):
            club = normalize_club(row)
            if club is not None:
                self._clubs[club.club_id] = club

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SnapshotStore":
        return cls(
            teams=_table(data, "teams"),
            team_rounds=_table(data, "team_rounds"),
            picks=_table(data, "picks"),
            clubs=_table(data, "clubs"),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "SnapshotStore":
        """
        Load a snapshot from a JSON file.

        Raises:
            DataSourceError: If the file cannot be read or parsed
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise DataSourceError(f"Could not load snapshot {path}: {e}") from e

        if not isinstance(data, Mapping):
            raise DataSourceError(f"Snapshot {path} must be a JSON object")

        logger.debug("Loaded snapshot %s", path)
        return cls.from_dict(data)

    # ==================== Teams ====================

    async def get_team(self, team_id: int) -> Mapping[str, Any] | None:
        return self._teams.get(team_id)

    # ==================== Rounds ====================

    def _rounds_for(self, team_id: int) -> list[Mapping[str, Any]]:
        rows = [r for r in self._team_rounds if as_int(r.get("team_id")) == team_id]
        rows.sort(key=lambda r: as_int(r.get("round")) or 0)
        return rows

    async def get_rounds(self, team_id: int) -> list[Mapping[str, Any]]:
        return self._rounds_for(team_id)

    # ==================== Picks ====================

    async def get_picks(
        self, team_id: int, is_home: bool | None = None
    ) -> list[Mapping[str, Any]]:
        """
        Picks of the team's imported rounds, joined with their round number.

        Args:
            team_id: Fantasy team id
            is_home: Keep only home (True) or away (False) picks; None keeps all

        Returns:
            Raw pick rows with a "round" key
        """
        round_by_id: dict[int, int | None] = {}
        imported_rounds: set[int] = set()
        for row in self._rounds_for(team_id):
            round_number = as_int(row.get("round"))
            row_id = as_int(row.get("id"))
            if row_id is not None:
                round_by_id[row_id] = round_number
            if round_number is not None:
                imported_rounds.add(round_number)

        picks = []
        for row in self._picks:
            if as_int(row.get("team_id")) != team_id:
                continue

            team_round_id = as_int(row.get("team_round_id"))
            if team_round_id is not None:
                if team_round_id not in round_by_id:
                    continue
                round_number = round_by_id[team_round_id]
            else:
                round_number = as_int(row.get("round"))
                if round_number not in imported_rounds:
                    continue

            if is_home is not None and as_optional_bool(row.get("is_home")) is not is_home:
                continue

            picks.append({**row, "round": round_number})
        return picks

    # ==================== Clubs ====================

    async def get_clubs(self, club_ids: Iterable[int]) -> dict[int, Club]:
        return {cid: self._clubs[cid] for cid in set(club_ids) if cid in self._clubs}

    def counts(self) -> dict[str, int]:
        """Number of rows held per table."""
        return {
            "teams": len(self._teams),
            "team_rounds": len(self._team_rounds),
            "picks": len(self._picks),
            "clubs": len(self._clubs),
        }
