"""
Efficiency Drill-down Service

Lists the individual picks behind a clean-sheet or offensive efficiency card.
"""

from collections.abc import Callable, Sequence
from typing import Any

from cartola_analytics.clients.store import ClubDirectory, PickStore
from cartola_analytics.errors import InvalidRequestError
from cartola_analytics.models import (
    TOTAL_ROW_LABEL,
    DrilldownResponse,
    DrilldownRow,
    PickRecord,
    Position,
)
from cartola_analytics.services.dashboard import lookup_clubs, read_source, validate_team_id
from cartola_analytics.services.efficiency import (
    DEFENSIVE_POSITIONS,
    OFFENSIVE_POSITIONS,
    is_clean_sheet,
    is_goal_involvement,
)
from cartola_analytics.services.normalization import normalize_picks

UNKNOWN_CLUB_NAME = "—"


def resolve_positions(pos: str, allowed: Sequence[Position]) -> tuple[str, list[Position]]:
    """
    Resolve a position label (or TOT) against the positions a card covers.

    Raises:
        InvalidRequestError: If the label is not one of the allowed positions
    """
    label = (pos or TOTAL_ROW_LABEL).strip().upper()
    if label == TOTAL_ROW_LABEL:
        return label, list(allowed)

    position = Position.from_label(label)
    if position is None or position not in allowed:
        choices = "|".join([p.label for p in allowed] + [TOTAL_ROW_LABEL])
        raise InvalidRequestError(f"invalid pos {pos!r} (use {choices})")
    return label, [position]


class DrilldownService:
    """Service for listing the picks behind efficiency cards."""

    def __init__(self, store: PickStore, clubs: ClubDirectory):
        self.store = store
        self.clubs = clubs

    async def offense(
        self, team_id: Any, pos: str = TOTAL_ROW_LABEL, is_home: bool | None = None
    ) -> DrilldownResponse:
        """Picks of ATA/MEI/LAT/ZAG; ok means a goal or an assist."""
        return await self._drilldown(
            "offense", team_id, pos, is_home, OFFENSIVE_POSITIONS, is_goal_involvement
        )

    async def clean_sheets(
        self, team_id: Any, pos: str = TOTAL_ROW_LABEL, is_home: bool | None = None
    ) -> DrilldownResponse:
        """Picks of GOL/LAT/ZAG; ok means a clean sheet."""
        return await self._drilldown(
            "sg", team_id, pos, is_home, DEFENSIVE_POSITIONS, is_clean_sheet
        )

    async def _drilldown(
        self,
        kind: str,
        team_id: Any,
        pos: str,
        is_home: bool | None,
        allowed: Sequence[Position],
        is_ok: Callable[[PickRecord], bool],
    ) -> DrilldownResponse:
        team_id = validate_team_id(team_id)
        label, positions = resolve_positions(pos, allowed)
        wanted = {int(p) for p in positions}

        pick_rows = await read_source(self.store.get_picks(team_id, is_home), "picks")
        picks = [p for p in normalize_picks(pick_rows) if p.position_id in wanted]

        clubs = await lookup_clubs(
            self.clubs, {p.club_id for p in picks if p.club_id is not None}
        )

        rows = []
        for pick in picks:
            club = clubs.get(pick.club_id) if pick.club_id is not None else None
            rows.append(
                DrilldownRow(
                    round=pick.round_ref,
                    player_name=pick.player_name,
                    club_id=pick.club_id,
                    club_name=(club.name if club else "") or UNKNOWN_CLUB_NAME,
                    club_badge_url=club.badge_url if club else None,
                    points=pick.points,
                    ok=is_ok(pick),
                )
            )
        rows.sort(key=lambda r: (r.round is None, r.round or 0))

        return DrilldownResponse(
            team_id=team_id, kind=kind, pos=label, is_home=is_home, rows=rows
        )
