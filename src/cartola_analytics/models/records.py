"""
Normalized input records consumed by the analytics engine.
"""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Position(IntEnum):
    """Cartola position ids."""

    GOALKEEPER = 1
    FULL_BACK = 2
    CENTER_BACK = 3
    MIDFIELDER = 4
    FORWARD = 5
    COACH = 6

    @property
    def label(self) -> str:
        return POSITION_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "Position | None":
        """Resolve a label such as "ATA" to its position, or None."""
        for position, value in POSITION_LABELS.items():
            if value == label.upper():
                return position
        return None


POSITION_LABELS: dict[Position, str] = {
    Position.GOALKEEPER: "GOL",
    Position.FULL_BACK: "LAT",
    Position.CENTER_BACK: "ZAG",
    Position.MIDFIELDER: "MEI",
    Position.FORWARD: "ATA",
    Position.COACH: "TEC",
}

KNOWN_POSITION_IDS = frozenset(int(p) for p in Position)

CAPTAIN_ROW_ID = 99
CAPTAIN_ROW_LABEL = "CAP"
TOTAL_ROW_ID = 0
TOTAL_ROW_LABEL = "TOT"


def position_label(position_id: int) -> str:
    """Label for a position id, falling back to POS_<id> for unknown ids."""
    if position_id in KNOWN_POSITION_IDS:
        return Position(position_id).label
    return f"POS_{position_id}"


class RoundRecord(BaseModel):
    """A team's result for one imported round."""

    model_config = ConfigDict(frozen=True)

    round: int = Field(ge=1, description="Round number")
    points: float | None = None
    asset_value: float | None = Field(default=None, description="Patrimônio after the round")


class PickRecord(BaseModel):
    """One roster slot filled by one player in one round."""

    model_config = ConfigDict(frozen=True)

    round_ref: int | None = Field(default=None, description="Round number the pick belongs to")
    position_id: int
    position_name: str = ""
    player_id: int | None = None
    player_name: str = ""
    club_id: int | None = None
    points: float | None = None
    is_captain: bool = False
    is_home: bool | None = None
    had_clean_sheet: bool = False
    had_goal: bool = False
    had_assist: bool = False
    scout_counts: dict[str, Any] | None = None

    @property
    def has_known_position(self) -> bool:
        return self.position_id in KNOWN_POSITION_IDS


class Club(BaseModel):
    """A real-world club with its resolved badge."""

    club_id: int
    name: str = ""
    abbreviation: str | None = None
    badge_url: str | None = None


class TeamInfo(BaseModel):
    """Identity of an imported fantasy team."""

    team_id: int
    slug: str | None = None
    name: str | None = None
    cartoleiro_name: str | None = None
    badge_url: str | None = None
