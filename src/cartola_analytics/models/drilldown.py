"""
Drill-down models listing the picks behind an efficiency card.
"""

from pydantic import BaseModel, Field


class DrilldownRow(BaseModel):
    """A single pick within a drill-down."""

    round: int | None = None
    player_name: str = ""
    club_id: int | None = None
    club_name: str = "—"
    club_badge_url: str | None = None
    points: float | None = None
    ok: bool = Field(default=False, description="Clean sheet, or goal/assist for offense")


class DrilldownResponse(BaseModel):
    team_id: int
    kind: str
    pos: str
    is_home: bool | None = None
    rows: list[DrilldownRow] = Field(default_factory=list)
