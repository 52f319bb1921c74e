"""
Record Normalization

The single boundary where untyped rows from stores and upstream APIs become
strict RoundRecord / PickRecord / Club / TeamInfo models. Everything past this
module works on validated records only.

Malformed values are coerced or defaulted, never raised: a row that cannot be
turned into a record at all is dropped.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from cartola_analytics.models import (
    Club,
    PickRecord,
    RoundRecord,
    TeamInfo,
    position_label,
)

# Candidate field names, evaluated in priority order
ROUND_FIELDS = ("round", "rodada", "rodada_id")
ROUND_POINTS_FIELDS = ("points", "pontos", "pontuacao")
ASSET_VALUE_FIELDS = ("asset_value", "patrimonio")

PICK_ROUND_FIELDS = ("round_ref", "round", "rodada")
POSITION_ID_FIELDS = ("position_id", "posicao_id")
POSITION_NAME_FIELDS = ("position_name",)
PLAYER_ID_FIELDS = ("player_id", "atleta_id")
PLAYER_NAME_FIELDS = ("player_name", "atleta_name", "apelido", "nome")
CLUB_ID_FIELDS = ("club_id", "clube_id")
PICK_POINTS_FIELDS = ("points", "pontos_num", "pontuacao")
SCOUT_FIELDS = ("scout_counts", "scouts", "scout")
CLEAN_SHEET_FIELDS = ("had_clean_sheet", "had_sg")

BADGE_FIELDS = (
    "badge_60",
    "badge_45",
    "badge_30",
    "badge_url",
    "escudos.60x60",
    "escudos.45x45",
    "escudos.30x30",
    "escudo_png",
    "escudo_svg",
    "url_escudo_png",
    "url_escudo_svg",
    "shield_url",
    "shield_png",
    "shield_svg",
)


def _lookup(row: Mapping[str, Any], field: str) -> Any:
    """Read a field, following dotted paths into nested mappings."""
    if field in row:
        return row[field]
    value: Any = row
    for part in field.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return None
        value = value[part]
    return value


def first_present(row: Mapping[str, Any], candidates: Sequence[str]) -> Any:
    """
    Return the first candidate field whose value is not None.

    Args:
        row: Raw record
        candidates: Field names (dotted paths allowed) in priority order

    Returns:
        The first present value, or None
    """
    for field in candidates:
        value = _lookup(row, field)
        if value is not None:
            return value
    return None


def as_number(value: Any) -> float | None:
    """Finite int/float values as float; anything else is None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def as_count(value: Any) -> float | None:
    """Like as_number, but also accepts numeric strings."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    return as_number(value)


def as_int(value: Any) -> int | None:
    """Integral numbers and numeric strings as int; anything else is None."""
    number = as_count(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def as_optional_bool(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "t", "yes"):
            return True
        if lowered in ("false", "0", "f", "no", ""):
            return False
    return bool(value)


def _as_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _flag(
    row: Mapping[str, Any],
    fields: Sequence[str],
    scouts: Mapping[str, Any] | None,
    scout_code: str,
) -> bool:
    """Read a boolean flag, deriving it from the scout map when the row lacks it."""
    value = first_present(row, fields)
    if value is not None:
        return bool(as_optional_bool(value))
    if scouts is not None:
        count = as_count(scouts.get(scout_code))
        return bool(count)
    return False


# ==================== Rounds ====================


def normalize_round(row: Any, season_rounds: int = 38) -> RoundRecord | None:
    """Convert a raw round row; rows without a round in 1..season_rounds are dropped."""
    if not isinstance(row, Mapping):
        return None

    round_number = as_int(first_present(row, ROUND_FIELDS))
    if round_number is None or not 1 <= round_number <= season_rounds:
        return None

    return RoundRecord(
        round=round_number,
        points=as_number(first_present(row, ROUND_POINTS_FIELDS)),
        asset_value=as_number(first_present(row, ASSET_VALUE_FIELDS)),
    )


def normalize_rounds(rows: Iterable[Any], season_rounds: int = 38) -> list[RoundRecord]:
    """Normalize a collection of round rows, preserving input order."""
    records = []
    for row in rows:
        record = normalize_round(row, season_rounds)
        if record is not None:
            records.append(record)
    return records


# ==================== Picks ====================


def normalize_pick(row: Any) -> PickRecord | None:
    """
    Convert a raw pick row into a PickRecord.

    A missing position id becomes 0. Picks with an unknown position id are kept
    here and excluded later by every aggregation. Boolean flags missing from
    the row are derived from the scout map (SG, G, A).
    """
    if not isinstance(row, Mapping):
        return None

    raw_scouts = first_present(row, SCOUT_FIELDS)
    scouts = (
        {str(code): count for code, count in raw_scouts.items()}
        if isinstance(raw_scouts, Mapping)
        else None
    )

    position_id = as_int(first_present(row, POSITION_ID_FIELDS)) or 0
    position_name = _as_text(first_present(row, POSITION_NAME_FIELDS)) or position_label(position_id)

    return PickRecord(
        round_ref=as_int(first_present(row, PICK_ROUND_FIELDS)),
        position_id=position_id,
        position_name=position_name,
        player_id=as_int(first_present(row, PLAYER_ID_FIELDS)),
        player_name=_as_text(first_present(row, PLAYER_NAME_FIELDS)),
        club_id=as_int(first_present(row, CLUB_ID_FIELDS)),
        points=as_number(first_present(row, PICK_POINTS_FIELDS)),
        is_captain=bool(as_optional_bool(row.get("is_captain"))),
        is_home=as_optional_bool(row.get("is_home")),
        had_clean_sheet=_flag(row, CLEAN_SHEET_FIELDS, scouts, "SG"),
        had_goal=_flag(row, ("had_goal",), scouts, "G"),
        had_assist=_flag(row, ("had_assist",), scouts, "A"),
        scout_counts=scouts,
    )


def normalize_picks(rows: Iterable[Any]) -> list[PickRecord]:
    """Normalize a collection of pick rows, preserving input order."""
    records = []
    for row in rows:
        record = normalize_pick(row)
        if record is not None:
            records.append(record)
    return records


# ==================== Clubs & teams ====================


def pick_badge(row: Mapping[str, Any]) -> str | None:
    """Resolve a badge image reference from the first present badge field."""
    badge = first_present(row, BADGE_FIELDS)
    return str(badge) if badge is not None else None


def normalize_club(row: Any) -> Club | None:
    if not isinstance(row, Mapping):
        return None

    club_id = as_int(first_present(row, ("club_id", "id")))
    if club_id is None:
        return None

    abbreviation = first_present(row, ("abbr", "abreviacao", "abbreviation"))
    return Club(
        club_id=club_id,
        name=_as_text(first_present(row, ("name", "nome"))),
        abbreviation=_as_text(abbreviation) or None,
        badge_url=pick_badge(row),
    )


def normalize_team(row: Mapping[str, Any], team_id: int) -> TeamInfo:
    """Convert a raw team row, keeping the requested id as the identity."""
    return TeamInfo(
        team_id=team_id,
        slug=_as_text(row.get("slug")) or None,
        name=_as_text(first_present(row, ("name", "nome"))) or None,
        cartoleiro_name=_as_text(first_present(row, ("cartoleiro_name", "nome_cartola"))) or None,
        badge_url=_as_text(first_present(row, ("badge_url", "url_escudo_png", "url_escudo_svg"))) or None,
    )
