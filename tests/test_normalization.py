"""Tests for the record normalization boundary."""

from __future__ import annotations

from cartola_analytics.services.normalization import (
    first_present,
    normalize_club,
    normalize_pick,
    normalize_picks,
    normalize_round,
    normalize_rounds,
    normalize_team,
    pick_badge,
)


def test_first_present_follows_priority_and_dotted_paths() -> None:
    row = {"b": None, "c": 3, "escudos": {"60x60": "big"}}

    assert first_present(row, ("a", "b", "c")) == 3
    assert first_present(row, ("escudos.60x60", "c")) == "big"
    assert first_present(row, ("x", "escudos.30x30")) is None


def test_normalize_round_coerces_values() -> None:
    record = normalize_round({"round": "4", "points": 55.3, "patrimonio": 120})

    assert record is not None
    assert record.round == 4
    assert record.points == 55.3
    assert record.asset_value == 120.0


def test_normalize_round_nulls_non_numeric_values() -> None:
    record = normalize_round({"round": 1, "points": "12.5", "patrimonio": True})

    assert record is not None
    assert record.points is None
    assert record.asset_value is None


def test_rounds_outside_season_are_dropped() -> None:
    rows = [{"round": 0}, {"round": 39}, {"round": "x"}, "junk", {"round": 38, "points": 1.0}]
    records = normalize_rounds(rows)

    assert [r.round for r in records] == [38]


def test_normalize_pick_reads_import_columns() -> None:
    pick = normalize_pick(
        {
            "round": 3,
            "position_id": "2",
            "atleta_id": 77,
            "atleta_name": "Guilherme Arana",
            "club_id": 282,
            "points": 9.1,
            "is_captain": True,
            "is_home": False,
            "had_sg": True,
            "had_goal": False,
            "had_assist": True,
            "scouts": {"SG": 1, "A": 1},
        }
    )

    assert pick is not None
    assert pick.round_ref == 3
    assert pick.position_id == 2
    assert pick.position_name == "LAT"
    assert pick.player_id == 77
    assert pick.player_name == "Guilherme Arana"
    assert pick.is_captain is True
    assert pick.is_home is False
    assert pick.had_clean_sheet is True
    assert pick.had_assist is True
    assert pick.scout_counts == {"SG": 1, "A": 1}


def test_pick_flags_fall_back_to_scouts() -> None:
    pick = normalize_pick({"position_id": 3, "scouts": {"SG": 1, "G": "1"}})

    assert pick is not None
    assert pick.had_clean_sheet is True
    assert pick.had_goal is True
    assert pick.had_assist is False


def test_malformed_pick_fields_default_instead_of_failing() -> None:
    pick = normalize_pick({"position_id": "GOL", "points": "NaN", "scouts": "broken", "is_home": None})

    assert pick is not None
    assert pick.position_id == 0
    assert pick.has_known_position is False
    assert pick.points is None
    assert pick.scout_counts is None
    assert pick.is_home is None


def test_non_mapping_picks_are_dropped() -> None:
    assert normalize_picks([None, 3, {"position_id": 5}])[0].position_id == 5
    assert len(normalize_picks([None, 3, {"position_id": 5}])) == 1


def test_badge_fallback_order() -> None:
    assert pick_badge({"badge_30": "s", "badge_60": "l"}) == "l"
    assert pick_badge({"escudos": {"45x45": "m"}, "shield_svg": "z"}) == "m"
    assert pick_badge({"name": "no badge"}) is None


def test_normalize_club_from_cartola_payload() -> None:
    club = normalize_club(
        {"id": 262, "nome": "Flamengo", "abreviacao": "FLA", "escudos": {"60x60": "https://img/60.png"}}
    )

    assert club is not None
    assert club.club_id == 262
    assert club.name == "Flamengo"
    assert club.abbreviation == "FLA"
    assert club.badge_url == "https://img/60.png"
    assert normalize_club({"nome": "no id"}) is None


def test_normalize_team() -> None:
    team = normalize_team({"slug": "galo", "nome": "Galo", "nome_cartola": " "}, 5)

    assert team.team_id == 5
    assert team.name == "Galo"
    assert team.cartoleiro_name is None


def test_scout_codes_are_read_as_text() -> None:
    pick = normalize_pick({"position_id": 5, "scouts": {1: 2, "G": 1}})

    assert pick is not None
    assert pick.scout_counts == {"1": 2, "G": 1}
    assert pick.had_goal is True
