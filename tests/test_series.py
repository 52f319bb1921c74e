"""Tests for the round series builder."""

from __future__ import annotations

import pytest

from cartola_analytics.services.series import (
    build_round_series,
    current_asset_value,
    moving_average,
    season_points_total,
)


def test_moving_average_skips_missing_rounds() -> None:
    assert moving_average([10, None, 20, 30]) == [10, 10, 15, 25]


def test_moving_average_empty_window_is_none() -> None:
    assert moving_average([None, None, 6, None, None, None]) == [None, None, 6, 6, 6, None]


def test_moving_average_never_looks_ahead() -> None:
    base = moving_average([1, 2, 3, None])
    changed = moving_average([1, 2, 3, 100])
    assert base[:3] == changed[:3]


def test_series_always_has_38_rounds(make_round) -> None:
    series = build_round_series([make_round(3, 40.0, 110.0)])

    assert len(series.points) == 38
    assert len(series.asset_value) == 38
    assert [e.round for e in series.points] == list(range(1, 39))
    assert series.points[2].points == 40.0
    assert series.asset_value[2].asset_value == 110.0
    assert all(e.points is None for i, e in enumerate(series.points) if i != 2)
    assert series.asset_value[37].asset_value is None


def test_series_with_no_rounds_is_all_holes() -> None:
    series = build_round_series([])

    assert len(series.points) == 38
    assert all(e.points is None and e.moving_avg is None for e in series.points)


def test_series_moving_average_matches_points(make_round) -> None:
    rounds = [make_round(1, 10.0), make_round(3, 20.0), make_round(4, 30.0)]
    series = build_round_series(rounds)

    assert [e.moving_avg for e in series.points[:6]] == [10, 10, 15, 25, 25, 30]


def test_duplicate_rounds_last_one_wins(make_round) -> None:
    series = build_round_series([make_round(1, 10.0), make_round(1, 12.0)])
    assert series.points[0].points == 12.0


def test_rounds_accepted_in_any_order(make_round) -> None:
    series = build_round_series([make_round(2, 20.0), make_round(1, 10.0)])
    assert [e.points for e in series.points[:2]] == [10.0, 20.0]


def test_totals(make_round) -> None:
    rounds = [
        make_round(1, 10.0, 100.0),
        make_round(2, None, 105.0),
        make_round(3, 7.5, None),
    ]

    assert season_points_total(rounds) == pytest.approx(17.5)
    assert current_asset_value(rounds) == 105.0


def test_totals_without_data() -> None:
    assert season_points_total([]) == 0.0
    assert current_asset_value([]) is None
