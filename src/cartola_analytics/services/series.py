"""
Round Series Builder

Builds the fixed-length per-round series (points, moving average and asset
value) that back the season charts.
"""

from collections.abc import Iterable, Sequence

from cartola_analytics.models import (
    AssetValueSeriesEntry,
    PointsSeriesEntry,
    RoundRecord,
    RoundSeries,
)

SEASON_ROUNDS = 38
MOVING_AVERAGE_WINDOW = 3


def index_rounds(rounds: Iterable[RoundRecord]) -> dict[int, RoundRecord]:
    """Key rounds by number. Duplicate rounds resolve to the last one seen."""
    by_round: dict[int, RoundRecord] = {}
    for record in rounds:
        by_round[record.round] = record
    return by_round


def moving_average(
    values: Sequence[float | None], window: int = MOVING_AVERAGE_WINDOW
) -> list[float | None]:
    """
    Trailing moving average that skips missing values.

    Entry i averages the non-null values among the last `window` entries
    ending at i. A window with no values yields None.

    Example:
        >>> moving_average([10, None, 20, 30])
        [10.0, 10.0, 15.0, 25.0]
    """
    averages: list[float | None] = []
    for i in range(len(values)):
        present = [v for v in values[max(0, i - window + 1) : i + 1] if v is not None]
        averages.append(sum(present) / len(present) if present else None)
    return averages


def build_round_series(
    rounds: Iterable[RoundRecord],
    season_rounds: int = SEASON_ROUNDS,
    window: int = MOVING_AVERAGE_WINDOW,
) -> RoundSeries:
    """
    Build the per-round series for a whole season.

    Rounds that were not imported stay as None holes; they are never dropped
    or interpolated.

    Args:
        rounds: Round records in any order, possibly sparse or duplicated
        season_rounds: Season length
        window: Moving-average window size

    Returns:
        RoundSeries with exactly `season_rounds` entries per series
    """
    by_round = index_rounds(rounds)
    round_numbers = range(1, season_rounds + 1)

    points = [by_round[rd].points if rd in by_round else None for rd in round_numbers]
    averages = moving_average(points, window)

    return RoundSeries(
        points=[
            PointsSeriesEntry(round=rd, points=pts, moving_avg=avg)
            for rd, pts, avg in zip(round_numbers, points, averages)
        ],
        asset_value=[
            AssetValueSeriesEntry(
                round=rd,
                asset_value=by_round[rd].asset_value if rd in by_round else None,
            )
            for rd in round_numbers
        ],
    )


def season_points_total(rounds: Iterable[RoundRecord]) -> float:
    """Sum of the points of every imported round with a value."""
    return sum(
        (r.points for r in index_rounds(rounds).values() if r.points is not None),
        0.0,
    )


def current_asset_value(rounds: Iterable[RoundRecord]) -> float | None:
    """Most recent non-null asset value, scanning from the latest round back."""
    by_round = index_rounds(rounds)
    for rd in sorted(by_round, reverse=True):
        if by_round[rd].asset_value is not None:
            return by_round[rd].asset_value
    return None
