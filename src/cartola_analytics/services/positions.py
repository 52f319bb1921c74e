"""
Positional Averager

Average points per position plus a synthetic captain row.
"""

from collections import defaultdict
from collections.abc import Iterable

from cartola_analytics.models import (
    CAPTAIN_ROW_ID,
    CAPTAIN_ROW_LABEL,
    PickRecord,
    Position,
    PositionAverage,
)


def average_points_by_position(picks: Iterable[PickRecord]) -> list[PositionAverage]:
    """
    Average points per position, in position-id order, followed by the captain row.

    Only picks with a known position and a numeric point value are counted.
    A captain pick counts both for its position and for the captain row.

    Args:
        picks: Normalized picks (already venue-filtered)

    Returns:
        Seven PositionAverage rows: GOL, LAT, ZAG, MEI, ATA, TEC, CAP
    """
    sums: dict[int, float] = defaultdict(float)
    counts: dict[int, int] = defaultdict(int)
    captain_sum = 0.0
    captain_count = 0

    for pick in picks:
        if not pick.has_known_position or pick.points is None:
            continue

        sums[pick.position_id] += pick.points
        counts[pick.position_id] += 1

        if pick.is_captain:
            captain_sum += pick.points
            captain_count += 1

    rows = [
        PositionAverage(
            position_id=int(position),
            position=position.label,
            n=counts[position],
            avg_points=sums[position] / counts[position] if counts[position] else None,
        )
        for position in Position
    ]
    rows.append(
        PositionAverage(
            position_id=CAPTAIN_ROW_ID,
            position=CAPTAIN_ROW_LABEL,
            n=captain_count,
            avg_points=captain_sum / captain_count if captain_count else None,
        )
    )
    return rows
